"""Reading and creating the blogger's configuration file."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config"

_KEYS = {
    "SiteDir": "site_dir",
    "PostsDir": "posts_dir",
    "ImageDir": "image_dir",
    "SourceImageDir": "source_image_dir",
    "TemplateFile": "template_file",
    "DateTimeFormat": "date_time_format",
}


@dataclass
class Config:
    """Settings that control where and how pages are written."""

    site_dir: str = ""
    posts_dir: str = ""
    image_dir: str = ""
    source_image_dir: str = ""
    template_file: str = ""
    date_time_format: str = ""


def config_dir() -> Path:
    """Return the directory that holds the configuration file."""
    env = os.environ.get
    if sys.platform == "win32":
        base = env("APPDATA", "")
    elif sys.platform == "darwin":
        base = os.path.join(env("HOME"), "Library", "Application Support") if env("HOME") else ""
    else:
        base = env("XDG_CONFIG_HOME", "")
        if base and not os.path.isabs(base):
            raise OSError("path in $XDG_CONFIG_HOME is relative")
        if not base and env("HOME"):
            base = os.path.join(env("HOME"), ".config")
    if not base:
        raise OSError("user configuration directory is not defined")
    return Path(base) / "vvblogger"


def default_config_text(home: str | os.PathLike[str]) -> str:
    """Return the contents written to a freshly created configuration file."""
    return (
        f"SiteDir={os.fspath(home)}\n"
        "PostsDir=posts/\n"
        "ImageDir=img/\n"
        "SourceImageDir=\n"
        "TemplateFile=\n"
        "DateTimeFormat=2006-01-021504"
    )


def make_config(directory: str | os.PathLike[str] | None = None) -> Path:
    """Create the configuration file with defaults unless it exists; return its path."""
    folder = Path(directory) if directory is not None else config_dir()
    path = folder / CONFIG_FILE_NAME
    if path.exists():
        log.info("config already exists..")
        return path
    folder.mkdir(parents=True, exist_ok=True)
    path.write_text(default_config_text(Path.home()), encoding="utf-8")
    return path


def parse_config(text: str) -> Config:
    """Build a Config from ``Key=value`` lines; unknown keys are ignored."""
    config = Config()
    for line in text.splitlines():
        key, _, value = line.partition("=")
        if key in _KEYS:
            setattr(config, _KEYS[key], value.strip())
    return config


def load_config(directory: str | os.PathLike[str] | None = None) -> Config:
    """Read and parse the configuration file."""
    folder = Path(directory) if directory is not None else config_dir()
    return parse_config((folder / CONFIG_FILE_NAME).read_text(encoding="utf-8"))