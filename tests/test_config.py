import sys
from pathlib import Path

import pytest

from vvblogger.config import (
    CONFIG_FILE_NAME,
    Config,
    config_dir,
    default_config_text,
    load_config,
    make_config,
    parse_config,
)


def test_default_config_text_layout():
    text = default_config_text("/home/alice")
    assert text == (
        "SiteDir=/home/alice\n"
        "PostsDir=posts/\n"
        "ImageDir=img/\n"
        "SourceImageDir=\n"
        "TemplateFile=\n"
        "DateTimeFormat=2006-01-021504"
    )


def test_default_config_round_trip():
    config = parse_config(default_config_text("/home/alice"))
    assert config == Config(
        site_dir="/home/alice",
        posts_dir="posts/",
        image_dir="img/",
        source_image_dir="",
        template_file="",
        date_time_format="2006-01-021504",
    )


def test_parse_config_trims_values_and_splits_on_first_equals():
    config = parse_config("TemplateFile=  a=b  \r\nImageDir=pics/\n")
    assert config.template_file == "a=b"
    assert config.image_dir == "pics/"


def test_parse_config_ignores_unknown_and_malformed_lines():
    config = parse_config("Colour=red\nno equals here\n SiteDir=/x\nPostsDir=p/")
    assert config == Config(posts_dir="p/")


def test_parse_config_later_value_wins():
    config = parse_config("PostsDir=a/\nPostsDir=b/")
    assert config.posts_dir == "b/"


def test_make_config_creates_default_file(tmp_path):
    folder = tmp_path / "nested" / "vvblogger"
    path = make_config(folder)
    assert path == folder / CONFIG_FILE_NAME
    assert path.read_text(encoding="utf-8") == default_config_text(Path.home())


def test_make_config_keeps_existing_file(tmp_path):
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text("PostsDir=mine/", encoding="utf-8")
    assert make_config(tmp_path) == path
    assert path.read_text(encoding="utf-8") == "PostsDir=mine/"


def test_load_config_reads_file(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text(
        "SiteDir=/srv/site/\nDateTimeFormat=2006-01-02", encoding="utf-8"
    )
    config = load_config(tmp_path)
    assert config.site_dir == "/srv/site/"
    assert config.date_time_format == "2006-01-02"


def test_load_config_after_make_config(tmp_path):
    make_config(tmp_path)
    assert load_config(tmp_path) == parse_config(default_config_text(Path.home()))


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent")


def test_config_dir_uses_xdg_config_home(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert config_dir() == tmp_path / "vvblogger"


def test_config_dir_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config_dir() == tmp_path / ".config" / "vvblogger"


def test_config_dir_rejects_relative_xdg(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
    with pytest.raises(OSError):
        config_dir()