"""Markdown links, image embeds and wiki links."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import quote

from .config import Config

log = logging.getLogger(__name__)

_LINK = re.compile(r"\[[^\\]*\]\(.*\)")
_WIKI_LINK = re.compile(r"\[\[[a-zA-Z0-9\t\n\f\r ]+\]\]")

_IMAGE_EXTENSIONS = frozenset(
    {
        ".png", ".PNG", ".jpg", ".JPG", ".jpeg", ".JPEG",
        ".avif", ".AVIF", ".webp", ".WEBP", ".gif", ".GIF",
    }
)


def _base_name(path: str) -> str:
    """Return the last element of a slash-separated path."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _path_escape(segment: str) -> str:
    """Percent-encode a single URL path segment."""
    return quote(segment, safe="$&+:=@")


def copy_image(name: str, config: Config) -> str:
    """Copy an image from the source image folder into the site.

    A missing source image is only reported; other read errors propagate.
    Returns the site-relative path of the image.
    """
    original = Path(config.source_image_dir + name)
    try:
        data = original.read_bytes()
    except FileNotFoundError:
        log.warning("image file %s does not exist in vault directory!", name)
    else:
        try:
            Path(config.site_dir + config.image_dir + name).write_bytes(data)
        except OSError:
            log.warning("failed to copy image file!")
    return "img/" + name


def _replace_link(match: re.Match[str], config: Config) -> str:
    found = match.group(0)
    text = found[found.find("[") + 1:found.find("]")]
    url = found[found.find("(") + 1:found.find(")")]
    is_external = url.startswith("http")

    basename = _base_name(url)
    dot = basename.find(".")
    extension = basename[dot:] if dot >= 0 else ""

    if extension in _IMAGE_EXTENSIONS:
        source = url if is_external else copy_image(basename, config)
        return f"<img src={source} alt={text}></img>"
    return f"<a href={url}>{text}</a>"


def _replace_wiki_link(match: re.Match[str], config: Config) -> str:
    target = match.group(0).removeprefix("[[").removesuffix("]]")
    url = _path_escape(target).removeprefix("/")
    return f"<a href={config.posts_dir}{url}.html>{target}</a>"


def handle_links(content: str, config: Config) -> str:
    """Convert markdown links, image embeds and wiki links to HTML."""
    formatted = []
    for line in content.split("\n"):
        line = _LINK.sub(lambda m: _replace_link(m, config), line)
        line = _WIKI_LINK.sub(lambda m: _replace_wiki_link(m, config), line)
        formatted.append(line)
    result = "\n".join(formatted)
    log.debug("%s", result)
    return result


__all__ = ["copy_image", "handle_links"]