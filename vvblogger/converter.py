"""Converting a markdown note into a post whose body is an HTML template."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from datetime import datetime

from .builder import Post
from .config import Config
from .frontmatter import _read_raw, _scan_lines, parse_front_matter
from .links import handle_links
from .lists import handle_lists
from .text import handle_paragraphs, handle_text

log = logging.getLogger(__name__)

CONTENT_OPEN = '{{ define "content" }}'
CONTENT_CLOSE = "{{ end }}"
FRONT_MATTER_FENCE = "---"

_HEADING = re.compile(r"^#{0,6}[\t\n\f\r ].")


def handle_heading(line: str, post: Post) -> str:
    """Turn a heading line into an HTML heading.

    The first level-one heading of a post becomes its title instead and
    yields an empty string.
    """
    count = line.count("#")
    text = line.replace("#", "")
    if count == 1 and not post.title:
        post.title = text
        return ""
    return f"<h{count}>{text.strip()}</h{count}>"


def cleanup(content: str) -> str:
    """Drop the escaping backslash from escaped ``*`` and ``~``."""
    return content.replace("\\*", "*").replace("\\~", "~")


def convert(
    lines: Iterable[str],
    markdown_path: str | os.PathLike[str],
    config: Config,
    now: datetime | None = None,
) -> Post:
    """Convert note lines into a post.

    ``markdown_path`` is the note the lines came from; its upload and update
    times are stamped into it.
    """
    post = Post()
    body = [CONTENT_OPEN]
    front_matter: list[str] = []
    in_front_matter = False

    for raw in lines:
        line = raw.strip()
        if in_front_matter:
            if FRONT_MATTER_FENCE in line:
                in_front_matter = False
            else:
                front_matter.append(line)
        elif FRONT_MATTER_FENCE in line:
            in_front_matter = True
        elif line:
            formatted = handle_heading(raw, post) if _HEADING.search(line) else raw
            body.append(formatted + "\n")
    body.append(CONTENT_CLOSE)

    post.front_matter = parse_front_matter(front_matter, markdown_path, config, now)

    text = "".join(body)
    log.debug("%s", text)
    text = handle_text(text)
    text = handle_lists(text)
    text = handle_paragraphs(text)
    text = handle_links(text, config)
    post.body = cleanup(text)
    return post


def read(file_name: str | os.PathLike[str], config: Config) -> Post:
    """Read a markdown note from disk and convert it."""
    lines = _scan_lines(_read_raw(file_name))
    return convert(lines, file_name, config)


__all__ = ["cleanup", "convert", "handle_heading", "read"]