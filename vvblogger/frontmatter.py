"""Front matter of a note: tags and upload/update time stamps."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from datetime import datetime

from .builder import FrontMatter
from .config import Config
from .timefmt import format_time

log = logging.getLogger(__name__)

# Every front matter value is expected to be written as a list item.
_FIELD = re.compile(r"[^-*]:\Z")
_VALUE = re.compile(r"[\t\n\f\r ]*-[^0-9][\t\n\f\r ]*")

_STAMP_PREFIX = "   - "


def _scan_lines(text: str) -> list[str]:
    """Split text into lines, dropping line terminators and a trailing ``\\r``."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _read_raw(path: str | os.PathLike[str]) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def stamp_time(
    markdown_path: str | os.PathLike[str],
    field: str,
    layout: str,
    now: datetime | None = None,
) -> str:
    """Record the current time in the note under every line naming ``field``.

    The time is written in ``layout`` as a list item right after each line
    containing ``field``, and the note is rewritten in place. Returns the
    formatted time.
    """
    moment = datetime.now() if now is None else now
    stamp = format_time(moment, layout)

    lines: list[str] = []
    for line in _scan_lines(_read_raw(markdown_path)):
        lines.append(line)
        if field in line:
            lines.append(_STAMP_PREFIX + stamp)

    with open(markdown_path, "w", encoding="utf-8", newline="") as handle:
        handle.write("\n".join(lines))
    return stamp


def parse_front_matter(
    lines: Iterable[str],
    markdown_path: str | os.PathLike[str],
    config: Config,
    now: datetime | None = None,
) -> FrontMatter:
    """Collect front matter values and stamp the note's upload and update times.

    The upload time is stamped only when the note has none yet; the update
    time is stamped on every run and replaces whatever the note held.
    """
    result = FrontMatter()
    current_field = ""
    for line in lines:
        if _FIELD.search(line):
            current_field = line
            continue
        if not _VALUE.search(line):
            continue
        value = _VALUE.sub("", line)
        if current_field == "tags:":
            result.tags.append(value)
        elif current_field == "created:":
            result.created = value
        elif current_field == "uploaded:":
            result.uploaded = value
            log.debug("frontmatter value: %s", value)
        elif current_field == "updated:":
            result.updated = value

    moment = datetime.now() if now is None else now
    layout = config.date_time_format
    if not result.uploaded:
        result.uploaded = stamp_time(markdown_path, "uploaded", layout, moment)
    result.updated = stamp_time(markdown_path, "updated", layout, moment)
    return result


__all__ = ["parse_front_matter", "stamp_time"]