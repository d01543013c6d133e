"""Inline text decorations (bold, italics, strikethrough) and paragraphs."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

log = logging.getLogger(__name__)

# Whitespace as the markdown rules understand it: ASCII only, no vertical tab.
_WS = r"\t\n\f\r "

_ITALICS = re.compile(r"(?:^|[^\\*])\*([^" + _WS + r"^*].+?[^" + _WS + r"])\*[^*]")
_BOLD = re.compile(r"(?:^|[^\\*])\*\*([^" + _WS + r"*].+?[^" + _WS + r"])\*\*")
_BOLD_ITALICS = re.compile(
    r"(?:^|[^\\*])\*\*\*([^" + _WS + r"*].+?[^" + _WS + r"])\*\*\*"
)
_STRIKETHROUGH = re.compile(r"(?:^|[^\\~])~~([^" + _WS + r"~].+?[^" + _WS + r"])~~")

# Lines that must not be wrapped in a paragraph: template actions, blank
# lines and lines carrying list or heading tags.
_PARAGRAPH_BREAK = re.compile(
    r"(\{\{)|(^[" + _WS + r"]*\Z)|<(.{0,2}l.{0,2}|h[0-9])>"
)


def tag_replacer(
    match: str, opener: str, closer: str, char: str, trim: Sequence[int]
) -> str:
    """Replace the outermost ``char`` markers in ``match`` with HTML tags.

    The first character of ``match`` is the context character that the
    pattern consumed before the marker and is kept as it is. ``trim`` gives
    the offsets applied to the first and last marker positions to cut out
    the decorated text. When the markers cannot be found the match is
    returned unchanged.
    """
    prefix, body = match[:1], match[1:]
    start = body.find(char)
    end = body.rfind(char)
    if start == -1 or end == -1 or start == end:
        log.debug("tag replacer failed on %r", match)
        return match
    inner = body[start + trim[0]:end + trim[1]]
    return prefix + body[:start] + opener + inner + closer + body[end + 1:]


def handle_text(content: str) -> str:
    """Turn markdown emphasis and strikethrough markers into HTML tags."""
    result = _ITALICS.sub(
        lambda m: tag_replacer(m.group(0), "<i>", "</i>", "*", (1, 0)), content
    )
    result = _BOLD.sub(
        lambda m: tag_replacer(m.group(0), "<b>", "</b>", "*", (2, -1)), result
    )
    result = _BOLD_ITALICS.sub(
        lambda m: tag_replacer(m.group(0), "<b><i>", "</i></b>", "*", (3, -2)),
        result,
    )
    result = _STRIKETHROUGH.sub(
        lambda m: tag_replacer(m.group(0), "<s>", "</s>", "~", (2, -1)), result
    )
    return result


def handle_paragraphs(content: str) -> str:
    """Wrap plain text lines in ``<p>`` tags.

    A paragraph is closed on the same line when the following line is a
    break line (or there is no following line); otherwise it is closed at
    the start of the next line.
    """
    lines = content.split("\n")
    formatted: list[str] = []
    paragraph_open = False
    for line, following in zip(lines, [*lines[1:], None]):
        prefix = ""
        if paragraph_open:
            prefix = "</p>\n"
            paragraph_open = False
        if _PARAGRAPH_BREAK.search(line):
            formatted.append(prefix + line)
            continue
        closes_here = following is None or bool(_PARAGRAPH_BREAK.search(following))
        formatted.append(prefix + "<p>" + line + ("</p>" if closes_here else ""))
        paragraph_open = not closes_here
    return "\n".join(formatted)


__all__ = ["handle_paragraphs", "handle_text", "tag_replacer"]