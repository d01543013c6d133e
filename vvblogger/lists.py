"""Markdown ordered and unordered lists."""

from __future__ import annotations

import re
from typing import NamedTuple

_WS = r"\t\n\f\r "

_LIST = re.compile(r"^([" + _WS + r"]*)([-+*]|[0-9]+\.|[a-z]\.|[ivxc]+\.)[" + _WS + r"]")
_UNORDERED = re.compile(r"^(?:[" + _WS + r"]*)([-+*]+)[" + _WS + r"]")
_ORDERED = re.compile(r"^(?:[" + _WS + r"]*)([0-9]+\.|[a-z]\.|[ivxc]+\.)[" + _WS + r"]")


class _ListPosition(NamedTuple):
    """A pending closing tag and the indent of the line that opened it."""

    level: int
    tag: str


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _is_list(line: str) -> bool:
    return bool(_LIST.search(line))


def _format_item(
    line: str, prev: str, following: str, stack: list[_ListPosition]
) -> str:
    prev_count = _indent(prev)
    count = _indent(line)
    next_count = _indent(following)
    prev_list = _is_list(prev)
    next_list = _is_list(following)

    swap_next = swap_prev = False
    tag = ""
    if _UNORDERED.search(line):
        tag = "u"
        swap_next = bool(_ORDERED.search(following))
        swap_prev = bool(_ORDERED.search(prev))
    elif _ORDERED.search(line):
        tag = "o"
        swap_next = bool(_UNORDERED.search(following))
        swap_prev = bool(_UNORDERED.search(prev))
    opener = f"<{tag}l>"
    closer = f"</{tag}l>"

    item = _LIST.sub("<li>", line, count=1)
    parts: list[str] = []

    if not prev_list or count > prev_count or (
        prev_list and swap_prev and count == prev_count
    ):
        stack.append(_ListPosition(count, closer))
        parts.append(opener + "\n")
    elif count < prev_count:
        # Walk the stack from the top, emitting the closers of deeper lists.
        for index in reversed(range(len(stack))):
            position = stack[index]
            if position.level > count:
                parts.append(position.tag)
                stack.pop()

    parts.append(item + "</li>")

    if not next_list or (next_count == count and swap_next):
        parts.append("\n" + closer)

    return "".join(parts)


def handle_lists(content: str) -> str:
    """Convert markdown list lines into ``<ul>``/``<ol>`` HTML lists."""
    lines = content.split("\n")
    stack: list[_ListPosition] = []
    formatted: list[str] = []
    for prev, line, following in zip([" ", *lines[:-1]], lines, [*lines[1:], ""]):
        if _is_list(line):
            formatted.append(_format_item(line, prev, following, stack))
        else:
            formatted.append(line)
    return "\n".join(formatted)


__all__ = ["handle_lists"]