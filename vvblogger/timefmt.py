"""Date and time layouts written against the reference time
``Mon Jan 2 15:04:05 MST 2006``."""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import datetime, timedelta

_MONTHS = ("January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December")
_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_ELEMENT = re.compile(
    r"January|Jan|Monday|Mon|MST|0[1-6]|002|15|1|2006|2|_2(?!006)|__2|[345]|PM|pm"
    r"|[Z-]07(?::00:00|0000|:00|00)?"
    r"|[.,](?:0+|9+)(?![0-9])"
)


def _yday(t: datetime) -> int:
    return t.timetuple().tm_yday


def _offset(t: datetime, text: str) -> str:
    total = int((t.utcoffset() or timedelta(0)).total_seconds())
    if text[0] == "Z" and total == 0:
        return "Z"
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    sep = ":" if ":" in text else ""
    parts = [f"{hours:02d}", f"{minutes:02d}", f"{seconds:02d}"][: (len(text.replace(":", "")) - 1) // 2]
    return sign + sep.join(parts)


def _zone(t: datetime) -> str:
    if t.tzinfo is None:
        return "UTC"
    return t.tzname() or _offset(t, "-0700")


# element -> (strptime directive or None, renderer)
_FIXED = {
    "January": ("%B", lambda t: _MONTHS[t.month - 1]),
    "Jan": ("%b", lambda t: _MONTHS[t.month - 1][:3]),
    "Monday": ("%A", lambda t: _DAYS[t.weekday()]),
    "Mon": ("%a", lambda t: _DAYS[t.weekday()][:3]),
    "MST": ("%Z", _zone),
    "01": ("%m", lambda t: f"{t.month:02d}"),
    "02": ("%d", lambda t: f"{t.day:02d}"),
    "03": ("%I", lambda t: f"{t.hour % 12 or 12:02d}"),
    "04": ("%M", lambda t: f"{t.minute:02d}"),
    "05": ("%S", lambda t: f"{t.second:02d}"),
    "06": ("%y", lambda t: f"{t.year % 100:02d}"),
    "002": ("%j", lambda t: f"{_yday(t):03d}"),
    "__2": (None, lambda t: f"{_yday(t):>3}"),
    "15": ("%H", lambda t: f"{t.hour:02d}"),
    "1": ("%m", lambda t: str(t.month)),
    "2006": ("%Y", lambda t: f"{t.year:04d}"),
    "2": ("%d", lambda t: str(t.day)),
    "_2": ("%d", lambda t: f"{t.day:>2}"),
    "3": ("%I", lambda t: str(t.hour % 12 or 12)),
    "4": ("%M", lambda t: str(t.minute)),
    "5": ("%S", lambda t: str(t.second)),
    "PM": ("%p", lambda t: "PM" if t.hour >= 12 else "AM"),
    "pm": ("%p", lambda t: "pm" if t.hour >= 12 else "am"),
}


def _tokens(layout: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_element, text) pieces of a layout."""
    position = 0
    for match in _ELEMENT.finditer(layout):
        if match.start() > position:
            yield False, layout[position:match.start()]
        yield True, match.group()
        position = match.end()
    if position < len(layout):
        yield False, layout[position:]


def _directive(text: str) -> str:
    if text in _FIXED and _FIXED[text][0]:
        return _FIXED[text][0]
    if text[0] in ".,":
        return text[0] + "%f"
    if text[0] in "Z-" and text[1:] != "07":
        return "%z"
    raise ValueError(f"layout element {text!r} has no strftime equivalent")


def _render(text: str, t: datetime) -> str:
    if text in _FIXED:
        return _FIXED[text][1](t)
    if text[0] in ".,":
        digits = f"{t.microsecond:06d}000"[: len(text) - 1]
        if text[1] == "9":
            digits = digits.rstrip("0")
            if not digits:
                return ""
        return text[0] + digits
    return _offset(t, text)


def go_layout_to_strftime(layout: str) -> str:
    """Translate a reference-time layout into a ``strptime`` format string."""
    return "".join(
        _directive(text) if element else text.replace("%", "%%")
        for element, text in _tokens(layout)
    )


def format_time(moment: datetime, layout: str) -> str:
    """Format ``moment`` according to a reference-time layout."""
    return "".join(
        _render(text, moment) if element else text for element, text in _tokens(layout)
    )


def parse_time(text: str, layout: str) -> datetime:
    """Parse ``text`` written in a reference-time layout; ValueError if it does not match."""
    return datetime.strptime(text, go_layout_to_strftime(layout))