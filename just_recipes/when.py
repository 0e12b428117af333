r"""Parse and format the cook and prep durations authored in recipe files.

Recipe authors write durations the way people talk about them (``30m``,
``1h 10m``, ``2 hours``). This module turns that text into
:class:`datetime.timedelta` values and renders totals back out in two forms:

* :func:`format_duration` produces the compact, human-readable form shown on
  recipe pages (``2h 37m``).
* :func:`duration_iso8601` produces the ISO-8601 style duration embedded in
  structured data (``P2H37M``).

Examples
--------
>>> import datetime as dt
>>> format_duration(dt.timedelta(minutes=157))
'2h 37m'
>>> duration_iso8601(dt.timedelta(minutes=70))
'P1H10M'
>>> parse_duration("1h 10min") == dt.timedelta(minutes=70)
True
"""

from __future__ import annotations

import datetime as dt
import re

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400
SECONDS_IN_WEEK = 604800
SECONDS_IN_MONTH = 2_630_016
SECONDS_IN_YEAR = 31_557_600

_UNIT_SECONDS: dict[str, int] = {
    "seconds": 1,
    "second": 1,
    "secs": 1,
    "sec": 1,
    "s": 1,
    "minutes": SECONDS_IN_MINUTE,
    "minute": SECONDS_IN_MINUTE,
    "mins": SECONDS_IN_MINUTE,
    "min": SECONDS_IN_MINUTE,
    "m": SECONDS_IN_MINUTE,
    "hours": SECONDS_IN_HOUR,
    "hour": SECONDS_IN_HOUR,
    "hrs": SECONDS_IN_HOUR,
    "hr": SECONDS_IN_HOUR,
    "h": SECONDS_IN_HOUR,
    "days": SECONDS_IN_DAY,
    "day": SECONDS_IN_DAY,
    "d": SECONDS_IN_DAY,
    "weeks": SECONDS_IN_WEEK,
    "week": SECONDS_IN_WEEK,
    "w": SECONDS_IN_WEEK,
    "months": SECONDS_IN_MONTH,
    "month": SECONDS_IN_MONTH,
    "M": SECONDS_IN_MONTH,
    "years": SECONDS_IN_YEAR,
    "year": SECONDS_IN_YEAR,
    "y": SECONDS_IN_YEAR,
}

DURATION_TOKEN = re.compile(r"\s*(\d+)\s*([A-Za-z]+)")


def parse_duration(text: str) -> dt.timedelta:
    """Parse a human duration such as ``"2h 37min"`` into a timedelta.

    Parameters
    ----------
    text : str
        One or more ``<number><unit>`` tokens, optionally separated by
        whitespace. Units are case-sensitive only for ``M`` (months) versus
        ``m`` (minutes).

    Returns
    -------
    datetime.timedelta
        Sum of every token.

    Raises
    ------
    ValueError
        If the text is empty, contains an unknown unit, or has trailing
        characters that are not part of a token.
    """
    source = text.strip()
    if not source:
        msg = "expected a duration, found an empty string"
        raise ValueError(msg)

    total = 0
    position = 0
    while position < len(source):
        match = DURATION_TOKEN.match(source, position)
        if match is None:
            msg = f"invalid duration {text!r}"
            raise ValueError(msg)
        amount, unit = match.groups()
        if unit not in _UNIT_SECONDS:
            msg = f"unknown time unit {unit!r} in {text!r}"
            raise ValueError(msg)
        total += int(amount) * _UNIT_SECONDS[unit]
        position = match.end()
        while position < len(source) and source[position].isspace():
            position += 1
    return dt.timedelta(seconds=total)


def format_duration(duration: dt.timedelta) -> str:
    """Return the compact human-readable rendering of ``duration``.

    Years, months, and days are spelled out (``1day``, ``3days``); hours,
    minutes, and seconds use single-letter suffixes. Parts are separated by
    a single space and zero parts are omitted. A zero duration renders as
    ``0s``.
    """
    seconds = int(duration.total_seconds())
    if seconds <= 0:
        return "0s"

    years, remainder = divmod(seconds, SECONDS_IN_YEAR)
    months, remainder = divmod(remainder, SECONDS_IN_MONTH)
    days, remainder = divmod(remainder, SECONDS_IN_DAY)
    hours, remainder = divmod(remainder, SECONDS_IN_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_IN_MINUTE)

    parts: list[str] = []
    for value, name in ((years, "year"), (months, "month"), (days, "day")):
        if value:
            parts.append(f"{value}{name}{'s' if value > 1 else ''}")
    for value, suffix in ((hours, "h"), (minutes, "m"), (seconds, "s")):
        if value:
            parts.append(f"{value}{suffix}")
    return " ".join(parts)


def duration_iso8601(duration: dt.timedelta) -> str:
    """Return an ISO-8601 style duration string for ``duration``.

    Weeks and days are emitted before hours, minutes, and seconds. The ``T``
    separator is only written when a week or day part precedes a time part,
    so durations shorter than a day have no ``T`` (``P45S``, ``P2H37M``).
    """
    seconds = int(duration.total_seconds())
    if seconds <= 0:
        return "P"

    parts = ["P"]
    if seconds >= SECONDS_IN_WEEK:
        weeks, seconds = divmod(seconds, SECONDS_IN_WEEK)
        parts.append(f"{weeks}W")
    if seconds >= SECONDS_IN_DAY:
        days, seconds = divmod(seconds, SECONDS_IN_DAY)
        parts.append(f"{days}D")
    if len(parts) > 1 and seconds > 0:
        parts.append("T")
    if seconds >= SECONDS_IN_HOUR:
        hours, seconds = divmod(seconds, SECONDS_IN_HOUR)
        parts.append(f"{hours}H")
    if seconds >= SECONDS_IN_MINUTE:
        minutes, seconds = divmod(seconds, SECONDS_IN_MINUTE)
        parts.append(f"{minutes}M")
    if seconds > 0:
        parts.append(f"{seconds}S")
    return "".join(parts)


__all__ = ["duration_iso8601", "format_duration", "parse_duration"]
