"""Unit tests for duration parsing and formatting in ``just_recipes.when``.

The pinned values mirror durations that appear in real recipes: short
preparation times, multi-hour braises, and the occasional multi-day cure.
"""

from __future__ import annotations

import datetime as dt

import pytest

from just_recipes.when import duration_iso8601, format_duration, parse_duration


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5m", dt.timedelta(minutes=5)),
        ("2h 37m", dt.timedelta(hours=2, minutes=37)),
        ("1h10min", dt.timedelta(hours=1, minutes=10)),
        ("2 hours", dt.timedelta(hours=2)),
        ("45s", dt.timedelta(seconds=45)),
        ("1w 1h", dt.timedelta(weeks=1, hours=1)),
        ("3days", dt.timedelta(days=3)),
    ],
)
def test_parse_duration(text: str, expected: dt.timedelta) -> None:
    actual = parse_duration(text)
    assert actual == expected, f"{text!r} parsed as {actual!r}"


@pytest.mark.parametrize("text", ["", "soon", "5", "5 parsecs", "1h and 5m"])
def test_parse_duration_rejects_garbage(text: str) -> None:
    with pytest.raises(ValueError, match="duration|unit"):
        parse_duration(text)


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (dt.timedelta(minutes=5), "5m"),
        (dt.timedelta(minutes=157), "2h 37m"),
        (dt.timedelta(minutes=30), "30m"),
        (dt.timedelta(minutes=70), "1h 10m"),
        (dt.timedelta(days=1, hours=2), "1day 2h"),
        (dt.timedelta(days=3), "3days"),
        (dt.timedelta(), "0s"),
    ],
)
def test_format_duration(duration: dt.timedelta, expected: str) -> None:
    assert format_duration(duration) == expected


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (dt.timedelta(), "P"),
        (dt.timedelta(minutes=5), "P5M"),
        (dt.timedelta(minutes=157), "P2H37M"),
        (dt.timedelta(minutes=30), "P30M"),
        (dt.timedelta(minutes=70), "P1H10M"),
        (dt.timedelta(seconds=45), "P45S"),
        (dt.timedelta(weeks=1, hours=1), "P1WT1H"),
        (dt.timedelta(days=2), "P2D"),
    ],
)
def test_duration_iso8601(duration: dt.timedelta, expected: str) -> None:
    """Only a week or day part followed by a time part introduces ``T``."""
    actual = duration_iso8601(duration)
    assert actual == expected, f"{duration!r} rendered as {actual!r}"


def test_human_form_parses_back() -> None:
    duration = dt.timedelta(hours=2, minutes=37)
    assert parse_duration(format_duration(duration)) == duration
