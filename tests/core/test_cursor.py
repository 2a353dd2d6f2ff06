from __future__ import annotations

import math

import pytest

from mcp_statsd_server.core.cursor import Cursor, parse_float
from mcp_statsd_server.core.errors import FloatParseError


def test_take_until() -> None:
    cursor = Cursor("this is a string")

    assert cursor.take_until(" ") == "this"
    assert cursor.pos == 5

    # Not found: the rest of the line, position at the end.
    assert cursor.take_until(".") == "is a string"
    assert cursor.pos == 16


def test_take_until_multiple_stop_chars() -> None:
    cursor = Cursor("a,b|c")
    assert cursor.take_until(",|") == "a"
    assert cursor.take_until(",|") == "b"
    assert cursor.last() == "|"
    assert cursor.take_until(",|") == "c"
    assert cursor.take_until(",|") == ""


def test_take_float_until() -> None:
    cursor = Cursor("10.01|number|string")

    assert cursor.take_float_until("|") == 10.01
    assert cursor.pos == 6

    with pytest.raises(FloatParseError):
        cursor.take_float_until("|")
    assert cursor.pos == 13


def test_take_float_until_empty_fails() -> None:
    cursor = Cursor("|1")
    with pytest.raises(FloatParseError):
        cursor.take_float_until("|")


@pytest.mark.parametrize(
    ("text", "expected"),
    [("1", 1.0), ("-2.5", -2.5), ("+3", 3.0), (".5", 0.5), ("1.", 1.0), ("1e3", 1000.0), ("2E-2", 0.02)],
)
def test_parse_float_accepts_literals(text: str, expected: float) -> None:
    assert parse_float(text) == expected


def test_parse_float_special_values() -> None:
    assert math.isinf(parse_float("inf"))
    assert math.isinf(parse_float("-Infinity"))
    assert math.isnan(parse_float("NaN"))


@pytest.mark.parametrize("text", ["", "aaa", " 1", "1 ", "1_000", "0x10", "1.2.3", "e5", "--1"])
def test_parse_float_rejects(text: str) -> None:
    with pytest.raises(FloatParseError):
        parse_float(text)


def test_peek() -> None:
    cursor = Cursor("this is a string")
    cursor.pos = 10

    assert cursor.peek() == "s"
    assert cursor.pos == 10

    cursor.pos = 16
    assert cursor.peek() is None


def test_last() -> None:
    cursor = Cursor("abcdef")

    assert cursor.last() is None
    assert cursor.pos == 0

    cursor.pos = 3
    assert cursor.last() == "c"


def test_skip() -> None:
    cursor = Cursor("foo#bar")
    cursor.pos = 3
    cursor.skip()
    assert cursor.pos == 4


def test_skip_stops_at_end() -> None:
    cursor = Cursor("ab")
    cursor.skip()
    cursor.skip()
    cursor.skip()
    assert cursor.pos == 2
    assert cursor.peek() is None


def test_trailing_whitespace_trimmed() -> None:
    cursor = Cursor("gorets:1|c\r\n")
    assert len(cursor) == 10
    cursor.take_until(":")
    cursor.take_until("|")
    assert cursor.take_until("|") == "c"


def test_scans_code_points() -> None:
    cursor = Cursor("goretsβ:1|c")
    assert cursor.take_until(":") == "goretsβ"
    assert cursor.peek() == "1"
