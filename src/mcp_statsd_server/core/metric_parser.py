"""Metric line decoding (`name:value|type[|@rate][|#tags]`)."""

from __future__ import annotations

from collections.abc import Callable

from .cursor import Cursor
from .errors import FloatParseError, ParseError, ParseErrorKind
from .models import (
    Counter,
    Distribution,
    Gauge,
    Histogram,
    Message,
    Meter,
    NumericMetric,
    Set,
    Timing,
)
from .tags import parse_tags

METRIC_TYPES: dict[str, Callable[[float, float | None], NumericMetric]] = {
    "ms": Timing,
    "c": Counter,
    "g": Gauge,
    "m": Meter,
    "h": Histogram,
    "d": Distribution,
    "s": Set,
}


def parse_metric(line: str) -> Message:
    """Decode a metric line, raising ParseError on the first failure.

    Fields are checked left to right; the type code is resolved last, so a
    well-formed line with an unknown type reports UNKNOWN_METRIC_TYPE.
    """
    cursor = Cursor(line)
    if not len(cursor):
        raise ParseError(ParseErrorKind.EMPTY_INPUT, line)

    name = cursor.take_until(":")
    if not name:
        raise ParseError(ParseErrorKind.NO_NAME, line)

    try:
        value = cursor.take_float_until("|")
    except FloatParseError as e:
        raise ParseError(ParseErrorKind.VALUE_NOT_FLOAT, line) from e

    type_code = cursor.take_until("|")

    sample_rate: float | None = None
    if cursor.peek() == "@":
        cursor.skip()
        try:
            sample_rate = cursor.take_float_until("|")
        except FloatParseError as e:
            raise ParseError(ParseErrorKind.SAMPLE_RATE_NOT_FLOAT, line) from e

    tags = parse_tags(cursor) if cursor.peek() == "#" else None

    factory = METRIC_TYPES.get(type_code)
    if factory is None:
        raise ParseError(ParseErrorKind.UNKNOWN_METRIC_TYPE, line)

    return Message(name=name, metric=factory(value, sample_rate), tags=tags)
