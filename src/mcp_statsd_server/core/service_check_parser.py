"""Service-check line decoding.

Shape: ``_sc|name|status[|d:timestamp][|h:hostname][|#tags][|m:message]``.
Optional sections are order-fixed and recognized only by their leading
marker character.
"""

from __future__ import annotations

from .cursor import Cursor
from .errors import FloatParseError, ParseError, ParseErrorKind
from .models import Message, ServiceCheck, Status
from .tags import parse_tags

SERVICE_CHECK_MARKER = "_sc"


def is_service_check(line: str) -> bool:
    """True when the line starts with the `_sc` marker token.

    The marker must be the whole first `|`-delimited token, so metric names
    that merely begin with `_sc` (`_scheduler.runs:1|c`) stay metrics.
    """
    if not line.startswith(SERVICE_CHECK_MARKER):
        return False
    rest = line[len(SERVICE_CHECK_MARKER) :]
    return rest.startswith("|") or not rest.rstrip()


def _take_field(cursor: Cursor) -> str:
    cursor.skip()  # marker char
    cursor.skip()  # `:`
    return cursor.take_until("|")


def parse_service_check(line: str) -> Message:
    """Decode a service-check line, raising ParseError on failure.

    The status never fails: codes other than 0, 1 and 2 (or no code at all)
    decode as Status.UNKNOWN.
    """
    cursor = Cursor(line)
    if not len(cursor):
        raise ParseError(ParseErrorKind.EMPTY_INPUT, line)

    cursor.take_until("|")  # marker

    name = cursor.take_until("|")
    if not name:
        raise ParseError(ParseErrorKind.NO_NAME, line)

    status = Status.from_code(cursor.take_until("|"))

    timestamp: float | None = None
    if cursor.peek() == "d":
        cursor.skip()
        cursor.skip()
        try:
            timestamp = cursor.take_float_until("|")
        except FloatParseError as e:
            raise ParseError(ParseErrorKind.VALUE_NOT_FLOAT, line) from e

    hostname = _take_field(cursor) if cursor.peek() == "h" else None
    tags = parse_tags(cursor) if cursor.peek() == "#" else None
    message = _take_field(cursor) if cursor.peek() == "m" else None

    return Message(
        name=name,
        metric=ServiceCheck(
            status=status,
            timestamp=timestamp,
            hostname=hostname,
            message=message,
        ),
        tags=tags,
    )
