"""Top-level decode entry points."""

from __future__ import annotations

from .errors import ParseError
from .metric_parser import parse_metric
from .models import Message
from .service_check_parser import is_service_check, parse_service_check


def parse(line: str) -> Message:
    """Decode one StatsD/DogStatsD line into a Message.

    Raises ParseError when the line is rejected. The function is pure: the
    same line always yields an equal result.
    """
    if is_service_check(line):
        return parse_service_check(line)
    return parse_metric(line)


def try_parse(line: str) -> Message | ParseError:
    """Like parse(), but return the ParseError instead of raising it."""
    try:
        return parse(line)
    except ParseError as e:
        return e
