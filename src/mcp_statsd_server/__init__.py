"""Decode StatsD / DogStatsD lines into typed messages.

    >>> from mcp_statsd_server import parse
    >>> parse("gorets:1|c|@0.5").metric
    Counter(value=1.0, sample_rate=0.5)
"""

from __future__ import annotations

from .core import (
    Counter,
    Distribution,
    Gauge,
    Histogram,
    Message,
    Meter,
    Metric,
    MetricKind,
    ParseError,
    ParseErrorKind,
    ServiceCheck,
    Set,
    Status,
    Timing,
    parse,
    try_parse,
)

__all__ = [
    "Counter",
    "Distribution",
    "Gauge",
    "Histogram",
    "Message",
    "Meter",
    "Metric",
    "MetricKind",
    "ParseError",
    "ParseErrorKind",
    "ServiceCheck",
    "Set",
    "Status",
    "Timing",
    "parse",
    "try_parse",
]
