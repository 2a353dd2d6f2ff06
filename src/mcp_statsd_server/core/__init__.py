"""StatsD line decoding core.

Contains the cursor, the tag section parser and the metric/service-check
parsers behind `parse`.
"""

from __future__ import annotations

from .decoder import parse, try_parse
from .errors import ParseError, ParseErrorKind
from .models import (
    Counter,
    Distribution,
    Gauge,
    Histogram,
    Message,
    Meter,
    Metric,
    MetricKind,
    NumericMetric,
    ServiceCheck,
    Set,
    Status,
    Timing,
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
    "NumericMetric",
    "ParseError",
    "ParseErrorKind",
    "ServiceCheck",
    "Set",
    "Status",
    "Timing",
    "parse",
    "try_parse",
]
