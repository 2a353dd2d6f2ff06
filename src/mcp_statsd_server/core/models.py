"""Core data models for decoded StatsD messages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Union


class Status(str, Enum):
    """Service-check health status."""

    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def code(self) -> int:
        return _STATUS_CODES[self]

    @classmethod
    def from_code(cls, text: str) -> Status:
        """Map a wire status code to a Status; unrecognized codes become UNKNOWN."""
        return _STATUS_BY_TEXT.get(text, cls.UNKNOWN)


_STATUS_CODES = {
    Status.OK: 0,
    Status.WARNING: 1,
    Status.CRITICAL: 2,
    Status.UNKNOWN: 3,
}
_STATUS_BY_TEXT = {
    "0": Status.OK,
    "1": Status.WARNING,
    "2": Status.CRITICAL,
}


class MetricKind(str, Enum):
    """Discriminator shared by every metric variant."""

    GAUGE = "gauge"
    COUNTER = "counter"
    TIMING = "timing"
    HISTOGRAM = "histogram"
    METER = "meter"
    DISTRIBUTION = "distribution"
    SET = "set"
    SERVICE_CHECK = "service_check"


@dataclass(frozen=True, slots=True)
class Gauge:
    value: float
    sample_rate: float | None = None

    kind = MetricKind.GAUGE


@dataclass(frozen=True, slots=True)
class Counter:
    value: float
    sample_rate: float | None = None

    kind = MetricKind.COUNTER


@dataclass(frozen=True, slots=True)
class Timing:
    value: float
    sample_rate: float | None = None

    kind = MetricKind.TIMING


@dataclass(frozen=True, slots=True)
class Histogram:
    value: float
    sample_rate: float | None = None

    kind = MetricKind.HISTOGRAM


@dataclass(frozen=True, slots=True)
class Meter:
    value: float
    sample_rate: float | None = None

    kind = MetricKind.METER


@dataclass(frozen=True, slots=True)
class Distribution:
    value: float
    sample_rate: float | None = None

    kind = MetricKind.DISTRIBUTION


@dataclass(frozen=True, slots=True)
class Set:
    value: float
    sample_rate: float | None = None

    kind = MetricKind.SET


@dataclass(frozen=True, slots=True)
class ServiceCheck:
    """Health-check event (the `_sc|...` shape)."""

    status: Status = Status.UNKNOWN
    timestamp: float | None = None  # seconds since epoch, as sent
    hostname: str | None = None
    message: str | None = None

    kind = MetricKind.SERVICE_CHECK


NumericMetric = Union[Gauge, Counter, Timing, Histogram, Meter, Distribution, Set]
Metric = Union[NumericMetric, ServiceCheck]


@dataclass(frozen=True, slots=True)
class Message:
    """One decoded line: a name, optional tags and exactly one metric variant."""

    name: str
    metric: Metric
    tags: Mapping[str, str] | None = None  # None when no `#` section was present

    def __post_init__(self) -> None:
        # Snapshot the tags behind a read-only view.
        if self.tags is not None:
            object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def __hash__(self) -> int:
        tags = None if self.tags is None else frozenset(self.tags.items())
        return hash((self.name, self.metric, tags))
