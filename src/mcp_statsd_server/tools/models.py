"""Tool response models and limits."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from mcp_statsd_server.core.errors import ParseErrorKind
from mcp_statsd_server.core.models import MetricKind, Status


class DecodedMetric(BaseModel):
    # inf/nan are valid on the wire but not in JSON
    model_config = ConfigDict(ser_json_inf_nan="null")

    kind: MetricKind = Field(description="Metric variant.")
    value: float | None = Field(default=None, description="Numeric value (absent for service checks).")
    sample_rate: float | None = Field(
        default=None, description="Sample rate when `|@rate` was sent; never defaulted."
    )
    status: Status | None = Field(default=None, description="Service-check status.")
    timestamp: float | None = Field(default=None, description="Service-check `d:` timestamp.")
    hostname: str | None = Field(default=None, description="Service-check `h:` hostname.")
    message: str | None = Field(default=None, description="Service-check `m:` message.")


class DecodedMessage(BaseModel):
    name: str = Field(description="Metric or check name.")
    tags: dict[str, str] | None = Field(
        default=None, description="Tags; null when the line had no `#` section."
    )
    metric: DecodedMetric


class DecodeErrorInfo(BaseModel):
    kind: ParseErrorKind = Field(description="Failure class.")
    message: str = Field(description="Human readable reason.")


class DecodeResult(BaseModel):
    ok: bool
    line: str = Field(description="The input line as received.")
    result: DecodedMessage | None = None
    error: DecodeErrorInfo | None = None


class BatchSummary(BaseModel):
    count: int
    decoded: int
    failed: int
    results: list[DecodeResult] = Field(default_factory=list)
    errors_by_kind: dict[str, int] = Field(default_factory=dict)
    status: Literal["ok", "partial", "failed"] = "ok"


DEFAULT_MAX_LINE_LENGTH = 8192
DEFAULT_MAX_LINES = 500
HARD_MAX_LINES = 5000


@dataclass(frozen=True, slots=True)
class DecoderLimits:
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    max_lines: int = DEFAULT_MAX_LINES


def _env_int(name: str) -> int | None:
    env = os.getenv(name)
    if env is None or env == "":
        return None
    try:
        value = int(env)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


def resolve_limits(limits: DecoderLimits | None = None) -> DecoderLimits:
    """Return limits with optional env overrides applied."""
    if limits is None:
        limits = DecoderLimits()

    max_line_length = _env_int("STATSD_MCP_MAX_LINE_LENGTH")
    if max_line_length is not None:
        limits = replace(limits, max_line_length=max_line_length)

    max_lines = _env_int("STATSD_MCP_MAX_LINES")
    if max_lines is not None:
        limits = replace(limits, max_lines=max_lines)

    if limits.max_lines > HARD_MAX_LINES:
        limits = replace(limits, max_lines=HARD_MAX_LINES)
    return limits
