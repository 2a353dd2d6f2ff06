"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from mcp_statsd_server.core import Message, ParseError, ServiceCheck, try_parse
from mcp_statsd_server.tools.models import (
    BatchSummary,
    DecodedMessage,
    DecodedMetric,
    DecodeErrorInfo,
    DecoderLimits,
    DecodeResult,
    resolve_limits,
)

logger = logging.getLogger(__name__)


def _to_decoded(msg: Message) -> DecodedMessage:
    """Convert a core Message into its response model."""
    m = msg.metric
    if isinstance(m, ServiceCheck):
        metric = DecodedMetric(
            kind=m.kind,
            status=m.status,
            timestamp=m.timestamp,
            hostname=m.hostname,
            message=m.message,
        )
    else:
        metric = DecodedMetric(kind=m.kind, value=m.value, sample_rate=m.sample_rate)
    tags = dict(msg.tags) if msg.tags is not None else None
    return DecodedMessage(name=msg.name, tags=tags, metric=metric)


def _check_line(line: str, *, limits: DecoderLimits) -> None:
    if not isinstance(line, str):
        raise ValueError("line must be a string")
    if len(line) > limits.max_line_length:
        raise ValueError(
            f"line is {len(line)} characters; the limit is {limits.max_line_length} "
            "(set STATSD_MCP_MAX_LINE_LENGTH to raise it)."
        )


def decode_line(line: str, *, limits: DecoderLimits | None = None) -> DecodeResult:
    """Decode one line into a DecodeResult; decode failures are reported, not raised."""
    limits = resolve_limits(limits)
    _check_line(line, limits=limits)

    out = try_parse(line)
    if isinstance(out, ParseError):
        logger.debug("Rejected line (%s): %r", out.kind.value, line)
        return DecodeResult(
            ok=False,
            line=line,
            error=DecodeErrorInfo(kind=out.kind, message=str(out)),
        )
    return DecodeResult(ok=True, line=line, result=_to_decoded(out))


def decode_statsd_impl(*, line: str, limits: DecoderLimits | None = None) -> dict[str, Any]:
    """Implementation for the `decode_statsd` MCP tool."""
    return json.loads(decode_line(line, limits=limits).model_dump_json())


def decode_statsd_lines_impl(
    *,
    lines: Sequence[str],
    limits: DecoderLimits | None = None,
) -> dict[str, Any]:
    """Implementation for the `decode_statsd_lines` MCP tool.

    Notes
    -----
    - Every line is decoded on its own; one bad line never fails the call.
    - Lines are taken as given: no splitting on embedded newlines.
    """
    limits = resolve_limits(limits)
    if isinstance(lines, str):
        raise ValueError("lines must be a list of strings, not a single string")
    if not lines:
        raise ValueError("lines must contain at least one line")
    if len(lines) > limits.max_lines:
        raise ValueError(
            f"Too many lines ({len(lines)}); the limit is {limits.max_lines} "
            "(set STATSD_MCP_MAX_LINES to raise it)."
        )

    results = [decode_line(line, limits=limits) for line in lines]
    failed = [r for r in results if not r.ok]
    by_kind: dict[str, int] = {}
    for r in failed:
        if r.error is not None:
            by_kind[r.error.kind.value] = by_kind.get(r.error.kind.value, 0) + 1

    if not failed:
        status = "ok"
    elif len(failed) == len(results):
        status = "failed"
    else:
        status = "partial"

    summary = BatchSummary(
        count=len(results),
        decoded=len(results) - len(failed),
        failed=len(failed),
        results=results,
        errors_by_kind=by_kind,
        status=status,
    )
    return json.loads(summary.model_dump_json())
