"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_statsd_server.core.metric_parser import METRIC_TYPES
from mcp_statsd_server.core.models import Status
from mcp_statsd_server.tools.models import BatchSummary, DecodeResult, resolve_limits

EXAMPLE_LINES = (
    "gorets:1|c",
    "gorets:1|c|@0.5",
    "service.duration:101|ms|@0.9|#hostname:frontend1,namespace:web",
    "queue.depth:42|g|#redis:10.0.0.16:6379",
    "request.size:512|d",
    "users.unique:1234|s",
    "_sc|Redis connection|2|d:10101|h:frontend1|#redis_instance:10.0.0.16:6379"
    "|m:Redis connection timed out after 10s",
    "_sc|Redis connection",
)

GRAMMAR = """\
Metric form:
  metric_line := name ':' value '|' type_code [ '|@' rate ] [ '|#' tag_list ]
  tag_list    := tag (',' tag)*
  tag         := key [ ':' value_with_colons ]
  type_code   := {type_codes}

Service-check form:
  sc_line     := "_sc" '|' name '|' status_code
                 [ '|d:' timestamp ] [ '|h:' hostname ]
                 [ '|#' tag_list ] [ '|m:' message ]
  status_code := "0" (OK) | "1" (WARNING) | "2" (CRITICAL) | anything else (UNKNOWN)

A trailing line terminator is ignored. Only the first ':' in a tag separates
key from value.
"""


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://statsd/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        limits = resolve_limits()
        return (
            "Resources:\n"
            "- app://statsd/help\n"
            "- app://statsd/grammar\n"
            "- app://statsd/examples\n"
            "- app://statsd/status-codes\n"
            "- app://statsd/schemas/decode-result\n"
            "- app://statsd/schemas/batch-summary\n"
            f"\nMax line length: {limits.max_line_length}\n"
            f"Max lines per call: {limits.max_lines}\n"
        )

    @mcp.resource("app://statsd/grammar")
    def grammar() -> str:
        """Return the accepted line grammar."""
        codes = " | ".join(f'"{c}"' for c in METRIC_TYPES)
        return GRAMMAR.format(type_codes=codes)

    @mcp.resource("app://statsd/examples")
    def examples() -> str:
        """Return sample lines covering every metric type and a service check."""
        return "\n".join(EXAMPLE_LINES) + "\n"

    @mcp.resource("app://statsd/status-codes")
    def status_codes() -> dict[str, int]:
        """Return the service-check status codes."""
        return {s.value: s.code for s in Status}

    @mcp.resource("app://statsd/schemas/decode-result")
    def decode_result_schema() -> dict[str, Any]:
        """Return the JSON schema for a single decode result."""
        return DecodeResult.model_json_schema()

    @mcp.resource("app://statsd/schemas/batch-summary")
    def batch_summary_schema() -> dict[str, Any]:
        """Return the JSON schema for decode_statsd_lines output."""
        return BatchSummary.model_json_schema()
