"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: decode one StatsD line, or a list of already-split lines
- Resources: grammar, examples and response schemas
- Prompts: templates that explain or review decoded lines

Run locally (stdio):
    python -m mcp_statsd_server.server.statsd_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_statsd_server.prompts.registry import register_prompts
from mcp_statsd_server.resources.registry import register_resources
from mcp_statsd_server.tools.decode import decode_statsd_impl, decode_statsd_lines_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("STATSD_MCP_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("statsd-decoder", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
def decode_statsd(line: str) -> dict[str, Any]:
    """Decode a single StatsD / DogStatsD line.

    Parameters
    ----------
    line:
        One message, e.g. ``gorets:1|c|@0.5|#env:prod`` or
        ``_sc|Redis connection|2|h:frontend1``. A trailing newline is ignored.

    Returns
    -------
    dict:
        {"ok": bool, "line": str, "result": {...} | None, "error": {...} | None}
    """
    return decode_statsd_impl(line=line)


@mcp.tool()
def decode_statsd_lines(lines: list[str]) -> dict[str, Any]:
    """Decode several StatsD lines independently.

    Parameters
    ----------
    lines:
        Messages, one per list item. Lines are not split further.

    Returns
    -------
    dict:
        {"count", "decoded", "failed", "status", "errors_by_kind", "results"}
    """
    return decode_statsd_lines_impl(lines=lines)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
