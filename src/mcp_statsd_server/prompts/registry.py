"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_statsd_server.tools.decode import decode_line


def _decoded_entry(line: str) -> dict[str, Any]:
    """Decode one line for prompt display; rejected input is shown, not raised."""
    try:
        return json.loads(decode_line(line).model_dump_json())
    except ValueError as e:
        return {"ok": False, "line": line, "result": None, "error": {"kind": None, "message": str(e)}}


def _decoded_block(lines: Sequence[str]) -> str:
    """Decode lines and render them as a JSON block for prompt display."""
    decoded = [_decoded_entry(line) for line in lines]
    return json.dumps(decoded, indent=2, ensure_ascii=False)


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def explain_statsd_line(line: str) -> list[dict[str, Any]]:
        """Build a prompt that explains one StatsD line."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a precise observability assistant. Explain StatsD/DogStatsD "
                    "lines using the decoded structure provided. Do not invent fields that "
                    "are not present; an absent sample rate means none was sent."
                ),
            },
            {
                "role": "user",
                "content": (
                    f"Line:\n{line}\n\n"
                    f"Decoded:\n{_decoded_block([line])}\n\n"
                    "Explain the metric type, value, sample rate and tags. If decoding "
                    "failed, explain the error and suggest a corrected line."
                ),
            },
        ]

    @mcp.prompt()
    def review_statsd_lines(lines: Sequence[str] | str) -> list[dict[str, Any]]:
        """Build a prompt that reviews a set of lines for instrumentation issues."""
        if isinstance(lines, str):
            items = [s for s in lines.splitlines() if s.strip()]
        else:
            items = [str(s) for s in lines if str(s).strip()]
        return [
            {
                "role": "system",
                "content": (
                    "You review metric instrumentation. Point out rejected lines, "
                    "inconsistent tag keys, suspicious sample rates (<= 0 or > 1) and "
                    "names that mix naming conventions."
                ),
            },
            {
                "role": "user",
                "content": (
                    f"Decoded lines:\n{_decoded_block(items)}\n\n"
                    "Return a short list of findings, each with the affected line."
                ),
            },
        ]
