from __future__ import annotations

import logging

import pytest

from mcp_statsd_server.server import statsd_server


@pytest.mark.asyncio
async def test_server_exposes_tools() -> None:
    tools = await statsd_server.mcp.list_tools()
    assert {t.name for t in tools} == {"decode_statsd", "decode_statsd_lines"}


@pytest.mark.asyncio
async def test_server_exposes_resources_and_prompts() -> None:
    resources = await statsd_server.mcp.list_resources()
    uris = {str(r.uri) for r in resources}
    assert "app://statsd/help" in uris
    assert "app://statsd/schemas/decode-result" in uris

    prompts = await statsd_server.mcp.list_prompts()
    assert {p.name for p in prompts} == {"explain_statsd_line", "review_statsd_lines"}


def test_tool_functions_delegate(clean_env) -> None:
    assert statsd_server.decode_statsd("gorets:1|c")["ok"] is True
    out = statsd_server.decode_statsd_lines(["gorets:1|c", ":1|c"])
    assert out["status"] == "partial"


def test_configure_logging_reads_env(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    clean_env.setenv("STATSD_MCP_LOG_LEVEL", "debug")

    statsd_server._configure_logging()

    assert calls[0]["level"] == logging.DEBUG
