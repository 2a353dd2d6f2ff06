from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class RecordingMCP:
    """Stand-in for FastMCP that keeps the decorated handlers by URI/name."""

    def __init__(self) -> None:
        self.resources: dict[str, Callable[..., Any]] = {}
        self.prompts: dict[str, Callable[..., Any]] = {}

    def resource(self, uri: str):
        def _register(fn):
            self.resources[uri] = fn
            return fn

        return _register

    def prompt(self):
        def _register(fn):
            self.prompts[fn.__name__] = fn
            return fn

        return _register


@pytest.fixture
def recording_mcp() -> RecordingMCP:
    return RecordingMCP()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("STATSD_MCP_MAX_LINE_LENGTH", "STATSD_MCP_MAX_LINES", "STATSD_MCP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def full_service_check() -> str:
    return (
        "_sc|Redis connection|2|d:10101|h:frontend1"
        "|#redis_instance:10.0.0.16:6379|m:Redis connection timed out after 10s"
    )
