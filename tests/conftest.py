"""Shared test fixtures for datadog-mcp."""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from datadog_mcp.tools import build_registry
from datadog_mcp.tools.registry import ToolRegistry


def api_response(data: Any) -> SimpleNamespace:
    """Shape of a Datadog list response as far as the tools care."""
    return SimpleNamespace(data=data)


@pytest.fixture
def rum_event() -> dict[str, Any]:
    return {
        "id": "rum-event-1",
        "type": "rum",
        "attributes": {
            "timestamp": 1640995199999,
            "type": "view",
            "service": "test-service",
            "application": {"id": "app123"},
        },
    }


@pytest.fixture
def log_event() -> dict[str, Any]:
    return {
        "id": "AAAAAXGLdD0AAABPV-5whqgB",
        "type": "log",
        "attributes": {
            "message": "GET /health 200",
            "service": "web",
            "status": "info",
        },
    }


@pytest.fixture
def rum_api() -> AsyncMock:
    """Spy standing in for ``RUMApi``; returns no data unless configured."""
    api = AsyncMock()
    api.list_rum_events.return_value = api_response(None)
    return api


@pytest.fixture
def logs_api() -> AsyncMock:
    """Spy standing in for ``LogsApi``; returns no data unless configured."""
    api = AsyncMock()
    api.list_logs.return_value = api_response(None)
    return api


@pytest.fixture
def registry(rum_api: AsyncMock, logs_api: AsyncMock) -> ToolRegistry:
    return build_registry(SimpleNamespace(logs=logs_api, rum=rum_api))


@pytest.fixture
def make_response() -> Any:
    """Factory fixture for list responses."""
    return api_response


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Any:
    """Undo configure_logging() so handlers never outlive a test's streams."""
    yield
    logger = logging.getLogger("datadog_mcp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
