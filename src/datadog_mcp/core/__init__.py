"""Core errors and shared utilities."""

from datadog_mcp.core.errors import (
    ConfigError,
    DatadogMcpError,
    InvalidArgumentsError,
    NoDataReturnedError,
    ToolError,
    ToolNotFoundError,
    ToolRegistrationError,
    ToolSchemaError,
)
from datadog_mcp.core.log import configure_logging

__all__ = [
    "ConfigError",
    "DatadogMcpError",
    "InvalidArgumentsError",
    "NoDataReturnedError",
    "ToolError",
    "ToolNotFoundError",
    "ToolRegistrationError",
    "ToolSchemaError",
    "configure_logging",
]
