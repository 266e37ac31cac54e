"""Configuration loading and validation."""

from datadog_mcp.config.loader import load_config
from datadog_mcp.config.schema import (
    DatadogConfig,
    DatadogMcpConfig,
    LoggingConfig,
    ToolsConfig,
)

__all__ = [
    "DatadogConfig",
    "DatadogMcpConfig",
    "LoggingConfig",
    "ToolsConfig",
    "load_config",
]
