"""Exception hierarchy for datadog-mcp.

Every module imports from here. The hierarchy is:

    DatadogMcpError
    ├── ToolError(tool_name)
    │   ├── ToolNotFoundError
    │   ├── InvalidArgumentsError(fields)
    │   └── NoDataReturnedError
    ├── ToolSchemaError
    ├── ToolRegistrationError
    └── ConfigError

Failures raised by the Datadog client itself (``ApiException``, network
errors) are not part of this hierarchy and propagate unchanged.
"""

from __future__ import annotations


class DatadogMcpError(Exception):
    """Base exception for all datadog-mcp errors."""


# ─── Tool Errors ──────────────────────────────────────────────


class ToolError(DatadogMcpError):
    """Base for errors raised while serving a single tool call."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(message)


class ToolNotFoundError(ToolError):
    """No handler is registered under the requested name."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(tool_name, f"Tool not found: {tool_name}")


class InvalidArgumentsError(ToolError):
    """Arguments failed schema validation.

    ``fields`` maps each offending argument name to a short reason.
    """

    def __init__(self, tool_name: str, fields: dict[str, str]) -> None:
        self.fields = dict(fields)
        details = "; ".join(f"{name}: {reason}" for name, reason in self.fields.items())
        super().__init__(tool_name, f"Invalid arguments for {tool_name}: {details}")


class NoDataReturnedError(ToolError):
    """The API returned no payload where the tool requires one."""


# ─── Startup Errors ───────────────────────────────────────────


class ToolSchemaError(DatadogMcpError):
    """Malformed schema definition or tool metadata."""


class ToolRegistrationError(DatadogMcpError):
    """Duplicate, late, or out-of-sync tool registration."""


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(DatadogMcpError):
    """Invalid configuration."""
