"""MCP server exposing the Datadog tools."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.server.stdio import stdio_server

from datadog_mcp.tools.base import ToolRequest

if TYPE_CHECKING:
    from mcp.types import TextContent, Tool

    from datadog_mcp.config.schema import DatadogMcpConfig
    from datadog_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "datadog"


def list_tools(registry: ToolRegistry) -> list[Tool]:
    """Tool catalogue in registration order."""
    return [d.to_mcp() for d in registry.list_descriptors()]


async def call_tool(
    registry: ToolRegistry, name: str, arguments: dict[str, Any] | None
) -> list[TextContent]:
    """Dispatch one call. Failures propagate; the MCP layer reports them."""
    result = await registry.call(ToolRequest(name=name, arguments=arguments))
    return list(result.content)


def create_server(registry: ToolRegistry) -> Server:
    """Wire the registry into an MCP server."""
    server: Server = Server(SERVER_NAME)

    @server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
    async def _list_tools() -> list[Tool]:
        return list_tools(registry)

    # Arguments are validated by each tool's own schema.
    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def _call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        return await call_tool(registry, name, arguments)

    return server


async def run_server(config: DatadogMcpConfig) -> None:
    """Start the MCP server on stdio."""
    from datadog_mcp.client import open_apis
    from datadog_mcp.tools import build_registry

    async with open_apis(config.datadog) as apis:
        registry = build_registry(apis, config.tools.groups)
        server = create_server(registry)
        logger.info("Serving %d tools on stdio", len(registry))
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
