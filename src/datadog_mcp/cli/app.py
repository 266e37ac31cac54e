"""Main CLI application.

Click commands for datadog-mcp: serve, tools.
"""

from __future__ import annotations

import asyncio
import json as json_mod
import sys
from typing import TYPE_CHECKING

import click

from datadog_mcp import __version__
from datadog_mcp.config.loader import load_config
from datadog_mcp.core.errors import ConfigError, DatadogMcpError
from datadog_mcp.core.log import configure_logging

if TYPE_CHECKING:
    from datadog_mcp.config.schema import DatadogMcpConfig


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(config_path: str | None) -> DatadogMcpConfig:
    """Load config with user-friendly error handling."""
    try:
        return load_config(path=config_path)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy


# ── CLI group ────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="datadog-mcp")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """datadog-mcp - Datadog tools for AI agents.

    Serves logs and RUM queries over the Model Context Protocol.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ── serve ────────────────────────────────────────────────────────


@cli.command()
@click.pass_context
def serve(ctx: click.Context) -> None:
    """Start the MCP server on stdio."""
    from datadog_mcp.mcp.server import run_server

    config = _load_config(ctx.obj["config_path"])
    configure_logging(config.logging)
    try:
        config.datadog.require_credentials()
        asyncio.run(run_server(config))
    except DatadogMcpError as e:
        _error(str(e))


# ── tools ────────────────────────────────────────────────────────


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print JSON descriptors.")
@click.pass_context
def tools(ctx: click.Context, as_json: bool) -> None:
    """List the tools an agent can call."""
    from datadog_mcp.tools import build_registry

    config = _load_config(ctx.obj["config_path"])
    try:
        registry = build_registry(None, config.tools.groups)
    except DatadogMcpError as e:
        _error(str(e))
        return

    descriptors = registry.list_descriptors()
    if as_json:
        payload = [
            {
                "name": d.name,
                "description": d.description,
                "inputSchema": dict(d.input_schema),
            }
            for d in descriptors
        ]
        click.echo(json_mod.dumps(payload, indent=2))
        return

    for d in descriptors:
        click.echo(f"{d.name}: {d.description}")
        required = set(d.input_schema.get("required", []))
        for arg, prop in d.input_schema["properties"].items():
            flag = "required" if arg in required else f"default: {prop.get('default')!r}"
            click.echo(f"  {arg} ({prop['type']}, {flag})  {prop['description']}")
        click.echo()


def main() -> None:
    cli()
