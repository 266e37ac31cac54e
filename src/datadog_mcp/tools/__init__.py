"""Datadog tools exposed to agents.

Each group module (``logs``, ``rum``) declares its schemas, handlers,
and a :class:`~datadog_mcp.tools.base.ToolGroup`.  :func:`build_registry`
binds the enabled groups to their API objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datadog_mcp.core.errors import ConfigError
from datadog_mcp.tools.logs import LOGS_TOOLS
from datadog_mcp.tools.registry import ToolRegistry
from datadog_mcp.tools.rum import RUM_TOOLS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from datadog_mcp.tools.base import ToolGroup

logger = logging.getLogger(__name__)

TOOL_GROUPS: dict[str, ToolGroup[Any]] = {
    LOGS_TOOLS.name: LOGS_TOOLS,
    RUM_TOOLS.name: RUM_TOOLS,
}


def build_registry(apis: Any, groups: Iterable[str] | None = None) -> ToolRegistry:
    """Register the enabled groups in a fixed order and seal the registry.

    Args:
        apis: Object with one attribute per group name (see
            :class:`~datadog_mcp.client.DatadogApis`), or None for a
            catalogue-only registry whose tools must not be called.
        groups: Group names to enable; all groups when None.

    Raises:
        ConfigError: If a group name is unknown.
    """
    enabled = set(TOOL_GROUPS) if groups is None else set(groups)
    unknown = enabled - set(TOOL_GROUPS)
    if unknown:
        msg = f"Unknown tool groups: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    registry = ToolRegistry()
    for name, group in TOOL_GROUPS.items():
        if name in enabled:
            registry.register_group(group, getattr(apis, name, None))
    registry.seal()
    logger.info("Registered %d tools", len(registry))
    return registry


__all__ = ["TOOL_GROUPS", "ToolRegistry", "build_registry"]
