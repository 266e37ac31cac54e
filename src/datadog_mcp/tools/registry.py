"""Tool registry — catalogue and dispatch.

Holds the ordered tool descriptors agents list, and the bound handlers
``call`` routes to.  Both views are filled from the same
:class:`~datadog_mcp.tools.base.ToolSpec` entries, so they cannot drift.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from datadog_mcp.core.errors import (
    InvalidArgumentsError,
    ToolNotFoundError,
    ToolRegistrationError,
)
from datadog_mcp.tools.schema import build_descriptor

if TYPE_CHECKING:
    from datadog_mcp.tools.base import (
        ToolDescriptor,
        ToolGroup,
        ToolRequest,
        ToolResult,
        ToolSpec,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Binding:
    spec: ToolSpec[Any]
    api: Any


class ToolRegistry:
    """Registry for the tools exposed to agents.

    Append-only until :meth:`seal`; read-only afterwards.
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, ToolDescriptor] = {}
        self._handlers: dict[str, _Binding] = {}
        self._sealed = False

    def register(self, spec: ToolSpec[Any], api: Any) -> None:
        """Register one tool, bound to the API object its handler calls.

        Raises:
            ToolRegistrationError: If sealed or the name is already taken.
            ToolSchemaError: If the tool metadata is malformed.
        """
        if self._sealed:
            msg = f"Registry is sealed; cannot register {spec.name}"
            raise ToolRegistrationError(msg)
        if spec.name in self._descriptors or spec.name in self._handlers:
            msg = f"Tool already registered: {spec.name}"
            raise ToolRegistrationError(msg)
        descriptor = build_descriptor(spec.schema, spec.name, spec.description)
        self._descriptors[spec.name] = descriptor
        self._handlers[spec.name] = _Binding(spec=spec, api=api)

    def register_group(self, group: ToolGroup[Any], api: Any) -> None:
        """Register every tool of a group against a shared API object."""
        for spec in group.tools:
            self.register(spec, api)
        logger.debug("Registered %d %s tools", len(group.tools), group.name)

    def seal(self) -> None:
        """Freeze the registry after checking both views agree."""
        if set(self._descriptors) != set(self._handlers):
            msg = "Tool descriptors and handlers are out of sync"
            raise ToolRegistrationError(msg)
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, name: str) -> ToolDescriptor:
        """Get a tool descriptor by name.

        Raises:
            ToolNotFoundError: If the tool is not registered.
        """
        if name not in self._descriptors:
            raise ToolNotFoundError(name)
        return self._descriptors[name]

    def list_descriptors(self) -> list[ToolDescriptor]:
        """Return all descriptors in registration order."""
        return list(self._descriptors.values())

    async def call(self, request: ToolRequest) -> ToolResult:
        """Resolve, validate, and invoke a tool.

        Raises:
            ToolNotFoundError: Unknown tool name.
            InvalidArgumentsError: Arguments fail the tool's schema; the
                API is not called.
            NoDataReturnedError: The API returned no usable payload.

        Errors raised by the API client propagate unchanged.
        """
        binding = self._handlers.get(request.name)
        if binding is None:
            logger.warning("Unknown tool requested: %s", request.name)
            raise ToolNotFoundError(request.name)

        spec = binding.spec
        try:
            args = spec.schema.validate(spec.name, request.arguments)
        except InvalidArgumentsError as exc:
            logger.warning("Rejected %s call: %s", spec.name, ", ".join(exc.fields))
            raise
        logger.debug("Calling %s with %r", spec.name, args)
        return await spec.handler(args, binding.api)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: str) -> bool:
        return name in self._descriptors

    def list_names(self) -> list[str]:
        """Return names of all registered tools, in order."""
        return list(self._descriptors.keys())

    def handler_names(self) -> list[str]:
        """Return names of all bound handlers, in order."""
        return list(self._handlers.keys())
