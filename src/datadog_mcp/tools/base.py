"""Tool data types.

Descriptors, requests, results, and the ``ToolSpec`` tuple from which
both the tool catalogue and the handler map are built.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from mcp.types import TextContent, Tool

if TYPE_CHECKING:
    from datadog_mcp.tools.schema import SchemaDefinition, ValidatedArguments

ApiT = TypeVar("ApiT")

Handler = Callable[["ValidatedArguments", ApiT], Awaitable["ToolResult"]]


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Introspectable name, description, and input schema of a tool."""

    name: str
    description: str
    input_schema: Mapping[str, Any]

    def to_mcp(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=copy.deepcopy(dict(self.input_schema)),
        )


@dataclass(frozen=True, slots=True)
class ToolRequest:
    """A tool invocation as it arrives from the agent. Arguments are untrusted."""

    name: str
    arguments: Mapping[str, Any] | None = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Successful tool output: one or more text blocks."""

    content: tuple[TextContent, ...]

    def __post_init__(self) -> None:
        if not self.content:
            msg = "ToolResult needs at least one content block"
            raise ValueError(msg)

    @classmethod
    def text(cls, text: str) -> ToolResult:
        return cls(content=(TextContent(type="text", text=text),))

    @classmethod
    def labelled(cls, label: str, payload: Any) -> ToolResult:
        """Serialize ``payload`` as JSON behind a human-readable label."""
        return cls.text(f"{label}: {to_json(payload)}")


@dataclass(frozen=True, slots=True)
class ToolSpec(Generic[ApiT]):
    """Everything needed to both list and serve one tool."""

    name: str
    description: str
    schema: SchemaDefinition
    handler: Handler[ApiT]


@dataclass(frozen=True, slots=True)
class ToolGroup(Generic[ApiT]):
    """Tools served by the same API object, e.g. logs or RUM."""

    name: str
    tools: tuple[ToolSpec[ApiT], ...]


def _json_default(obj: Any) -> Any:
    # datadog_api_client models
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def to_json(payload: Any) -> str:
    """Serialize an API payload, including Datadog model objects."""
    return json.dumps(payload, default=_json_default)


def response_data(response: Any) -> Any:
    """The ``data`` field of an API response, or None when it is absent.

    Datadog models raise ``ApiAttributeError`` (an ``AttributeError``)
    for keys missing from the payload.
    """
    return getattr(response, "data", None)
