"""RUM tools — list, search, and fetch Real User Monitoring events.

The RUM events endpoint takes ``datetime`` bounds and has no direct
get-by-id operation; ``get_rum_event`` searches on ``@id`` instead.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from datadog_mcp.core.errors import NoDataReturnedError
from datadog_mcp.tools.base import ToolGroup, ToolResult, ToolSpec, response_data
from datadog_mcp.tools.schema import FieldSpec, SchemaDefinition, epoch_seconds, optional

if TYPE_CHECKING:
    from datadog_api_client.v2.api.rum_api import RUMApi

    from datadog_mcp.tools.schema import ValidatedArguments

_FROM = epoch_seconds("Start time in epoch seconds")
_TO = epoch_seconds("End time in epoch seconds")
_LIMIT = optional(
    "integer",
    "Maximum number of events to return. Default is 100.",
    default=100,
)

LIST_RUM_EVENTS_SCHEMA = SchemaDefinition({"from": _FROM, "to": _TO, "limit": _LIMIT})

SEARCH_RUM_EVENTS_SCHEMA = SchemaDefinition(
    {
        "query": FieldSpec("string", "RUM events query string"),
        "from": _FROM,
        "to": _TO,
        "limit": _LIMIT,
    }
)

GET_RUM_EVENT_SCHEMA = SchemaDefinition(
    {"eventId": FieldSpec("string", "The RUM event ID", non_empty=True)}
)


def to_datetime(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=UTC)


async def _list_events(
    tool_name: str, api: RUMApi, query: str, args: ValidatedArguments
) -> ToolResult:
    data = response_data(
        await api.list_rum_events(
            filter_query=query,
            filter_from=to_datetime(args["from"]),
            filter_to=to_datetime(args["to"]),
            page_limit=args["limit"],
        )
    )

    if data is None:
        raise NoDataReturnedError(tool_name, "No RUM events data returned")

    return ToolResult.labelled("RUM events", data)


async def list_rum_events(args: ValidatedArguments, api: RUMApi) -> ToolResult:
    return await _list_events("list_rum_events", api, "", args)


async def search_rum_events(args: ValidatedArguments, api: RUMApi) -> ToolResult:
    return await _list_events("search_rum_events", api, args["query"], args)


async def get_rum_event(args: ValidatedArguments, api: RUMApi) -> ToolResult:
    """Fetch one event by searching for an exact ``@id`` match."""
    data = response_data(
        await api.list_rum_events(
            filter_query=f"@id:{args['eventId']}",
            page_limit=1,
        )
    )

    # Unlike list/search, an empty result is a failure here.
    if not data:
        raise NoDataReturnedError("get_rum_event", "No RUM event data returned")

    return ToolResult.labelled("RUM event", data[0])


RUM_TOOLS: ToolGroup[RUMApi] = ToolGroup(
    name="rum",
    tools=(
        ToolSpec(
            name="list_rum_events",
            description="List RUM events from Datadog",
            schema=LIST_RUM_EVENTS_SCHEMA,
            handler=list_rum_events,
        ),
        ToolSpec(
            name="search_rum_events",
            description="Search RUM events from Datadog",
            schema=SEARCH_RUM_EVENTS_SCHEMA,
            handler=search_rum_events,
        ),
        ToolSpec(
            name="get_rum_event",
            description="Get a RUM event from Datadog",
            schema=GET_RUM_EVENT_SCHEMA,
            handler=get_rum_event,
        ),
    ),
)
