"""Logs tools — search Datadog logs.

The Logs API takes its time range as millisecond strings, so epoch
seconds from the agent are scaled here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datadog_api_client.v2.model.logs_list_request import LogsListRequest
from datadog_api_client.v2.model.logs_list_request_page import LogsListRequestPage
from datadog_api_client.v2.model.logs_query_filter import LogsQueryFilter
from datadog_api_client.v2.model.logs_sort import LogsSort

from datadog_mcp.core.errors import NoDataReturnedError
from datadog_mcp.tools.base import ToolGroup, ToolResult, ToolSpec, response_data
from datadog_mcp.tools.schema import SchemaDefinition, epoch_seconds, optional

if TYPE_CHECKING:
    from datadog_api_client.v2.api.logs_api import LogsApi

    from datadog_mcp.tools.schema import ValidatedArguments

GET_LOGS_SCHEMA = SchemaDefinition(
    {
        "query": optional("string", "Datadog logs query string", default=""),
        "from": epoch_seconds("Start time in epoch seconds"),
        "to": epoch_seconds("End time in epoch seconds"),
        "limit": optional(
            "integer",
            "Maximum number of logs to return. Default is 100.",
            default=100,
        ),
    }
)


def to_millis(seconds: int) -> str:
    return f"{seconds * 1000}"


async def get_logs(args: ValidatedArguments, api: LogsApi) -> ToolResult:
    body = LogsListRequest(
        filter=LogsQueryFilter(
            query=args["query"],
            _from=to_millis(args["from"]),
            to=to_millis(args["to"]),
        ),
        page=LogsListRequestPage(limit=args["limit"]),
        sort=LogsSort.TIMESTAMP_DESCENDING,
    )
    data = response_data(await api.list_logs(body=body))

    if data is None:
        raise NoDataReturnedError("get_logs", "No logs data returned")

    return ToolResult.labelled("Logs data", data)


LOGS_TOOLS: ToolGroup[LogsApi] = ToolGroup(
    name="logs",
    tools=(
        ToolSpec(
            name="get_logs",
            description="Search and retrieve logs from Datadog",
            schema=GET_LOGS_SCHEMA,
            handler=get_logs,
        ),
    ),
)
