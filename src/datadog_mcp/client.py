"""Datadog API client construction."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

from datadog_api_client import AsyncApiClient, Configuration
from datadog_api_client.v2.api.logs_api import LogsApi
from datadog_api_client.v2.api.rum_api import RUMApi

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from datadog_mcp.config.schema import DatadogConfig


@dataclass(frozen=True, slots=True)
class DatadogApis:
    """One API object per tool group, sharing a client."""

    logs: LogsApi
    rum: RUMApi


def create_configuration(config: DatadogConfig) -> Configuration:
    """Build a client configuration from credentials and site.

    Raises:
        ConfigError: If either key is missing.
    """
    config.require_credentials()
    configuration = Configuration()
    configuration.api_key["apiKeyAuth"] = config.api_key
    configuration.api_key["appKeyAuth"] = config.app_key
    configuration.server_variables["site"] = config.resolved_site
    return configuration


@contextlib.asynccontextmanager
async def open_apis(config: DatadogConfig) -> AsyncIterator[DatadogApis]:
    """Open an async client and yield the per-group API objects."""
    configuration = create_configuration(config)
    async with AsyncApiClient(configuration) as api_client:
        yield DatadogApis(logs=LogsApi(api_client), rum=RUMApi(api_client))
