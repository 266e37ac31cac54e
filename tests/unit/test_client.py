"""Tests for Datadog client construction."""

from __future__ import annotations

import pytest
from datadog_api_client.v2.api.logs_api import LogsApi
from datadog_api_client.v2.api.rum_api import RUMApi

from datadog_mcp.client import DatadogApis, create_configuration, open_apis
from datadog_mcp.config.schema import DatadogConfig
from datadog_mcp.core.errors import ConfigError


class TestCreateConfiguration:
    def test_sets_keys_and_site(self) -> None:
        cfg = DatadogConfig(api_key="api", app_key="app", site="datadoghq.eu")
        configuration = create_configuration(cfg)
        assert configuration.api_key["apiKeyAuth"] == "api"
        assert configuration.api_key["appKeyAuth"] == "app"
        assert configuration.server_variables["site"] == "datadoghq.eu"

    def test_default_site(self) -> None:
        configuration = create_configuration(DatadogConfig(api_key="a", app_key="b"))
        assert configuration.server_variables["site"] == "datadoghq.com"

    def test_missing_keys(self) -> None:
        with pytest.raises(ConfigError):
            create_configuration(DatadogConfig(api_key="a"))


class TestOpenApis:
    async def test_yields_group_apis(self) -> None:
        async with open_apis(DatadogConfig(api_key="a", app_key="b")) as apis:
            assert isinstance(apis, DatadogApis)
            assert isinstance(apis.logs, LogsApi)
            assert isinstance(apis.rum, RUMApi)
            assert apis.logs.api_client is apis.rum.api_client
