"""Pydantic models for datadog-mcp configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from datadog_mcp.core.errors import ConfigError


class DatadogConfig(BaseModel):
    """Credentials and site for the Datadog API client."""

    api_key: str | None = None
    api_key_env: str | None = "DATADOG_API_KEY"
    app_key: str | None = None
    app_key_env: str | None = "DATADOG_APP_KEY"
    site: str | None = None
    site_env: str | None = "DATADOG_SITE"
    default_site: str = "datadoghq.com"

    def require_credentials(self) -> None:
        """Raise ConfigError unless both keys are present."""
        missing = [
            env or field
            for field, value, env in (
                ("api_key", self.api_key, self.api_key_env),
                ("app_key", self.app_key, self.app_key_env),
            )
            if not value
        ]
        if missing:
            msg = f"Missing Datadog credentials: {', '.join(missing)} must be set"
            raise ConfigError(msg)

    @property
    def resolved_site(self) -> str:
        return self.site or self.default_site


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""


class ToolsConfig(BaseModel):
    """Which tool groups to expose."""

    groups: list[str] = Field(default_factory=lambda: ["logs", "rum"])


class DatadogMcpConfig(BaseModel):
    """Top-level configuration for datadog-mcp."""

    datadog: DatadogConfig = Field(default_factory=DatadogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
