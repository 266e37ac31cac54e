"""Configuration loading from a single TOML file plus the environment.

The file is the explicit path given to :func:`load_config`, else the one
named by ``$DATADOG_MCP_CONFIG``.  Without either, model defaults apply.

Credentials and site: ``datadog.api_key_env``, ``datadog.app_key_env``
and ``datadog.site_env`` name env vars (``DATADOG_API_KEY`` etc.).  A
value set in the file wins; otherwise the env var is used.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from datadog_mcp.core.errors import ConfigError

from .schema import DatadogMcpConfig

CONFIG_ENV_VAR = "DATADOG_MCP_CONFIG"


def _config_file(path: str | Path | None) -> Path | None:
    if path is not None:
        p = Path(path)
        if not p.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        return p
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if not p.is_file():
            msg = f"{CONFIG_ENV_VAR} points to non-existent file: {env_path}"
            raise ConfigError(msg)
        return p
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file."""
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg) from e


def _resolve_env(config: DatadogMcpConfig) -> None:
    """Fill unset credentials and site from environment variables (in-place)."""
    dd = config.datadog
    if dd.api_key is None and dd.api_key_env:
        dd.api_key = os.environ.get(dd.api_key_env)
    if dd.app_key is None and dd.app_key_env:
        dd.app_key = os.environ.get(dd.app_key_env)
    if dd.site is None and dd.site_env:
        dd.site = os.environ.get(dd.site_env) or None


def load_config(path: str | Path | None = None) -> DatadogMcpConfig:
    """Load and validate configuration.

    Args:
        path: Explicit config file path; takes precedence over
            ``$DATADOG_MCP_CONFIG``.

    Raises:
        ConfigError: On invalid TOML, missing files, or validation failure.
    """
    config_file = _config_file(path)
    data = _read_toml(config_file) if config_file is not None else {}

    try:
        config = DatadogMcpConfig.model_validate(data)
    except Exception as e:
        msg = f"Configuration validation failed: {e}"
        raise ConfigError(msg) from e

    _resolve_env(config)

    return config
