"""Logging setup for the ``datadog_mcp`` logger tree."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datadog_mcp.config.schema import LoggingConfig

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Attach a single handler to the package logger.

    Logs go to stderr unless ``config.file`` is set; stdout belongs to
    the MCP stdio transport.
    """
    root = logging.getLogger("datadog_mcp")
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    root.setLevel(level)

    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    handler: logging.Handler
    if config.file:
        path = Path(config.file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root
