"""Diagnostic logging setup.

Modules log through `logging.getLogger(__name__)`; this module only decides
where records go:
- `text`: rich console handler on stderr (keeps stdout free for results).
- `json`: one JSON object per line, for piping into other tools.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

_HANDLER_NAME = "recipe-scout"
_PACKAGES = ("core", "adapters", "cli")


class JSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_handler(settings: AppSettings) -> logging.Handler:
    if settings.log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
        markup=False,
    )


def configure_logging(settings: AppSettings | None = None) -> logging.Handler:
    """Attach a single handler to the project's package loggers.

    Calling it again replaces the previous handler, so the CLI can apply a
    `--verbose` override after settings are loaded.
    """

    settings = settings or AppSettings()
    level = getattr(logging, settings.log_level, logging.WARNING)
    handler = build_handler(settings)
    handler.setLevel(level)
    handler.set_name(_HANDLER_NAME)

    for name in _PACKAGES:
        logger = logging.getLogger(name)
        for old in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
            logger.removeHandler(old)
        logger.setLevel(level)
        logger.addHandler(handler)

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return handler
