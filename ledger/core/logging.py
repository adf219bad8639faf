"""
Logging setup for the ledger service.

Module code logs through ``logging.getLogger(__name__)``; this module only
installs handlers and formatters once at startup. Structured fields passed via
``extra=`` are rendered by the JSON formatter and ignored by the console one.

Usage:
    from ledger.core.logging import configure_logging

    configure_logging(level="INFO", json_logs=False)
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


def _record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS}


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_record_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g., "DEBUG", "INFO", "WARNING").
    json_logs : bool
        Whether to emit logs as JSON. If False, uses a concise human formatter.
    """
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level.upper(),
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level.upper(),
            },
        }
    )


__all__ = ["configure_logging", "JsonFormatter"]
