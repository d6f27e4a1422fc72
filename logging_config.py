from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Iterable

from settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes passed through ``extra=`` by the collector and its stores.
CONTEXT_KEYS = (
    "step",
    "device_name",
    "record_id",
    "table_name",
    "status_code",
    "error_code",
    "exit_code",
    "reason",
)

_configured = False


class ContextualFormatter(logging.Formatter):
    """Appends ``key=value`` pairs for whichever context keys a record carries."""

    def __init__(self, fmt: str = LOG_FORMAT, context_keys: Iterable[str] = CONTEXT_KEYS) -> None:
        super().__init__(fmt=fmt)
        self.context_keys = tuple(context_keys)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={value}"
            for key in self.context_keys
            if (value := getattr(record, key, None)) is not None
        )
        return f"{message} | {context}" if context else message


def configure_logging(level: str | int | None = None) -> None:
    """Install the contextual stream handler on the root logger once per process."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"contextual": {"()": ContextualFormatter}},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
        }
    )
    _configured = True
