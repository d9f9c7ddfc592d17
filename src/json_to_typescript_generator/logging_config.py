"""Logging setup for the command line entry point."""

from __future__ import annotations

import json
import logging
from logging.config import dictConfig
from typing import Any

_PACKAGE_LOGGER = "json_to_typescript_generator"


class ExtrasFormatter(logging.Formatter):
    """Append structured ``data`` payloads when present."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        record_data = record.__dict__.get("data")
        if not record_data:
            return formatted
        try:
            encoded = json.dumps(record_data, sort_keys=True, separators=(",", ":"))
        except TypeError:
            encoded = str(record_data)
        return f"{formatted} | data={encoded}"


def build_log_config(level: str) -> dict[str, Any]:
    """Return a dictConfig-compatible configuration logging to stderr."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "extras": {
                "()": ExtrasFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "extras",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            _PACKAGE_LOGGER: {
                "handlers": ["stderr"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    }


def configure_logging(level: str) -> None:
    """Install the package log handler at ``level``."""
    dictConfig(build_log_config(level))
