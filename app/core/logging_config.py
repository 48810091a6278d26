"""Logging setup for the service and the uvicorn loggers it runs under."""

from __future__ import annotations

import logging
import sys
from logging.config import dictConfig

from app.core.request_logging import current_request_id

TIME_FMT = "%Y-%m-%dT%H:%M:%S%z"


class RequestIdFilter(logging.Filter):
    """Stamp every record with the id of the request being served, if any."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = current_request_id()
        return True


def build_logging_config(level: str = "INFO", log_format: str = "json") -> dict:
    """dictConfig for the app and uvicorn loggers."""
    formatters = {
        "plain": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
            "datefmt": TIME_FMT,
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": "%(asctime)s %(levelname)s %(name)s %(request_id)s %(message)s",
            "datefmt": TIME_FMT,
        },
    }

    handlers = {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "formatter": "json" if log_format == "json" else "plain",
            "filters": ["request_id"],
        }
    }

    loggers = {
        "app":           {"level": level, "handlers": ["stdout"], "propagate": False},
        "uvicorn":       {"level": level, "handlers": ["stdout"], "propagate": False},
        "uvicorn.error": {"level": level, "handlers": ["stdout"], "propagate": False},
        # access lines come from app.core.request_logging instead
        "uvicorn.access": {"level": "WARNING", "handlers": [], "propagate": False},
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": {"request_id": {"()": RequestIdFilter}},
        "handlers": handlers,
        "loggers": loggers,
    }


def configure_logging(level: str = "INFO", log_format: str = "json") -> None:
    dictConfig(build_logging_config(level=level, log_format=log_format))
