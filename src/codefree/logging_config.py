# -*- coding: utf-8 -*-
"""
Structured JSON logging configuration.
"""
import logging
import sys

from pythonjsonlogger.json import JsonFormatter as jsonlogger

from .config import settings
from .middleware import get_request_id


class RequestIDFilter(logging.Filter):
    """Add request_id to log records."""

    def filter(self, record):
        record.request_id = get_request_id() or "-"
        return True


class CustomJsonFormatter(jsonlogger):
    """Custom JSON formatter with standard fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["request_id"] = getattr(record, "request_id", "-")


def setup_logging(level: str | None = None):
    """
    Configure structured JSON logging on stdout.

    Args:
        level: Log level name, defaults to LOG_LEVEL from settings
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level or settings.LOG_LEVEL))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        fmt="%(timestamp)s %(level)s %(name)s %(request_id)s %(message)s",
        rename_fields={"timestamp": "@timestamp", "levelname": "level"},
    )
    handler.setFormatter(formatter)
    handler.addFilter(RequestIDFilter())
    root_logger.addHandler(handler)

    # Reduce noise from the server
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
