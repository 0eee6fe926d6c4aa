"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from . import __version__
from .settings import settings


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add application context to log events.

    Adds service name, environment, and version to every log entry.
    """
    event_dict["service"] = "paygate"
    event_dict["environment"] = settings.ENVIRONMENT
    event_dict["version"] = __version__
    return event_dict


def drop_color_message_key(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Remove the redundant 'color_message' key before JSON rendering."""
    event_dict.pop("color_message", None)
    return event_dict


def configure_structlog(json_logs: bool = False) -> None:
    """
    Configure structlog for the package.

    Args:
        json_logs: If True, output JSON logs. If False, use human-readable console format.
                   Defaults to JSON outside DEBUG mode.
    """
    if json_logs or not settings.DEBUG:
        processors: list[Processor] = [
            structlog.contextvars.merge_contextvars,
            add_app_context,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            drop_color_message_key,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            add_app_context,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stderr keeps CLI stdout clean for --json output
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("payment_provider_selected", provider="stripe")
    """
    return structlog.get_logger(name)


__all__ = ["configure_structlog", "get_logger"]
