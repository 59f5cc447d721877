"""Structured logging configuration.

JSON logs with automatic context binding. Uses structlog with stdlib integration,
so records from uvicorn, SQLAlchemy and other libraries go through the same
formatter. Request-scoped context (like request_id) is included in all logs
via structlog.contextvars, and every event carries the application name.
"""

import logging
import logging.config
import sys
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

from incident_tracking.config import Settings, settings

EventDict = dict[str, Any]


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO 8601 UTC timestamp with timezone offset."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _add_application(app_name: str) -> Callable[[object, str, EventDict], EventDict]:
    """Build a processor that tags every event with the application name."""

    def processor(_logger: object, _method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("application", app_name)
        return event_dict

    return processor


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the root stdlib logger to write to stdout.

    Safe to call more than once; the last call wins for new loggers.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        _add_application(settings.app_name),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": processors,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": settings.log_level.upper(),
                    "propagate": True,
                },
            },
        }
    )


def flush_logging() -> None:
    """Flush every handler attached to the root logger."""
    for handler in logging.getLogger().handlers:
        handler.flush()


configure_logging(settings)


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name, typically __name__

    Example:
        logger = get_logger(__name__)
        logger.info("incident_opened", incident_id=42)
        # {"event": "incident_opened", "incident_id": 42, "level": "info", ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
