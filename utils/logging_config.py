"""
Centralized logging configuration for the alerting providers.

This module sets up structured logging with:
- Level and format taken from LoggingSettings (LOG_LEVEL / LOG_FORMAT)
- JSON formatting for production, pretty console for development
- Redaction of secrets (webhook keys, tokens) before rendering
"""

import os
import sys
import logging
from datetime import datetime, timezone

import structlog
from structlog.types import EventDict, Processor

from config import LoggingSettings


# Environment configuration
ENV = os.getenv("ENV", "development")

# Import-time defaults come from the same settings class that
# dependencies.configure_logging() re-applies later.
_DEFAULTS = LoggingSettings()
LOG_LEVEL = _DEFAULTS.log_level
LOG_FORMAT = _DEFAULTS.log_format

# WeCom robot webhooks authenticate with a `key` query parameter, so a full
# webhook URL is as sensitive as a token.
REDACTED_FIELDS = {
    "webhook_url",
    "token",
    "secret",
    "key",
    "authorization",
}


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in ("level", "event", "timestamp", "logger"):
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(
            sensitive in lowered for sensitive in ("token", "key", "secret")
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def configure_structlog(log_format: str = LOG_FORMAT) -> None:
    """
    Configure structlog with appropriate processors for the environment.

    Production: JSON formatting for easy parsing
    Development: Pretty console formatting with colors
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(), pad_event=15, sort_keys=False
        )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up a later reconfiguration
        cache_logger_on_first_use=False,
    )


def configure_stdlib_logging(log_level: str = LOG_LEVEL) -> None:
    """
    Configure standard library logging to work with structlog.

    Sets up:
    - Log level from environment
    - Console handler for stdout
    - Format compatible with structlog
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    # httpx logs every request at INFO, including the full webhook URL
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging(log_level: str = LOG_LEVEL, log_format: str = LOG_FORMAT) -> None:
    """
    Initialize logging for the process.

    Runs once on import with the LoggingSettings defaults. Calling it again
    replaces the root handler and level and the structlog processor chain.
    """
    configure_stdlib_logging(log_level)
    configure_structlog(log_format)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "logging_initialized",
        env=ENV,
        log_level=log_level,
        log_format=log_format,
    )


# Initialize logging when module is imported
setup_logging()
