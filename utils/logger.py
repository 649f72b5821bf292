"""
Logger factory for the alerting providers.

Provides:
- get_logger(): Get a configured logger instance
"""

import structlog
from structlog.stdlib import BoundLogger

from . import logging_config  # noqa: F401  (configures structlog on import)


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog BoundLogger instance

    Example:
        >>> from utils.logger import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("wecom_alert_sent", group="infra", resolved=False)
    """
    return structlog.get_logger(name)
