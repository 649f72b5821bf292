"""
Logging utilities, framework-agnostic re-exports.

Infrastructure code imports from shared.logging so that it does not depend
on where the structlog configuration lives.
"""

from utils.logger import get_logger
from utils.logging_config import setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
