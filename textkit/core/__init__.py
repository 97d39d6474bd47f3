"""
Core module providing foundational components.

This module contains the logging configuration, the logging helpers,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import LoggingConfig
from .logger import get_logger, setup_logging
from .exceptions import (
    TextKitError,
    ConfigurationError,
    InvalidInputError
)

__all__ = [
    "LoggingConfig",
    "get_logger",
    "setup_logging",
    "TextKitError",
    "ConfigurationError",
    "InvalidInputError"
]
