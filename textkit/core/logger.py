"""
Logging helpers for textkit.

Modules log through get_logger(), which only hands out children of the
"textkit" logger and never configures anything. Output stays silent
unless the host application configures logging itself or calls
setup_logging().
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config_loader import LoggingConfig


PACKAGE_LOGGER = "textkit"
LOG_FILENAME = "textkit.log"

# Handlers installed by setup_logging, so a second call can replace them
_installed_handlers = []


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a textkit module. No handlers are attached."""
    return logging.getLogger(name)


def setup_logging(config: Optional[LoggingConfig] = None, stream=None) -> logging.Logger:
    """
    Route textkit log records to a stream and, optionally, a rotating file.

    Only the "textkit" logger is touched; the root logger and any other
    library's loggers are left alone. Calling again replaces the handlers
    from the previous call.

    Args:
        config: Level, format and file settings. Defaults to INFO on stdout.
        stream: Stream for the console handler. Defaults to sys.stdout.

    Returns:
        The configured package logger.
    """
    config = config or LoggingConfig()
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    package_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    formatter = logging.Formatter(config.format)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)

    if config.logs_directory:
        config.logs_directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.logs_directory / LOG_FILENAME,
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        package_logger.addHandler(handler)

    return package_logger
