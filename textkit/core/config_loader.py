"""
Logging configuration for textkit.

The library never looks for a config file on its own. Applications that
want textkit's log output routed somewhere load a JSON file (or a dict)
explicitly and hand the result to setup_logging().
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .exceptions import ConfigurationError


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Where and how textkit log records are written."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    logs_directory: Optional[Path] = None
    max_file_size_mb: int = 10
    backup_count: int = 5

    @classmethod
    def from_dict(cls, data: dict, base_dir: Path = None) -> "LoggingConfig":
        """
        Build a config from the "logging" section of a parsed JSON document.

        Args:
            data: Mapping with any of the dataclass field names.
            base_dir: Directory that relative logs_directory values resolve
                      against. Defaults to the current directory.

        Returns:
            Populated LoggingConfig.

        Raises:
            ConfigurationError: If a value has the wrong type or the level
                                is unknown.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Logging section must be a JSON object",
                {"received": type(data).__name__}
            )

        level = data.get("level", "INFO")
        if not isinstance(level, str) or level.upper() not in VALID_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {level!r}",
                {"level": level, "valid": list(VALID_LEVELS)}
            )

        for key in ("max_file_size_mb", "backup_count"):
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"{key} must be a non-negative integer",
                    {key: value}
                )

        logs_directory = data.get("logs_directory")
        if logs_directory is not None:
            logs_directory = Path(logs_directory)
            if not logs_directory.is_absolute():
                logs_directory = Path(base_dir or Path.cwd()) / logs_directory

        return cls(
            level=level.upper(),
            format=data.get("format", DEFAULT_LOG_FORMAT),
            logs_directory=logs_directory,
            max_file_size_mb=data.get("max_file_size_mb", 10),
            backup_count=data.get("backup_count", 5)
        )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "LoggingConfig":
        """
        Load the "logging" section of a JSON config file.

        Relative logs_directory values resolve against the directory that
        holds the file.

        Raises:
            ConfigurationError: If the file is missing, is not valid JSON,
                                or has a malformed logging section.
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        return cls.from_dict(data.get("logging", {}), base_dir=config_path.resolve().parent)
