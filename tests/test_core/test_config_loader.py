"""
Tests for LoggingConfig.

Tests defaults, dict parsing, file loading and validation errors.
"""

import pytest
from pathlib import Path

from textkit.core.config_loader import LoggingConfig, DEFAULT_LOG_FORMAT
from textkit.core.exceptions import ConfigurationError


class TestLoggingConfigDefaults:
    """Tests for the dataclass defaults."""

    def test_defaults(self):
        """Test that a bare config logs INFO to no file."""
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.format == DEFAULT_LOG_FORMAT
        assert config.logs_directory is None


class TestFromDict:
    """Tests for LoggingConfig.from_dict."""

    def test_empty_section_gives_defaults(self):
        """Test that missing keys take default values."""
        config = LoggingConfig.from_dict({})

        assert config == LoggingConfig()

    def test_level_is_normalized(self):
        """Test that level names are upper-cased."""
        assert LoggingConfig.from_dict({"level": "debug"}).level == "DEBUG"

    def test_relative_directory_resolves_against_base(self, temp_dir: Path):
        """Test that relative log directories resolve against base_dir."""
        config = LoggingConfig.from_dict({"logs_directory": "logs"}, base_dir=temp_dir)

        assert config.logs_directory == temp_dir / "logs"

    def test_absolute_directory_kept(self, temp_dir: Path):
        """Test that absolute log directories are used as given."""
        config = LoggingConfig.from_dict({"logs_directory": str(temp_dir)})

        assert config.logs_directory == temp_dir

    def test_non_object_section_raises(self):
        """Test that a scalar logging section is rejected."""
        with pytest.raises(ConfigurationError):
            LoggingConfig.from_dict("verbose")

    def test_unknown_level_raises(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            LoggingConfig.from_dict({"level": "CHATTY"})

        assert exc_info.value.details["level"] == "CHATTY"

    def test_bad_backup_count_raises(self):
        """Test that counts must be non-negative integers."""
        with pytest.raises(ConfigurationError):
            LoggingConfig.from_dict({"backup_count": "five"})
        with pytest.raises(ConfigurationError):
            LoggingConfig.from_dict({"max_file_size_mb": -1})


class TestFromFile:
    """Tests for LoggingConfig.from_file."""

    def test_load_valid_file(self, write_config):
        """Test loading the logging section of a config file."""
        config_path = write_config({"logging": {"level": "WARNING", "logs_directory": "out"}})

        config = LoggingConfig.from_file(config_path)

        assert config.level == "WARNING"
        assert config.logs_directory == config_path.resolve().parent / "out"

    def test_file_without_logging_section(self, write_config):
        """Test that other sections are ignored."""
        config_path = write_config({"database": "x.db"})

        assert LoggingConfig.from_file(config_path) == LoggingConfig()

    def test_missing_file_raises(self, temp_dir: Path):
        """Test that a missing file raises ConfigurationError."""
        fake_path = temp_dir / "nonexistent" / "config.json"

        with pytest.raises(ConfigurationError) as exc_info:
            LoggingConfig.from_file(fake_path)

        assert "not found" in exc_info.value.message.lower()
        assert exc_info.value.details["path"] == str(fake_path)

    def test_invalid_json_raises(self, temp_dir: Path):
        """Test that invalid JSON raises ConfigurationError."""
        config_path = temp_dir / "config.json"
        config_path.write_text("{ invalid json }")

        with pytest.raises(ConfigurationError) as exc_info:
            LoggingConfig.from_file(config_path)

        assert "invalid json" in exc_info.value.message.lower()

    def test_non_object_json_raises(self, write_config):
        """Test that a JSON array is rejected."""
        with pytest.raises(ConfigurationError):
            LoggingConfig.from_file(write_config([1, 2, 3]))

    def test_malformed_logging_section_raises(self, write_config):
        """Test that a scalar logging section raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            LoggingConfig.from_file(write_config({"logging": "verbose"}))
