"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, temporary config files and a reset of
the handlers setup_logging installs.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Temporary directory, removed after the test."""
    tmp = tempfile.mkdtemp(prefix="textkit_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def write_config(temp_dir: Path):
    """Factory writing a JSON document to <temp_dir>/config/config.json."""
    def _write(data) -> Path:
        config_dir = temp_dir / "config"
        config_dir.mkdir(exist_ok=True)
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps(data), encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def reset_package_logger():
    """Remove handlers installed by setup_logging and restore the level."""
    import logging
    from textkit.core import logger

    package_logger = logging.getLogger(logger.PACKAGE_LOGGER)
    saved_level = package_logger.level
    yield package_logger

    for handler in logger._installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    logger._installed_handlers.clear()
    package_logger.setLevel(saved_level)
