"""
Tests for logging setup.
"""

import logging

import pytest

import app.utils as utils
from app.utils import logging_config
from app.utils.logging_config import setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


def own_handlers(root):
    return [h for h in root.handlers if getattr(h, "_movies_api", False)]


class TestSetupLogging:
    """Tests for console and rotating file handlers."""

    def test_console_only(self, root_logger):
        """Test that without a file only the console handler is installed."""
        setup_logging(level="DEBUG")

        assert len(own_handlers(root_logger)) == 1
        assert root_logger.level == logging.DEBUG

    def test_log_file_written(self, root_logger, tmp_path):
        """Test that a log file is created under the log directory."""
        setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path))
        logging.getLogger("app.test").info("hello")

        assert len(own_handlers(root_logger)) == 2
        for handler in own_handlers(root_logger):
            handler.flush()
        assert "hello" in (tmp_path / "api.log").read_text()

    def test_repeat_calls_replace_handlers(self, root_logger):
        """Test that calling setup twice does not duplicate handlers."""
        setup_logging()
        setup_logging()

        assert len(own_handlers(root_logger)) == 1

    def test_sqlalchemy_quietened(self, root_logger):
        """Test that SQL statement logging is held at WARNING."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_public_helpers(self):
        """Test that the package exposes only the setup helpers."""
        assert utils.__all__ == ["setup_logging", "configure_api_logging"]
        assert not hasattr(logging_config, "get_logger")
