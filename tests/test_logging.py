"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from toggl_export.utils import setup_logging
from toggl_export.utils.logging import LOG_FILE_NAME


def _handler(handler_type: type) -> logging.Handler:
    return next(h for h in logging.getLogger().handlers if type(h) is handler_type)


class TestSetupLogging:
    """Test setup_logging."""

    def test_file_handler_keeps_info(self, temp_config_dir: Path) -> None:
        """Test INFO records reach the log file."""
        setup_logging(log_level=logging.INFO, config_dir=temp_config_dir)
        logging.getLogger("toggl_export.test").info("collected 3 entries")

        assert _handler(logging.FileHandler).level == logging.INFO
        assert "collected 3 entries" in (temp_config_dir / LOG_FILE_NAME).read_text()

    def test_console_shows_warnings_only(self, temp_config_dir: Path) -> None:
        """Test the terminal handler hides INFO records by default."""
        setup_logging(log_level=logging.INFO, config_dir=temp_config_dir)

        assert _handler(RichHandler).level == logging.WARNING

    def test_verbose_console_shows_debug(self, temp_config_dir: Path) -> None:
        """Test DEBUG also lowers the terminal handler."""
        setup_logging(log_level=logging.DEBUG, config_dir=temp_config_dir)

        assert _handler(RichHandler).level == logging.DEBUG
        assert _handler(logging.FileHandler).level == logging.DEBUG

    def test_console_is_shared(self, temp_config_dir: Path) -> None:
        """Test records are rendered on the console passed in."""
        console = Console(record=True, width=120)
        setup_logging(config_dir=temp_config_dir, console=console)
        logging.getLogger("toggl_export.test").warning("session expired")

        assert _handler(RichHandler).console is console
        assert "session expired" in console.export_text()

    def test_repeated_setup_replaces_handlers(self, temp_config_dir: Path) -> None:
        """Test calling setup twice does not duplicate handlers."""
        setup_logging(config_dir=temp_config_dir)
        setup_logging(config_dir=temp_config_dir)

        handler_types = [type(h) for h in logging.getLogger().handlers]
        assert handler_types.count(logging.FileHandler) == 1
        assert handler_types.count(RichHandler) == 1
