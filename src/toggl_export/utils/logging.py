"""Logging configuration for toggl-export."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from toggl_export.utils.storage import DEFAULT_CONFIG_DIR

LOG_FILE_NAME = "toggl-export.log"


def setup_logging(
    log_level: int = logging.INFO,
    config_dir: Path | None = None,
    console: Console | None = None,
) -> None:
    """Send log records to a file and, for problems only, to the terminal.

    The log file receives everything at ``log_level``. The terminal handler
    shares the CLI's rich console so records don't tear through status
    spinners and tables; it stays at WARNING unless ``log_level`` is DEBUG.

    Args:
        log_level: Logging level (e.g., logging.INFO, logging.DEBUG).
        config_dir: Directory holding the log file. Defaults to ~/.toggl-export/
        console: Rich console to render terminal records on.
    """
    config_dir = config_dir or DEFAULT_CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = logging.FileHandler(config_dir / LOG_FILE_NAME)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)

    console_handler = RichHandler(console=console, show_path=False, markup=False)
    console_handler.setLevel(log_level if log_level <= logging.DEBUG else logging.WARNING)
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
