"""Utility modules for toggl-export."""

from toggl_export.utils.logging import get_logger, setup_logging
from toggl_export.utils.storage import StorageManager

__all__ = ["get_logger", "setup_logging", "StorageManager"]
