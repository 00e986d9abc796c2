"""Toggl reports API integration."""

from toggl_export.toggl.client import TogglClient
from toggl_export.toggl.models import TogglTimeEntry

__all__ = ["TogglClient", "TogglTimeEntry"]
