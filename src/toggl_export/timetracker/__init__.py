"""scalableminds time tracker API integration."""

from toggl_export.timetracker.client import TimeTrackerClient
from toggl_export.timetracker.models import TimeTrackerRepository

__all__ = ["TimeTrackerClient", "TimeTrackerRepository"]
