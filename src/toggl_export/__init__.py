"""Export Toggl time entries to the scalableminds time tracker."""

__version__ = "0.1.0"
