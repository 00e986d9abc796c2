"""Export engine moving time from Toggl to the time tracker."""

import logging
from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

import httpx

from toggl_export.export.aggregator import aggregate
from toggl_export.export.models import AggregatedEntry
from toggl_export.export.parser import parse_entries

if TYPE_CHECKING:
    from toggl_export.timetracker import TimeTrackerClient
    from toggl_export.toggl import TogglClient

logger = logging.getLogger(__name__)

EntryCallback = Callable[[AggregatedEntry, Exception | None], None]


class ExportResult:
    """Results from an export run."""

    def __init__(self) -> None:
        """Initialize export result."""
        self.entries_logged = 0
        self.entries_failed = 0
        self.errors: list[str] = []

    def add_success(self) -> None:
        """Record a logged entry."""
        self.entries_logged += 1

    def add_failure(self, error: str) -> None:
        """Record a failed entry."""
        self.entries_failed += 1
        self.errors.append(error)

    def __str__(self) -> str:
        """String representation of results."""
        return f"Logged: {self.entries_logged}, Failed: {self.entries_failed}"


class ExportEngine:
    """Fetches, aggregates and logs time entries."""

    def __init__(
        self,
        toggl_client: "TogglClient",
        timetracker_client: "TimeTrackerClient",
        workspace_id: int,
    ) -> None:
        """Initialize export engine.

        Args:
            toggl_client: Toggl reports API client.
            timetracker_client: Time tracker API client.
            workspace_id: Toggl workspace to read entries from.
        """
        self.toggl = toggl_client
        self.timetracker = timetracker_client
        self.workspace_id = workspace_id

    def collect(self, since: date, until: date) -> list[AggregatedEntry]:
        """Fetch Toggl entries and turn them into issue logs.

        Args:
            since: First day to export.
            until: Last day to export.

        Returns:
            Aggregated entries, empty if no entry could be matched to an issue.

        Raises:
            httpx.HTTPError: If fetching repositories or entries fails.
        """
        repositories = self.timetracker.get_repository_index()
        toggl_entries = self.toggl.get_time_entries(self.workspace_id, since, until)

        entries = aggregate(parse_entries(toggl_entries, repositories))
        logger.info(
            f"Matched {len(toggl_entries)} Toggl entries to {len(entries)} issue logs "
            f"from {since} to {until}"
        )
        return entries

    def submit(
        self,
        entries: list[AggregatedEntry],
        dry_run: bool = False,
        on_entry: EntryCallback | None = None,
    ) -> ExportResult:
        """Log entries in the time tracker, one at a time and in order.

        A failed entry is recorded and the remaining entries are still
        submitted.

        Args:
            entries: Aggregated entries to log.
            dry_run: If True, only log what would be submitted.
            on_entry: Called after each entry with the error, if any.

        Returns:
            Export results.
        """
        result = ExportResult()

        for entry in entries:
            error: Exception | None = None
            if dry_run:
                logger.info(
                    f"[DRY RUN] Would log {entry.duration_label} on "
                    f"{entry.repository}#{entry.issue_number} for {entry.day}"
                )
                result.add_success()
            else:
                try:
                    self.timetracker.log_time(entry)
                    result.add_success()
                except httpx.HTTPError as e:
                    logger.error(f"Failed to log {entry.repository}#{entry.issue_number}: {e}")
                    result.add_failure(f"{entry.repository}#{entry.issue_number}: {e}")
                    error = e

            if on_entry is not None:
                on_entry(entry, error)

        logger.info(f"Export complete: {result}")
        return result
