"""scalableminds time tracker API client."""

import logging
from typing import Any

import httpx

from toggl_export.export.models import AggregatedEntry, RepositoryIndex
from toggl_export.timetracker.models import TimeTrackerRepository

logger = logging.getLogger(__name__)


class TimeTrackerClient:
    """Client for the time tracker API."""

    BASE_URL = "https://timer.scm.io/api"
    SESSION_COOKIE = "time-tracker-session"

    def __init__(self, session: str, transport: httpx.BaseTransport | None = None) -> None:
        """Initialize time tracker client.

        Args:
            session: Value of the time tracker session cookie.
            transport: Optional httpx transport, used by tests.

        Raises:
            ValueError: If no session is given.
        """
        if not session:
            raise ValueError("Time tracker session not provided")

        self.client = httpx.Client(
            base_url=self.BASE_URL,
            headers={"Cookie": f"{self.SESSION_COOKIE}={session}"},
            timeout=30.0,
            transport=transport,
        )

    def list_repositories(self) -> list[TimeTrackerRepository]:
        """List all repositories known to the time tracker.

        Returns:
            List of repositories.

        Raises:
            httpx.HTTPError: If API request fails.
        """
        response = self.client.get("/repos")
        response.raise_for_status()
        return [TimeTrackerRepository(**item) for item in response.json()]

    def get_repository_index(self) -> RepositoryIndex:
        """Map repository names to repository IDs.

        Returns:
            Repository index keyed by "client/project" name.

        Raises:
            httpx.HTTPError: If API request fails.
        """
        index = {repo.name: repo.id for repo in self.list_repositories()}
        logger.info(f"Found {len(index)} time tracker repositories")
        return index

    def log_time(self, entry: AggregatedEntry) -> dict[str, Any]:
        """Log time on an issue.

        Every call creates a new log; repeating it logs the time twice.

        Args:
            entry: Aggregated entry to log.

        Returns:
            The time tracker's response body.

        Raises:
            httpx.HTTPError: If API request fails.
        """
        response = self.client.post(
            f"/repos/{entry.repository_id}/issues/{entry.issue_number}",
            json=entry.to_api_dict(),
        )
        response.raise_for_status()
        logger.info(
            f"Logged {entry.duration_label} on {entry.repository}#{entry.issue_number} for {entry.day}"
        )
        return response.json() if response.content else {}

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "TimeTrackerClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
