"""Toggl reports API client."""

import logging
from datetime import date
from typing import Any

import httpx

from toggl_export.toggl.models import TogglTimeEntry

logger = logging.getLogger(__name__)


class TogglClient:
    """Client for the Toggl detailed reports API."""

    BASE_URL = "https://toggl.com/reports/api/v2"
    USER_AGENT = "time_tracker_export"

    def __init__(self, api_token: str, transport: httpx.BaseTransport | None = None) -> None:
        """Initialize Toggl client.

        Args:
            api_token: Toggl API token.
            transport: Optional httpx transport, used by tests.

        Raises:
            ValueError: If no API token is given.
        """
        if not api_token:
            raise ValueError("Toggl API token not provided")

        self.client = httpx.Client(
            base_url=self.BASE_URL,
            auth=(api_token, "api_token"),
            timeout=30.0,
            transport=transport,
        )

    def get_report_page(
        self,
        workspace_id: int,
        since: date,
        until: date,
        page: int,
    ) -> list[dict[str, Any]]:
        """Fetch one page of the detailed report.

        Args:
            workspace_id: Toggl workspace ID.
            since: First day to include.
            until: Last day to include.
            page: 1-based page number.

        Returns:
            Raw entries on that page; empty once past the last page.

        Raises:
            httpx.HTTPError: If API request fails.
        """
        response = self.client.get(
            "/details",
            params={
                "workspace_id": workspace_id,
                "user_agent": self.USER_AGENT,
                "since": since.isoformat(),
                "until": until.isoformat(),
                "page": page,
            },
        )
        response.raise_for_status()
        return response.json().get("data") or []

    def get_time_entries(self, workspace_id: int, since: date, until: date) -> list[TogglTimeEntry]:
        """Get all time entries between two days, following pagination.

        Args:
            workspace_id: Toggl workspace ID.
            since: First day to include.
            until: Last day to include.

        Returns:
            Time entries in report order.

        Raises:
            httpx.HTTPError: If any page request fails.
        """
        entries: list[TogglTimeEntry] = []
        page = 1
        while True:
            data = self.get_report_page(workspace_id, since, until, page)
            if not data:
                break
            logger.debug(f"Fetched {len(data)} Toggl entries from page {page}")
            entries.extend(TogglTimeEntry(**item) for item in data)
            page += 1

        logger.info(f"Fetched {len(entries)} Toggl entries from {since} to {until}")
        return entries

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "TogglClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
