"""Tests for API and pipeline models."""

from datetime import date, datetime, time, timezone

import pytest
from pydantic import ValidationError

from toggl_export.export import AggregatedEntry
from toggl_export.timetracker import TimeTrackerRepository
from toggl_export.toggl import TogglTimeEntry


class TestTogglTimeEntry:
    """Test TogglTimeEntry."""

    def test_from_report_row(self) -> None:
        """Test a report row loads and extra fields are ignored."""
        entry = TogglTimeEntry(
            id=5,
            client="acme",
            project="widgets",
            description="#42 fix",
            start="2017-03-01T10:00:00+01:00",
            dur=60_000,
            tags=[],
        )

        assert entry.repository == "acme/widgets"
        assert isinstance(entry.start, datetime)
        assert entry.dur == 60_000

    def test_null_description(self) -> None:
        """Test a null description loads as empty."""
        entry = TogglTimeEntry(client="a", project="b", description=None, start="2017-03-01T10:00:00", dur=0)

        assert entry.description == ""

    def test_missing_duration(self) -> None:
        """Test the duration is required."""
        with pytest.raises(ValidationError):
            TogglTimeEntry(client="a", project="b", description="x", start="2017-03-01T10:00:00")


class TestTimeTrackerRepository:
    """Test TimeTrackerRepository."""

    def test_creation(self) -> None:
        """Test string and integer IDs are both accepted."""
        assert TimeTrackerRepository(id="R1", name="acme/widgets").id == "R1"
        assert TimeTrackerRepository(id=7, name="acme/gadgets").id == 7


class TestAggregatedEntry:
    """Test AggregatedEntry."""

    def test_to_api_dict(self, sample_aggregated_entry: AggregatedEntry) -> None:
        """Test the submission payload."""
        payload = sample_aggregated_entry.to_api_dict()

        assert payload["repository"] == "acme/widgets"
        assert payload["id"] == "R1"
        assert payload["issueNumber"] == "42"
        assert payload["comment"] == "fix the thing"
        assert payload["date"].endswith(".000Z")
        assert payload["dateTime"].startswith("2017-03-01T00:00:00")
        assert payload["dur"] == 5_400_000
        assert payload["duration"] == "1h 30m"

    def test_date_is_utc_instant_of_local_midnight(self, sample_aggregated_entry: AggregatedEntry) -> None:
        """Test 'date' and 'dateTime' name the same instant."""
        payload = sample_aggregated_entry.to_api_dict()
        local_midnight = datetime.combine(date(2017, 3, 1), time.min).astimezone()

        assert payload["date"] == local_midnight.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")
        assert datetime.fromisoformat(payload["date"].replace("Z", "+00:00")) == datetime.fromisoformat(
            payload["dateTime"]
        )
