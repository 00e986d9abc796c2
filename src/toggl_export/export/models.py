"""Entries flowing through the export pipeline."""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, NamedTuple

RepositoryIndex = dict[str, int | str]


class AggregationKey(NamedTuple):
    """Entries sharing this key are logged as one."""

    repository: str
    issue_number: str
    comment: str
    day: date


@dataclass(frozen=True)
class ParsedEntry:
    """A Toggl entry resolved to a time tracker issue."""

    repository: str
    repository_id: int | str
    issue_number: str
    comment: str
    day: date
    duration_ms: int

    @property
    def key(self) -> AggregationKey:
        return AggregationKey(self.repository, self.issue_number, self.comment, self.day)


@dataclass(frozen=True)
class AggregatedEntry:
    """Total time spent on one issue with one comment on one day."""

    repository: str
    repository_id: int | str
    issue_number: str
    comment: str
    day: date
    duration_ms: int
    duration_label: str

    def to_api_dict(self) -> dict[str, Any]:
        """Convert to the time tracker's log payload.

        Returns:
            Dictionary for API submission.
        """
        local_midnight = datetime.combine(self.day, time.min).astimezone()
        # "date" is the UTC instant of local midnight, in millisecond ISO form.
        utc_midnight = local_midnight.astimezone(timezone.utc)
        return {
            "repository": self.repository,
            "id": self.repository_id,
            "issueNumber": self.issue_number,
            "comment": self.comment,
            "date": utc_midnight.strftime("%Y-%m-%dT%H:%M:%S.000Z"),
            "dateTime": local_midnight.isoformat(),
            "dur": self.duration_ms,
            "duration": self.duration_label,
        }
