"""Aggregate parsed entries per issue, comment and day."""

import logging
from collections.abc import Iterable
from datetime import date

from toggl_export.export.models import AggregatedEntry, AggregationKey, ParsedEntry

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60_000


def format_duration(milliseconds: int) -> str:
    """Format a duration as hours and zero-padded minutes, e.g. "2h 05m"."""
    hours, minutes = divmod(round(milliseconds / MS_PER_MINUTE), 60)
    return f"{hours}h {minutes:02d}m"


def aggregate(entries: Iterable[ParsedEntry]) -> list[AggregatedEntry]:
    """Merge entries sharing repository, issue, comment and day.

    Durations are summed per group. Groups are returned in the order their
    first entry appears in the input.

    Args:
        entries: Parsed entries.

    Returns:
        One aggregated entry per distinct key.
    """
    groups: dict[AggregationKey, list[ParsedEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.key, []).append(entry)

    aggregated = []
    for members in groups.values():
        first = members[0]
        duration_ms = sum(member.duration_ms for member in members)
        aggregated.append(
            AggregatedEntry(
                repository=first.repository,
                repository_id=first.repository_id,
                issue_number=first.issue_number,
                comment=first.comment,
                day=first.day,
                duration_ms=duration_ms,
                duration_label=format_duration(duration_ms),
            )
        )

    logger.debug(f"Aggregated entries into {len(aggregated)} issue logs")
    return aggregated


def total_duration(entries: Iterable[AggregatedEntry]) -> int:
    """Sum of all durations in milliseconds."""
    return sum(entry.duration_ms for entry in entries)


def group_by_day(entries: Iterable[AggregatedEntry]) -> list[tuple[date, list[AggregatedEntry]]]:
    """Group aggregated entries by day for display, oldest day first."""
    days: dict[date, list[AggregatedEntry]] = {}
    for entry in entries:
        days.setdefault(entry.day, []).append(entry)
    return sorted(days.items())
