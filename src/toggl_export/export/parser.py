"""Resolve Toggl entries to time tracker issues."""

import logging
import re
from collections.abc import Iterable

from toggl_export.export.models import ParsedEntry, RepositoryIndex
from toggl_export.toggl.models import TogglTimeEntry

logger = logging.getLogger(__name__)

# "#<issue> <comment>", e.g. "#42 fix the thing"
ISSUE_TAG_PATTERN = re.compile(r"#([0-9]+) (.+)")


def parse_entry(entry: TogglTimeEntry, repositories: RepositoryIndex) -> ParsedEntry | None:
    """Extract the issue reference from a Toggl entry.

    Entries whose description does not start with an issue tag, or whose
    client/project pair is not a time tracker repository, are not loggable
    and yield None.

    Args:
        entry: Raw Toggl time entry.
        repositories: Repository name to ID index.

    Returns:
        The parsed entry, or None if the entry cannot be logged.
    """
    repository = entry.repository

    match = ISSUE_TAG_PATTERN.fullmatch(entry.description)
    if match is None:
        logger.debug(f"Skipping entry without issue tag: {entry.description!r}")
        return None

    if repository not in repositories:
        logger.debug(f"Skipping entry for unknown repository {repository!r}")
        return None

    issue_number, comment = match.groups()
    return ParsedEntry(
        repository=repository,
        repository_id=repositories[repository],
        issue_number=issue_number,
        comment=comment,
        day=entry.start.astimezone().date(),
        duration_ms=entry.dur,
    )


def parse_entries(entries: Iterable[TogglTimeEntry], repositories: RepositoryIndex) -> list[ParsedEntry]:
    """Parse entries, dropping those that cannot be logged.

    Args:
        entries: Raw Toggl time entries.
        repositories: Repository name to ID index.

    Returns:
        Parsed entries in input order.
    """
    entries = list(entries)
    parsed = [p for p in (parse_entry(e, repositories) for e in entries) if p is not None]
    logger.debug(f"Parsed {len(parsed)} of {len(entries)} Toggl entries")
    return parsed
