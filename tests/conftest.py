"""Pytest configuration and fixtures."""

import logging
import tempfile
from datetime import date, datetime
from pathlib import Path

import pytest
from rich.logging import RichHandler

from toggl_export.config import Config, TogglExportConfig
from toggl_export.export import AggregatedEntry, ParsedEntry, RepositoryIndex
from toggl_export.toggl import TogglTimeEntry
from toggl_export.utils import StorageManager


def _build_toggl_entry(
    description: str = "#42 fix the thing",
    client: str | None = "acme",
    project: str | None = "widgets",
    start: datetime = datetime(2017, 3, 1, 10, 0),
    dur: int = 3_600_000,
) -> TogglTimeEntry:
    """Build a Toggl entry; naive start times are read as local time."""
    return TogglTimeEntry(
        client=client,
        project=project,
        description=description,
        start=start,
        dur=dur,
    )


def _build_parsed_entry(
    comment: str = "fix the thing",
    issue_number: str = "42",
    day: date = date(2017, 3, 1),
    duration_ms: int = 3_600_000,
    repository: str = "acme/widgets",
    repository_id: int | str = "R1",
) -> ParsedEntry:
    return ParsedEntry(
        repository=repository,
        repository_id=repository_id,
        issue_number=issue_number,
        comment=comment,
        day=day,
        duration_ms=duration_ms,
    )


@pytest.fixture
def temp_config_dir() -> Path:
    """Create a temporary configuration directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def storage_manager(temp_config_dir: Path) -> StorageManager:
    """Create a storage manager with temporary directory."""
    return StorageManager(temp_config_dir)


@pytest.fixture
def config(temp_config_dir: Path) -> Config:
    """Create a config instance with temporary directory."""
    return Config(temp_config_dir)


@pytest.fixture
def export_config() -> TogglExportConfig:
    """Create a valid export configuration."""
    return TogglExportConfig(
        toggl_api_token="0123456789abcdef0123456789ABCDEF",
        toggl_workspace_id=12345,
        time_tracker_session="abcdefghijklmnopqrstuvwxyz",
    )


@pytest.fixture
def repository_index() -> RepositoryIndex:
    """Repository name to ID index."""
    return {"acme/widgets": "R1", "acme/gadgets": 7}


@pytest.fixture
def sample_aggregated_entry() -> AggregatedEntry:
    """Create a sample aggregated entry."""
    return AggregatedEntry(
        repository="acme/widgets",
        repository_id="R1",
        issue_number="42",
        comment="fix the thing",
        day=date(2017, 3, 1),
        duration_ms=5_400_000,
        duration_label="1h 30m",
    )


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Drop handlers installed by setup_logging so they don't outlive the test."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.FileHandler, RichHandler):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def make_toggl_entry():
    """Factory for Toggl entries."""
    return _build_toggl_entry


@pytest.fixture
def make_parsed_entry():
    """Factory for parsed entries."""
    return _build_parsed_entry
