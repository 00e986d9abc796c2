"""Transformation of Toggl entries into time tracker issue logs."""

from toggl_export.export.aggregator import aggregate, format_duration, group_by_day, total_duration
from toggl_export.export.engine import ExportEngine, ExportResult
from toggl_export.export.models import AggregatedEntry, AggregationKey, ParsedEntry, RepositoryIndex
from toggl_export.export.parser import parse_entries, parse_entry

__all__ = [
    "AggregatedEntry",
    "AggregationKey",
    "ExportEngine",
    "ExportResult",
    "ParsedEntry",
    "RepositoryIndex",
    "aggregate",
    "format_duration",
    "group_by_day",
    "parse_entries",
    "parse_entry",
    "total_duration",
]
