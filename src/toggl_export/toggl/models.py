"""Pydantic models for Toggl reports API responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class TogglTimeEntry(BaseModel):
    """One row of the Toggl detailed report."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    client: str = ""
    project: str = ""
    description: str = ""
    start: datetime
    dur: int

    @field_validator("client", "project", "description", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        """Toggl sends null for entries without a client, project or description."""
        return "" if value is None else value

    @property
    def repository(self) -> str:
        """Time-tracker repository name this entry belongs to."""
        return f"{self.client}/{self.project}"
