"""Pydantic models for time tracker API responses."""

from pydantic import BaseModel, ConfigDict


class TimeTrackerRepository(BaseModel):
    """Repository as listed by the time tracker."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    name: str
