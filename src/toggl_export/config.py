"""Configuration management for toggl-export."""

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from toggl_export.utils.storage import StorageManager

logger = logging.getLogger(__name__)

TogglApiToken = Annotated[str, Field(pattern=r"^[0-9a-fA-F]{32}$")]
TogglWorkspaceId = Annotated[int, Field(gt=0)]
TimeTrackerSession = Annotated[str, Field(pattern=r"^[0-9a-zA-Z]{26}$")]

_FIELD_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "toggl_api_token": TypeAdapter(TogglApiToken),
    "toggl_workspace_id": TypeAdapter(TogglWorkspaceId),
    "time_tracker_session": TypeAdapter(TimeTrackerSession),
}


class TogglExportConfig(BaseModel):
    """Credentials needed to read from Toggl and write to the time tracker."""

    model_config = ConfigDict(frozen=True)

    toggl_api_token: TogglApiToken
    toggl_workspace_id: TogglWorkspaceId
    time_tracker_session: TimeTrackerSession


def validate_value(field: str, value: Any) -> Any:
    """Validate a single configuration value.

    Args:
        field: TogglExportConfig field name.
        value: Raw value, e.g. as typed at a prompt.

    Returns:
        The validated value.

    Raises:
        pydantic.ValidationError: If the value is invalid for the field.
    """
    return _FIELD_ADAPTERS[field].validate_python(value)


class Config:
    """Loads and saves the persisted TogglExportConfig."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize configuration.

        Args:
            config_dir: Directory for storing configuration.
        """
        self.storage = StorageManager(config_dir)

    def load(self) -> TogglExportConfig | None:
        """Load the saved configuration.

        Returns:
            The configuration, or None if it is missing or invalid.
        """
        if not self.storage.has_config():
            return None
        data = self.storage.load_config()
        try:
            return TogglExportConfig(**data)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid configuration in {self.storage.config_file}: {e}")
            return None

    def load_raw(self) -> dict[str, Any]:
        """Load the saved values without validating them."""
        return self.storage.load_config()

    def save(self, config: TogglExportConfig) -> None:
        """Persist a configuration.

        Args:
            config: Validated configuration.
        """
        self.storage.save_config(config.model_dump())
        logger.info(f"Saved configuration to {self.storage.config_file}")
