"""Persistent storage for the toggl-export configuration file."""

from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_DIR = Path.home() / ".toggl-export"


class StorageManager:
    """Manages the configuration directory and config.yaml."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize storage manager.

        Args:
            config_dir: Directory to store configuration. Defaults to ~/.toggl-export/
        """
        self.config_dir = config_dir or DEFAULT_CONFIG_DIR
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config_file = self.config_dir / "config.yaml"

    def load_config(self) -> dict[str, Any]:
        """Load the raw configuration.

        Returns:
            Configuration dictionary, empty if nothing was saved yet.
        """
        if self.config_file.exists():
            with open(self.config_file) as f:
                return yaml.safe_load(f) or {}
        return {}

    def save_config(self, config: dict[str, Any]) -> None:
        """Save the raw configuration.

        The file holds credentials, so it is readable by the owner only.

        Args:
            config: Configuration dictionary to save.
        """
        with open(self.config_file, "w") as f:
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
        self.config_file.chmod(0o600)

    def has_config(self) -> bool:
        """Check whether a configuration file exists."""
        return self.config_file.exists()
