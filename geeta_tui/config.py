"""Configuration management for geeta-tui."""

import json
import logging
from pathlib import Path
from typing import Any, Optional


CONFIG_DIR = Path.home() / ".config" / "geeta-tui"
CONFIG_FILE = CONFIG_DIR / "config.json"

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when a configuration write fails."""


class ConfigStore:
    """Key/value settings persisted as a JSON file.

    The file is read lazily on first access and rewritten after every
    ``set``. A missing, unreadable or corrupt file yields empty settings.
    """

    def __init__(self, path: Path = CONFIG_FILE) -> None:
        self.path = Path(path)
        self._data: Optional[dict] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``."""
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` and write the file.

        Raises:
            StoreError: If the file could not be written.
        """
        self._load()[key] = value
        self.save()

    def save(self) -> None:
        """Save config to file."""
        data = self._load()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write config file %s: %s", self.path, e)
            raise StoreError(str(e)) from e

    def _load(self) -> dict:
        """Load config from file, or return defaults."""
        if self._data is not None:
            return self._data

        self._data = {}
        if not self.path.exists():
            return self._data

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", self.path, e)
            return self._data

        if isinstance(data, dict):
            self._data = data
        else:
            logger.warning("Ignoring config file %s: not a JSON object", self.path)
        return self._data


def get_config() -> ConfigStore:
    """Get the application config."""
    return ConfigStore()
