"""Configuration loader for fleet scenarios.

This module provides YAML configuration loading with dot-notation access,
recursive merging over built-in defaults, and section validation.

The built-in defaults describe the two demonstration scenarios: a fleet of
caller-configured aircraft and a fleet assembled from preset counts.

Typical usage example:
    from fleetcatalog.core.config import ConfigLoader

    config = ConfigLoader.defaults()
    config.merge(ConfigLoader.load("config/fleet.yaml"))
    bounds = config.get("scenarios.preset.fuel_filter")
"""

import copy
from pathlib import Path
from typing import Any

import yaml

from fleetcatalog.core.logging_system import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "scenarios": {
        "configured": {
            "title": "Configured fleet",
            "shared": False,
            "aircraft": [
                {
                    "kind": "passenger",
                    "capacity": 200,
                    "flight_range_km": 5000,
                    "fuel_consumption_per_100km": 30,
                },
                {
                    "kind": "cargo",
                    "capacity": 50000,
                    "flight_range_km": 4000,
                    "fuel_consumption_per_100km": 50,
                },
                {
                    "kind": "private",
                    "capacity": 10,
                    "flight_range_km": 6000,
                    "fuel_consumption_per_100km": 20,
                },
            ],
            "fuel_filter": {"min": 25, "max": 40},
        },
        "preset": {
            "title": "Preset fleet",
            "shared": True,
            "aircraft": [
                {"kind": "passenger", "count": 3},
                {"kind": "cargo", "count": 2},
                {"kind": "private", "count": 1},
            ],
            "fuel_filter": {"min": 6, "max": 10},
        },
    },
}


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Examples:
        >>> config = ConfigLoader.load("config/fleet.yaml")
        >>> entries = config.get("scenarios.configured.aircraft", default=[])
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def defaults(cls) -> "ConfigLoader":
        """Create a loader holding a private copy of the built-in scenarios."""
        return cls(copy.deepcopy(DEFAULT_CONFIG))

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, not valid YAML
                or does not contain a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration {path}: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "scenarios.preset.fuel_filter.min").
            default: Value returned when any part of the path is missing.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Mappings are merged recursively; any other value in ``other``
        (lists included) replaces the existing one.

        Args:
            other: ConfigLoader to merge from.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the underlying data."""
        return copy.deepcopy(self._data)
