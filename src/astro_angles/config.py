"""Configuration management for astro-angles."""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional, Tuple

from .format import AngleRange, AngleUnitPrecision


# Environment variable that overrides the config file location.
CONFIG_PATH_ENV = "ASTRO_ANGLES_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigManager:
    """Manages default formatting preferences and logging level."""

    # Default config location
    DEFAULT_CONFIG_DIR = Path.home() / ".config" / "astro-angles"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

    # Default configuration
    DEFAULT_CONFIG = {
        "format": {
            "unit_precision": "degree_seconds",
            "precision": 2,
            "range": "non_negative"
        },
        "log_level": "INFO"
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            config_path: Optional custom config file path. Falls back to
                $ASTRO_ANGLES_CONFIG, then ~/.config/astro-angles/config.json.
        """
        env_path = os.environ.get(CONFIG_PATH_ENV)
        self.config_path = Path(config_path or env_path or self.DEFAULT_CONFIG_FILE)
        self.config = self._load_or_create()

    def _load_or_create(self) -> Dict[str, Any]:
        """Load existing config or create default."""
        if self.config_path.exists():
            return self._load()
        else:
            # Create directory if needed
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            defaults = copy.deepcopy(self.DEFAULT_CONFIG)
            self._save(defaults)
            return defaults

    def _load(self) -> Dict[str, Any]:
        """Load config from file and validate it."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise ValueError(f"Failed to load config from {self.config_path}: {e}")

        if not isinstance(config, dict):
            raise ValueError(f"Invalid config in {self.config_path}: expected a JSON object")

        # Merge with defaults (in case new keys were added)
        merged = copy.deepcopy(self.DEFAULT_CONFIG)
        merged["format"].update(config.get("format") or {})
        if "log_level" in config:
            merged["log_level"] = config["log_level"]

        self._validate_format(merged["format"])
        self._validate_log_level(merged["log_level"])
        return merged

    def _save(self, config: Dict[str, Any]) -> None:
        """Save config to file."""
        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        except IOError as e:
            raise ValueError(f"Failed to save config to {self.config_path}: {e}")

    def save(self) -> None:
        """Save current config to file."""
        self._save(self.config)

    # Validation

    @staticmethod
    def _validate_format(fmt: Dict[str, Any]) -> Tuple[AngleUnitPrecision, AngleRange]:
        """Turn a format section into typed values; ValueError if invalid."""
        unit_precision = AngleUnitPrecision.from_name(fmt["unit_precision"], fmt["precision"])
        angle_range = AngleRange.from_name(fmt["range"])
        return unit_precision, angle_range

    @staticmethod
    def _validate_log_level(level: Any) -> str:
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {level!r}. Must be one of {', '.join(LOG_LEVELS)}"
            )
        return level.upper()

    # Format methods

    def get_format_defaults(self) -> Tuple[AngleUnitPrecision, AngleRange]:
        """Get the default unit/precision and range used when a caller gives none."""
        return self._validate_format(self.config["format"])

    def set_format_defaults(
        self,
        unit_precision: str,  # e.g. "degree_seconds"
        precision: int,
        angle_range: str  # "non_negative" or "symmetric"
    ) -> None:
        """
        Set default formatting preferences.

        Args:
            unit_precision: One of degrees, degree_minutes, degree_seconds,
                hours, hour_minutes, hour_seconds
            precision: Fractional digits of the finest component (>= 0)
            angle_range: "non_negative" or "symmetric"

        Raises:
            ValueError: If any value is not recognised
        """
        parsed, parsed_range = self._validate_format({
            "unit_precision": unit_precision,
            "precision": precision,
            "range": angle_range
        })

        self.config["format"] = {
            "unit_precision": parsed.name,
            "precision": parsed.precision,
            "range": parsed_range.value
        }
        self.save()

    # Logging methods

    def get_log_level(self) -> str:
        """Get the configured logging level name (e.g. "INFO")."""
        return self.config["log_level"].upper()

    def get_log_level_value(self) -> int:
        """Get the configured logging level as a `logging` constant."""
        return logging.getLevelName(self.get_log_level())

    def set_log_level(self, level: str) -> None:
        """Set the logging level name; ValueError if not a standard level."""
        self.config["log_level"] = self._validate_log_level(level)
        self.save()
