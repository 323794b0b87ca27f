"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.exceptions import ConfigError
from .domain.free_intervals import DEFAULT_MINIMUM_GAP_SECONDS
from .domain.interval_merger import DEFAULT_ADJACENCY_THRESHOLD_SECONDS


class TimelineConfig(BaseModel):
    """Bounds of the day window and the interval tuning constants."""
    day_start_hour: int = 0
    day_end_hour: int = 24
    adjacency_threshold_seconds: float = DEFAULT_ADJACENCY_THRESHOLD_SECONDS
    minimum_gap_seconds: float = DEFAULT_MINIMUM_GAP_SECONDS

    @field_validator("day_start_hour")
    @classmethod
    def validate_start_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 23."""
        if not 0 <= v <= 23:
            raise ValueError(f"day_start_hour must be between 0 and 23, got {v}")
        return v

    @field_validator("day_end_hour")
    @classmethod
    def validate_end_hour(cls, v: int) -> int:
        """Validate hour is between 1 and 24 (24 means the next midnight)."""
        if not 1 <= v <= 24:
            raise ValueError(f"day_end_hour must be between 1 and 24, got {v}")
        return v

    @field_validator("adjacency_threshold_seconds", "minimum_gap_seconds")
    @classmethod
    def validate_non_negative(cls, value: float) -> float:
        """Thresholds are spans of time and cannot be negative."""
        if value < 0:
            raise ValueError(f"Threshold must not be negative, got {value}")
        return value

    @model_validator(mode="after")
    def validate_hours_order(self) -> "TimelineConfig":
        """Ensure the configured window opens before it closes."""
        if self.day_end_hour <= self.day_start_hour:
            raise ValueError("day_end_hour must be later than day_start_hour")
        return self


class CalendarConfig(BaseModel):
    """Where busy intervals come from."""
    events_file: Optional[Path] = None
    include_all_day: bool = False


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "Europe/Berlin"
    timeline: TimelineConfig = Field(default_factory=TimelineConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        A relative ``calendar.events_file`` is resolved against the directory
        of the config file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the root level.")

        config = cls(**data)

        events_file = config.calendar.events_file
        if events_file is not None and not events_file.is_absolute():
            config.calendar.events_file = config_path.parent / events_file

        return config


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load an explicit config file, or the default one when it exists.

    Without an explicit path and without a default file, built-in defaults
    are returned. An explicit path that does not exist is an error.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    return AppConfig()
