"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from between.config import AppConfig, TimelineConfig, load_config
from between.domain.exceptions import ConfigError


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestTimelineConfig:
    """Tests for TimelineConfig validation."""

    def test_defaults(self):
        """Test the documented defaults."""
        config = TimelineConfig()

        assert config.day_start_hour == 0
        assert config.day_end_hour == 24
        assert config.adjacency_threshold_seconds == 60
        assert config.minimum_gap_seconds == 300

    def test_invalid_start_hour(self):
        """Test that hour 24 is not a valid start."""
        with pytest.raises(ValidationError, match="day_start_hour"):
            TimelineConfig(day_start_hour=24)

    def test_invalid_end_hour(self):
        """Test that hour 25 is not a valid end."""
        with pytest.raises(ValidationError, match="day_end_hour"):
            TimelineConfig(day_end_hour=25)

    def test_end_before_start(self):
        """Test the window must open before it closes."""
        with pytest.raises(ValidationError, match="later than day_start_hour"):
            TimelineConfig(day_start_hour=18, day_end_hour=8)

    def test_negative_threshold(self):
        """Test that thresholds cannot be negative."""
        with pytest.raises(ValidationError, match="must not be negative"):
            TimelineConfig(minimum_gap_seconds=-1)


class TestAppConfig:
    """Tests for AppConfig loading."""

    def test_load_from_yaml(self, tmp_path):
        """Test a complete config file."""
        config_path = _write(
            tmp_path / "config.yaml",
            "timezone: Europe/Vienna\n"
            "timeline:\n"
            "  day_start_hour: 8\n"
            "  day_end_hour: 18\n"
            "  minimum_gap_seconds: 900\n"
            "calendar:\n"
            "  events_file: events.json\n"
            "  include_all_day: true\n"
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.timezone == "Europe/Vienna"
        assert config.timeline.day_start_hour == 8
        assert config.timeline.day_end_hour == 18
        assert config.timeline.minimum_gap_seconds == 900
        assert config.timeline.adjacency_threshold_seconds == 60
        assert config.calendar.include_all_day is True
        assert config.calendar.events_file == tmp_path / "events.json"

    def test_absolute_events_file_is_kept(self, tmp_path):
        """Test absolute paths are not rewritten."""
        events = tmp_path / "elsewhere" / "events.json"
        config_path = _write(tmp_path / "config.yaml", f"calendar:\n  events_file: {events}\n")

        config = AppConfig.load_from_yaml(config_path)

        assert config.calendar.events_file == events

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test an empty YAML file."""
        config = AppConfig.load_from_yaml(_write(tmp_path / "config.yaml", ""))

        assert config == AppConfig()

    def test_missing_file(self, tmp_path):
        """Test a missing config file."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test broken YAML is reported as ValueError."""
        config_path = _write(tmp_path / "config.yaml", "timeline: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    def test_non_mapping_root(self, tmp_path):
        """Test a list at the root is rejected."""
        config_path = _write(tmp_path / "config.yaml", "- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping at the root"):
            AppConfig.load_from_yaml(config_path)


class TestLoadConfig:
    """Tests for load_config fallbacks."""

    def test_explicit_missing_path_raises(self, tmp_path):
        """Test an explicit path must exist."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_defaults_without_any_file(self, tmp_path, monkeypatch):
        """Test built-in defaults when no config file is found."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("between.config.get_default_config_path", lambda: tmp_path / "config.yaml")

        assert load_config() == AppConfig()

    def test_default_path_is_used(self, tmp_path, monkeypatch):
        """Test the default file is picked up."""
        _write(tmp_path / "config.yaml", "timezone: UTC\n")
        monkeypatch.setattr("between.config.get_default_config_path", lambda: tmp_path / "config.yaml")

        assert load_config().timezone == "UTC"
