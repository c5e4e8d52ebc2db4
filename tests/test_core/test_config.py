"""Tests for src/core/config.py — YAML loading, defaults, caching."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.core.config import (
    AlertingConfig,
    LogAnalysisConfig,
    LoggingConfig,
    Settings,
    StorageConfig,
    ThresholdDefaults,
    get_settings,
    load_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def _clean_settings() -> None:
    """Reset the global settings cache before each test."""
    reset_settings()


class TestDefaults:
    """Settings should have sensible defaults when no YAML is provided."""

    def test_default_alerting_config(self) -> None:
        cfg = AlertingConfig()
        assert cfg.tick_interval_secs == 5.0
        assert cfg.cooldown_secs == 60.0
        assert cfg.telemetry_timeout_secs == 2.0
        assert cfg.history_limit == 100

    def test_default_storage_config(self) -> None:
        assert StorageConfig().sample_retention == 1000

    def test_default_thresholds(self) -> None:
        cfg = ThresholdDefaults()
        assert (cfg.cpu_warning, cfg.cpu_critical) == (60.0, 80.0)
        assert (cfg.memory_warning, cfg.memory_critical) == (70.0, 85.0)

    def test_default_log_analysis_config(self) -> None:
        assert LogAnalysisConfig().top_errors_limit == 5

    @pytest.mark.parametrize("limit", [-1, 6, 50])
    def test_top_errors_limit_bounded(self, limit: int) -> None:
        with pytest.raises(ValidationError):
            LogAnalysisConfig(top_errors_limit=limit)

    def test_default_logging_config(self) -> None:
        cfg = LoggingConfig()
        assert cfg.level == "INFO"
        assert cfg.format == "json"

    def test_default_settings(self) -> None:
        s = Settings()
        assert s.alerting.tick_interval_secs == 5.0
        assert s.storage.sample_retention == 1000
        assert s.thresholds.cpu_critical == 80.0
        assert s.logging.level == "INFO"


class TestYamlLoading:
    """Settings should load correctly from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        config_data = {
            "alerting": {"tick_interval_secs": 1.5, "cooldown_secs": 30},
            "storage": {"sample_retention": 50},
            "thresholds": {"cpu_warning": 50, "cpu_critical": 90},
            "log_analysis": {"top_errors_limit": 3},
            "logging": {"level": "DEBUG", "format": "console"},
        }
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump(config_data))

        settings = load_settings(config_file)

        assert settings.alerting.tick_interval_secs == 1.5
        assert settings.alerting.cooldown_secs == 30
        assert settings.storage.sample_retention == 50
        assert settings.thresholds.cpu_warning == 50
        assert settings.thresholds.cpu_critical == 90
        assert settings.log_analysis.top_errors_limit == 3
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "console"

    def test_load_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.alerting.cooldown_secs == 60.0
        assert settings.thresholds.memory_critical == 85.0

    def test_load_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        settings = load_settings(config_file)
        assert settings.alerting.tick_interval_secs == 5.0

    def test_partial_yaml_merges_with_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump({"thresholds": {"memory_warning": 65}}))

        settings = load_settings(config_file)
        assert settings.thresholds.memory_warning == 65
        # Other defaults still intact
        assert settings.thresholds.memory_critical == 85.0
        assert settings.alerting.cooldown_secs == 60.0


class TestCaching:
    def test_get_settings_caches(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump({"storage": {"sample_retention": 7}}))
        loaded = load_settings(config_file)
        assert get_settings() is loaded
        assert get_settings().storage.sample_retention == 7

    def test_reset_clears_cache(self, tmp_path: Path) -> None:
        loaded = load_settings(tmp_path / "missing.yaml")
        reset_settings()
        assert get_settings() is not loaded
