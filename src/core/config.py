"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

_settings: Settings | None = None

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


class AlertingConfig(BaseModel):
    """Sampling cadence and alert throttling."""

    tick_interval_secs: float = 5.0
    cooldown_secs: float = 60.0
    telemetry_timeout_secs: float = 2.0
    history_limit: int = 100


class StorageConfig(BaseModel):
    """In-memory store limits."""

    sample_retention: int = 1000


class ThresholdDefaults(BaseModel):
    """Threshold bands seeded into the registry at startup."""

    cpu_warning: float = 60.0
    cpu_critical: float = 80.0
    memory_warning: float = 70.0
    memory_critical: float = 85.0


class LogAnalysisConfig(BaseModel):
    """Log analysis report shape."""

    top_errors_limit: int = Field(default=5, ge=0, le=5)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """Root settings container."""

    alerting: AlertingConfig = AlertingConfig()
    storage: StorageConfig = StorageConfig()
    thresholds: ThresholdDefaults = ThresholdDefaults()
    log_analysis: LogAnalysisConfig = LogAnalysisConfig()
    logging: LoggingConfig = LoggingConfig()


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file and cache globally.

    Args:
        path: Path to YAML config. Defaults to config/settings.yaml.

    Returns:
        Parsed Settings instance.
    """
    global _settings  # noqa: PLW0603

    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if isinstance(raw, dict):
                data = raw

    _settings = Settings(**data)
    return _settings


def get_settings() -> Settings:
    """Return the cached settings, loading defaults if not yet loaded."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
