"""Core module — config, types, logging."""

from src.core.config import Settings, get_settings, load_settings, reset_settings
from src.core.logging import setup_logging
from src.core.types import (
    Alert,
    AlertSeverity,
    CurrentMetrics,
    ErrorFrequency,
    LogAnalysisResult,
    LogEntry,
    LogSeverity,
    MetricType,
    Sample,
    SummaryReport,
    TelemetrySnapshot,
    ThresholdConfig,
    ThresholdUpdate,
    TickResult,
)

__all__ = [
    "Alert",
    "AlertSeverity",
    "CurrentMetrics",
    "ErrorFrequency",
    "LogAnalysisResult",
    "LogEntry",
    "LogSeverity",
    "MetricType",
    "Sample",
    "Settings",
    "SummaryReport",
    "TelemetrySnapshot",
    "ThresholdConfig",
    "ThresholdUpdate",
    "TickResult",
    "get_settings",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
