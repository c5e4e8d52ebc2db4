"""Domain types for host metrics, threshold alerts, and log analysis."""

from __future__ import annotations

import time
import uuid
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return str(uuid.uuid4())


# ── Metrics ─────────────────────────────────────────────────────


class MetricType(StrEnum):
    """Host resource being sampled."""

    CPU = "CPU"
    MEMORY = "MEMORY"


class TelemetrySnapshot(BaseModel):
    """Instantaneous utilization reading returned by a telemetry provider."""

    cpu_percent: float
    memory_percent: float


class Sample(BaseModel):
    """A single recorded utilization value (percent, one decimal)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    type: MetricType
    value: float = Field(ge=0.0, le=100.0)
    timestamp: float = Field(default_factory=time.time)


class CurrentMetrics(BaseModel):
    """Latest value per metric type plus the change since the previous tick."""

    cpu: float = 0.0
    memory: float = 0.0
    cpu_trend: float = 0.0
    memory_trend: float = 0.0


# ── Thresholds ──────────────────────────────────────────────────


class ThresholdConfig(BaseModel):
    """Warning/critical bands for one metric type.

    ``warning < critical`` is not enforced; evaluation always checks the
    critical band first.
    """

    id: str = Field(default_factory=_new_id)
    type: MetricType
    warning: float = Field(ge=0.0, le=100.0)
    critical: float = Field(ge=0.0, le=100.0)
    updated_at: float = Field(default_factory=time.time)


class ThresholdUpdate(BaseModel):
    """Partial threshold update — unset fields keep their current value."""

    warning: float | None = Field(default=None, ge=0.0, le=100.0)
    critical: float | None = Field(default=None, ge=0.0, le=100.0)


# ── Alerts ──────────────────────────────────────────────────────


class AlertSeverity(StrEnum):
    """Alert severity. INFO is reserved for manual use."""

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    INFO = "INFO"


class Alert(BaseModel):
    """A threshold crossing recorded by the alerting engine."""

    id: str = Field(default_factory=_new_id)
    type: MetricType
    severity: AlertSeverity
    message: str
    value: float
    threshold: float
    timestamp: float = Field(default_factory=time.time)
    acknowledged: bool = False


class RecentAlert(BaseModel):
    """Condensed alert row used in summary reports."""

    type: MetricType
    timestamp: float
    value: float


class SummaryReport(BaseModel):
    """Alert totals and recent averages for the dashboard overview."""

    total_alerts: int = 0
    breakdown: dict[MetricType, int] = Field(default_factory=dict)
    recent_alerts: list[RecentAlert] = Field(default_factory=list)
    average_metrics: dict[MetricType, float] = Field(default_factory=dict)
    generated_at: float = Field(default_factory=time.time)


class TickResult(BaseModel):
    """What a single alerting tick recorded."""

    samples: list[Sample] = Field(default_factory=list)
    alerts: list[Alert] = Field(default_factory=list)
    skipped: bool = False
    reason: str = ""


# ── Log analysis ────────────────────────────────────────────────


class LogSeverity(StrEnum):
    """Severity assigned to a classified log line."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LogEntry(BaseModel):
    """Classification of a single log line."""

    level: LogSeverity
    message: str


class ErrorFrequency(BaseModel):
    """A distinct error message and how often it occurred."""

    message: str
    count: int


class LogAnalysisResult(BaseModel):
    """Severity counts and most frequent errors for one block of log text."""

    total_lines: int = 0
    counts: dict[LogSeverity, int] = Field(
        default_factory=lambda: {level: 0 for level in LogSeverity},
    )
    top_errors: list[ErrorFrequency] = Field(default_factory=list)
