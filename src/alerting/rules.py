"""Pure threshold rules — rounding, band evaluation, alert wording."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel

from src.core.types import AlertSeverity, MetricType, ThresholdConfig

_ONE_DECIMAL = Decimal("0.1")

_LABELS: dict[MetricType, str] = {
    MetricType.CPU: "CPU",
    MetricType.MEMORY: "Memory",
}


class ThresholdBreach(BaseModel):
    """Outcome of comparing a value against a threshold config."""

    severity: AlertSeverity
    threshold: float


def round_percent(value: float) -> float:
    """Clamp to 0..100 and round half-up to one decimal place."""
    clamped = min(max(float(value), 0.0), 100.0)
    return float(Decimal(str(clamped)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def evaluate_threshold(value: float, config: ThresholdConfig) -> ThresholdBreach | None:
    """Return the breached band, checking critical before warning.

    Bands are compared independently, so an inverted config
    (warning above critical) still reports CRITICAL first.
    """
    if value >= config.critical:
        return ThresholdBreach(severity=AlertSeverity.CRITICAL, threshold=config.critical)
    if value >= config.warning:
        return ThresholdBreach(severity=AlertSeverity.WARNING, threshold=config.warning)
    return None


def format_alert_message(
    metric_type: MetricType,
    severity: AlertSeverity,
    value: float,
) -> str:
    """e.g. ``"CPU usage critical: 85.5%"`` or ``"Memory usage elevated: 72%"``."""
    state = "critical" if severity == AlertSeverity.CRITICAL else "elevated"
    return f"{_LABELS[metric_type]} usage {state}: {value:g}%"
