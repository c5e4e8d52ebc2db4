"""Dashboard summary report — alert totals and short-window averages."""

from __future__ import annotations

import time

from src.alerting.rules import round_percent
from src.core.types import Alert, MetricType, RecentAlert, Sample, SummaryReport

RECENT_ALERTS_LIMIT = 10
AVERAGE_WINDOW = 10


def build_summary(
    alerts: list[Alert],
    recent_samples: list[Sample],
    now: float | None = None,
) -> SummaryReport:
    """Summarise *alerts* (newest first) and *recent_samples*.

    Averages are taken over whatever samples of each type are present in
    *recent_samples*; a type with none averages to 0.0.
    """
    breakdown = {t: sum(1 for a in alerts if a.type == t) for t in MetricType}

    recent = [
        RecentAlert(type=a.type, timestamp=a.timestamp, value=a.value)
        for a in alerts[:RECENT_ALERTS_LIMIT]
    ]

    averages: dict[MetricType, float] = {}
    for metric_type in MetricType:
        values = [s.value for s in recent_samples if s.type == metric_type]
        averages[metric_type] = round_percent(sum(values) / len(values)) if values else 0.0

    return SummaryReport(
        total_alerts=len(alerts),
        breakdown=breakdown,
        recent_alerts=recent,
        average_metrics=averages,
        generated_at=now if now is not None else time.time(),
    )
