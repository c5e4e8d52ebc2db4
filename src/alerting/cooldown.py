"""Per-metric alert cooldown."""

from __future__ import annotations

from src.core.types import MetricType


class CooldownTracker:
    """Remembers when each metric type last emitted an alert.

    The window is shared by all severities of a type: a WARNING starts a
    cooldown that also holds back a following CRITICAL.  State is held in
    memory only and starts empty.  Times passed in should come from a
    monotonic clock so wall-clock steps cannot reopen or stretch a window.
    """

    def __init__(self, cooldown_secs: float = 60.0) -> None:
        self._cooldown_secs = cooldown_secs
        self._last_alert_at: dict[MetricType, float] = {}

    @property
    def cooldown_secs(self) -> float:
        return self._cooldown_secs

    def last_alert_at(self, metric_type: MetricType) -> float | None:
        return self._last_alert_at.get(metric_type)

    def ready(self, metric_type: MetricType, now: float) -> bool:
        """True if no alert was emitted for *metric_type* within the window."""
        last = self._last_alert_at.get(metric_type)
        if last is None:
            return True
        return now - last > self._cooldown_secs

    def mark(self, metric_type: MetricType, now: float) -> None:
        self._last_alert_at[metric_type] = now

    def reset(self) -> None:
        self._last_alert_at.clear()
