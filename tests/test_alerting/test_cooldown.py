"""Tests for CooldownTracker."""

from __future__ import annotations

from src.alerting.cooldown import CooldownTracker
from src.core.types import MetricType


class TestCooldownTracker:
    def test_ready_when_never_alerted(self) -> None:
        tracker = CooldownTracker(60.0)
        assert tracker.ready(MetricType.CPU, 0.0)
        assert tracker.last_alert_at(MetricType.CPU) is None

    def test_window_is_strict(self) -> None:
        tracker = CooldownTracker(60.0)
        tracker.mark(MetricType.CPU, 100.0)
        assert not tracker.ready(MetricType.CPU, 130.0)
        assert not tracker.ready(MetricType.CPU, 160.0)
        assert tracker.ready(MetricType.CPU, 160.001)

    def test_types_are_independent(self) -> None:
        tracker = CooldownTracker(60.0)
        tracker.mark(MetricType.CPU, 100.0)
        assert tracker.ready(MetricType.MEMORY, 101.0)

    def test_mark_moves_window(self) -> None:
        tracker = CooldownTracker(10.0)
        tracker.mark(MetricType.MEMORY, 0.0)
        tracker.mark(MetricType.MEMORY, 20.0)
        assert tracker.last_alert_at(MetricType.MEMORY) == 20.0
        assert not tracker.ready(MetricType.MEMORY, 25.0)

    def test_reset(self) -> None:
        tracker = CooldownTracker(60.0)
        tracker.mark(MetricType.CPU, 100.0)
        tracker.reset()
        assert tracker.ready(MetricType.CPU, 101.0)

    def test_cooldown_secs_property(self) -> None:
        assert CooldownTracker(12.5).cooldown_secs == 12.5
