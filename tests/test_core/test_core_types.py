"""Tests for shared domain types — validation bounds and defaults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.core.types import (
    Alert,
    AlertSeverity,
    LogAnalysisResult,
    LogSeverity,
    MetricType,
    Sample,
    ThresholdConfig,
    ThresholdUpdate,
)


class TestSample:
    def test_value_bounds(self) -> None:
        Sample(type=MetricType.CPU, value=0.0)
        Sample(type=MetricType.CPU, value=100.0)
        with pytest.raises(ValidationError):
            Sample(type=MetricType.CPU, value=100.1)
        with pytest.raises(ValidationError):
            Sample(type=MetricType.MEMORY, value=-0.1)

    def test_sample_is_frozen(self) -> None:
        s = Sample(type=MetricType.CPU, value=10.0)
        with pytest.raises(ValidationError):
            s.value = 20.0  # type: ignore[misc]

    def test_ids_are_unique(self) -> None:
        a = Sample(type=MetricType.CPU, value=1.0)
        b = Sample(type=MetricType.CPU, value=1.0)
        assert a.id != b.id


class TestThresholds:
    def test_config_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ThresholdConfig(type=MetricType.CPU, warning=60, critical=101)

    def test_inverted_bands_accepted(self) -> None:
        cfg = ThresholdConfig(type=MetricType.CPU, warning=90, critical=50)
        assert cfg.warning > cfg.critical

    def test_update_fields_optional(self) -> None:
        upd = ThresholdUpdate()
        assert upd.warning is None
        assert upd.critical is None

    def test_update_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ThresholdUpdate(warning=-1)


class TestAlert:
    def test_defaults(self) -> None:
        alert = Alert(
            type=MetricType.MEMORY,
            severity=AlertSeverity.WARNING,
            message="Memory usage elevated: 72%",
            value=72.0,
            threshold=70.0,
        )
        assert alert.acknowledged is False
        assert alert.id


class TestLogAnalysisResult:
    def test_default_counts_cover_every_level(self) -> None:
        result = LogAnalysisResult()
        assert result.counts == {
            LogSeverity.INFO: 0,
            LogSeverity.WARN: 0,
            LogSeverity.ERROR: 0,
        }
        assert result.top_errors == []
