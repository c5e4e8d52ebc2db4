"""Exception hierarchy for the persistence sink."""

from __future__ import annotations

from src.core.types import MetricType


class StorageError(Exception):
    """Base exception for store failures."""


class ThresholdNotFoundError(StorageError):
    """No threshold configuration exists for the requested metric type."""

    def __init__(self, metric_type: MetricType) -> None:
        super().__init__(f"Threshold config for {metric_type} not found")
        self.metric_type = metric_type
