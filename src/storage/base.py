"""Persistence sink interfaces consumed by the alerting engine."""

from __future__ import annotations

import abc

from src.core.types import Alert, MetricType, Sample, ThresholdConfig, ThresholdUpdate


class SampleStore(abc.ABC):
    """Append-only metric history with bounded retention."""

    @abc.abstractmethod
    async def append(self, sample: Sample) -> None:
        """Record a sample, evicting the oldest beyond the retention cap."""

    @abc.abstractmethod
    async def recent(self, limit: int = 100) -> list[Sample]:
        """Return up to *limit* samples, newest first."""

    @abc.abstractmethod
    async def latest(self, metric_type: MetricType) -> Sample | None:
        """Return the newest sample of *metric_type*, if any."""


class ThresholdRegistry(abc.ABC):
    """Per-type warning/critical bands, mutable at runtime."""

    @abc.abstractmethod
    async def get(self, metric_type: MetricType) -> ThresholdConfig | None:
        """Return the live config for *metric_type*, if one exists."""

    @abc.abstractmethod
    async def set(self, metric_type: MetricType, update: ThresholdUpdate) -> ThresholdConfig:
        """Apply a partial update and return the new config.

        Raises:
            ThresholdNotFoundError: if *metric_type* has no config.
        """

    @abc.abstractmethod
    async def all(self) -> list[ThresholdConfig]:
        """Return every live config."""


class AlertStore(abc.ABC):
    """Holds emitted alerts."""

    @abc.abstractmethod
    async def append(self, alert: Alert) -> None:
        """Record a new alert."""

    @abc.abstractmethod
    async def list(self) -> list[Alert]:
        """Return all alerts, newest first."""

    @abc.abstractmethod
    async def get(self, alert_id: str) -> Alert | None:
        """Return a single alert by id."""

    @abc.abstractmethod
    async def acknowledge(self, alert_id: str) -> bool:
        """Mark an alert acknowledged. Returns False if the id is unknown."""

    @abc.abstractmethod
    async def clear(self) -> None:
        """Remove all alerts."""
