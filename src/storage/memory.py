"""In-process implementations of the persistence sink.

Every method completes without yielding to the event loop, so a reader
running between two awaits of a tick always sees whole records.  Returned
models are copies; callers cannot mutate stored state.
"""

from __future__ import annotations

import time
from collections import deque

import structlog

from src.core.config import StorageConfig, ThresholdDefaults
from src.core.types import Alert, MetricType, Sample, ThresholdConfig, ThresholdUpdate
from src.storage.base import AlertStore, SampleStore, ThresholdRegistry
from src.storage.exceptions import ThresholdNotFoundError

logger = structlog.get_logger(__name__)


class MemorySampleStore(SampleStore):
    """Ring buffer of the most recent samples across all metric types."""

    def __init__(self, config: StorageConfig | None = None) -> None:
        self._config = config or StorageConfig()
        self._samples: deque[Sample] = deque(maxlen=self._config.sample_retention)

    def __len__(self) -> int:
        return len(self._samples)

    async def append(self, sample: Sample) -> None:
        self._samples.append(sample)

    async def recent(self, limit: int = 100) -> list[Sample]:
        if limit <= 0:
            return []
        # Newest inserted first; timestamps may step backwards.
        return list(reversed(self._samples))[:limit]

    async def latest(self, metric_type: MetricType) -> Sample | None:
        for sample in reversed(self._samples):
            if sample.type == metric_type:
                return sample
        return None


class MemoryThresholdRegistry(ThresholdRegistry):
    """Dict-backed registry, optionally seeded with default bands."""

    def __init__(self, configs: list[ThresholdConfig] | None = None) -> None:
        self._configs: dict[MetricType, ThresholdConfig] = {
            c.type: c for c in (configs or [])
        }

    @classmethod
    def from_defaults(cls, defaults: ThresholdDefaults | None = None) -> MemoryThresholdRegistry:
        d = defaults or ThresholdDefaults()
        return cls([
            ThresholdConfig(type=MetricType.CPU, warning=d.cpu_warning, critical=d.cpu_critical),
            ThresholdConfig(
                type=MetricType.MEMORY,
                warning=d.memory_warning,
                critical=d.memory_critical,
            ),
        ])

    async def get(self, metric_type: MetricType) -> ThresholdConfig | None:
        config = self._configs.get(metric_type)
        return config.model_copy() if config is not None else None

    async def set(self, metric_type: MetricType, update: ThresholdUpdate) -> ThresholdConfig:
        existing = self._configs.get(metric_type)
        if existing is None:
            raise ThresholdNotFoundError(metric_type)

        changes: dict[str, float] = {"updated_at": time.time()}
        if update.warning is not None:
            changes["warning"] = update.warning
        if update.critical is not None:
            changes["critical"] = update.critical

        updated = existing.model_copy(update=changes)
        self._configs[metric_type] = updated
        if updated.warning >= updated.critical:
            logger.warning(
                "threshold_bands_overlap",
                metric_type=metric_type,
                warning=updated.warning,
                critical=updated.critical,
            )
        return updated.model_copy()

    async def all(self) -> list[ThresholdConfig]:
        return [c.model_copy() for c in self._configs.values()]


class MemoryAlertStore(AlertStore):
    """Insertion-ordered alert map keyed by alert id."""

    def __init__(self) -> None:
        self._alerts: dict[str, Alert] = {}

    def __len__(self) -> int:
        return len(self._alerts)

    async def append(self, alert: Alert) -> None:
        self._alerts[alert.id] = alert.model_copy()

    async def list(self) -> list[Alert]:
        return [a.model_copy() for a in reversed(self._alerts.values())]

    async def get(self, alert_id: str) -> Alert | None:
        alert = self._alerts.get(alert_id)
        return alert.model_copy() if alert is not None else None

    async def acknowledge(self, alert_id: str) -> bool:
        alert = self._alerts.get(alert_id)
        if alert is None:
            return False
        # Replace rather than mutate so earlier copies stay consistent.
        self._alerts[alert_id] = alert.model_copy(update={"acknowledged": True})
        return True

    async def clear(self) -> None:
        self._alerts.clear()
