"""Convenience factory for wiring the alerting stack."""

from __future__ import annotations

import time

from src.alerting.engine import AlertingEngine, Clock
from src.core.config import Settings, get_settings
from src.storage.memory import MemoryAlertStore, MemorySampleStore, MemoryThresholdRegistry
from src.telemetry.base import TelemetryProvider
from src.telemetry.host import HostTelemetryProvider


def create_alerting_engine(
    settings: Settings | None = None,
    provider: TelemetryProvider | None = None,
    clock: Clock | None = None,
) -> AlertingEngine:
    """Build an engine over in-memory stores seeded from *settings*.

    Uses the local host provider when *provider* is None.
    """
    settings = settings or get_settings()
    return AlertingEngine(
        provider=provider or HostTelemetryProvider(),
        samples=MemorySampleStore(settings.storage),
        thresholds=MemoryThresholdRegistry.from_defaults(settings.thresholds),
        alerts=MemoryAlertStore(),
        config=settings.alerting,
        clock=clock or time.time,
    )
