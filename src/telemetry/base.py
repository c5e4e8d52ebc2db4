"""Abstract telemetry provider."""

from __future__ import annotations

import abc

from src.core.types import TelemetrySnapshot


class TelemetryProvider(abc.ABC):
    """Source of instantaneous CPU and memory utilization.

    Implementations raise :class:`~src.telemetry.exceptions.TelemetryError`
    (or any exception) on failure; the alerting engine treats every failure
    as transient and skips the tick.
    """

    @abc.abstractmethod
    async def sample(self) -> TelemetrySnapshot:
        """Return a fresh utilization snapshot."""

    async def close(self) -> None:
        """Release any resources held by the provider."""
