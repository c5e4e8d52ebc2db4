"""Local host telemetry backed by psutil."""

from __future__ import annotations

import asyncio

import psutil
import structlog

from src.core.types import TelemetrySnapshot
from src.telemetry.base import TelemetryProvider
from src.telemetry.exceptions import TelemetryUnavailableError

logger = structlog.get_logger(__name__)


class HostTelemetryProvider(TelemetryProvider):
    """Reads CPU load and memory usage of the machine running the process.

    psutil calls block (``cpu_percent`` with a non-zero interval sleeps for
    the whole interval), so each reading runs in a worker thread.

    Usage::

        provider = HostTelemetryProvider(cpu_interval_secs=0.5)
        snap = await provider.sample()
    """

    def __init__(self, cpu_interval_secs: float | None = None) -> None:
        # None compares against the previous call; first call returns 0.0.
        self._cpu_interval_secs = cpu_interval_secs

    async def sample(self) -> TelemetrySnapshot:
        return await asyncio.to_thread(self._read)

    def _read(self) -> TelemetrySnapshot:
        try:
            cpu = psutil.cpu_percent(interval=self._cpu_interval_secs)
            mem = psutil.virtual_memory()
        except (psutil.Error, OSError) as exc:
            raise TelemetryUnavailableError(str(exc)) from exc

        # Same derivation as used/total rather than psutil's "available" based percent.
        memory_percent = (mem.used / mem.total) * 100.0 if mem.total else 0.0
        logger.debug("host_telemetry_read", cpu=cpu, memory=memory_percent)
        return TelemetrySnapshot(cpu_percent=cpu, memory_percent=memory_percent)
