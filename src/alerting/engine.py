"""AlertingEngine — periodic host sampling with threshold alerts."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from types import TracebackType

import structlog
from pydantic import ValidationError

from src.alerting.cooldown import CooldownTracker
from src.alerting.rules import evaluate_threshold, format_alert_message, round_percent
from src.alerting.summary import AVERAGE_WINDOW, build_summary
from src.core.config import AlertingConfig
from src.core.types import (
    Alert,
    CurrentMetrics,
    MetricType,
    Sample,
    SummaryReport,
    TelemetrySnapshot,
    ThresholdConfig,
    ThresholdUpdate,
    TickResult,
)
from src.storage.base import AlertStore, SampleStore, ThresholdRegistry
from src.telemetry.base import TelemetryProvider
from src.telemetry.exceptions import TelemetryError, TelemetryTimeoutError

logger = structlog.get_logger(__name__)

AlertCallback = Callable[[Alert], Awaitable[None] | None]
Clock = Callable[[], float]


class AlertingEngine:
    """Samples telemetry on a fixed period and raises threshold alerts.

    Each tick reads one snapshot, stores one sample per metric type, then
    evaluates each type against its threshold config.  At most one alert per
    type is emitted per cooldown window, whatever its severity.  Ticks never
    overlap: the background loop awaits each tick before sleeping and manual
    :meth:`tick` calls share the same lock.

    Usage::

        engine = AlertingEngine(
            provider=HostTelemetryProvider(),
            samples=MemorySampleStore(),
            thresholds=MemoryThresholdRegistry.from_defaults(),
            alerts=MemoryAlertStore(),
        )
        engine.on_alert(my_callback)
        async with engine:
            await asyncio.sleep(60)
            print(await engine.current_metrics())
    """

    def __init__(
        self,
        provider: TelemetryProvider,
        samples: SampleStore,
        thresholds: ThresholdRegistry,
        alerts: AlertStore,
        config: AlertingConfig | None = None,
        clock: Clock = time.time,
        monotonic: Clock = time.monotonic,
    ) -> None:
        self._provider = provider
        self._samples = samples
        self._thresholds = thresholds
        self._alerts = alerts
        self._config = config or AlertingConfig()
        self._clock = clock
        # Record timestamps follow the wall clock; the cooldown gate must not.
        self._monotonic = monotonic

        self._cooldown = CooldownTracker(self._config.cooldown_secs)
        # Value recorded by the latest tick, and the one recorded before it.
        self._last_value: dict[MetricType, float] = {t: 0.0 for t in MetricType}
        self._previous_value: dict[MetricType, float] = {t: 0.0 for t in MetricType}

        self._callbacks: list[AlertCallback] = []
        self._tick_lock = asyncio.Lock()
        self._task: asyncio.Task[None] | None = None
        self._running = False
        self._tick_count = 0
        self._skipped_ticks = 0

    # ── Properties ──────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self._running

    @property
    def config(self) -> AlertingConfig:
        return self._config

    @property
    def cooldown(self) -> CooldownTracker:
        return self._cooldown

    @property
    def tick_count(self) -> int:
        """Ticks that got past telemetry acquisition."""
        return self._tick_count

    @property
    def skipped_ticks(self) -> int:
        """Ticks abandoned because telemetry failed."""
        return self._skipped_ticks

    def on_alert(self, callback: AlertCallback) -> None:
        """Register a callback invoked for every emitted alert."""
        self._callbacks.append(callback)

    # ── Lifecycle ───────────────────────────────────────────────

    async def start(self) -> None:
        """Start the background tick loop. No-op if already running."""
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info(
            "alerting_engine_started",
            tick_interval_secs=self._config.tick_interval_secs,
            cooldown_secs=self._config.cooldown_secs,
        )

    async def stop(self) -> None:
        """Stop the loop. Safe to call when not running."""
        was_running = self._running
        self._running = False
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        if was_running:
            logger.info("alerting_engine_stopped", ticks=self._tick_count)

    async def close(self) -> None:
        """Stop the loop and release the telemetry provider."""
        await self.stop()
        await self._provider.close()

    async def __aenter__(self) -> AlertingEngine:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()

    async def _loop(self) -> None:
        interval = self._config.tick_interval_secs
        while self._running:
            started = time.monotonic()
            try:
                await self.tick()
            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception("alerting_tick_error")

            # An overdue tick runs immediately after, never concurrently.
            delay = max(interval - (time.monotonic() - started), 0.0)
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                break

    # ── Tick ────────────────────────────────────────────────────

    async def tick(self) -> TickResult:
        """Run one sampling-and-evaluation cycle.

        Never raises for provider or store failures; the returned result
        says what was recorded.
        """
        async with self._tick_lock:
            return await self._run_tick()

    async def _run_tick(self) -> TickResult:
        snapshot = await self._read_telemetry()
        if snapshot is None:
            self._skipped_ticks += 1
            return TickResult(skipped=True, reason="telemetry_unavailable")

        now = self._clock()
        gate_now = self._monotonic()
        try:
            samples = [
                Sample(type=MetricType.CPU, value=round_percent(snapshot.cpu_percent), timestamp=now),
                Sample(
                    type=MetricType.MEMORY,
                    value=round_percent(snapshot.memory_percent),
                    timestamp=now,
                ),
            ]
        except ValidationError:
            logger.warning("telemetry_invalid", snapshot=snapshot.model_dump())
            self._skipped_ticks += 1
            return TickResult(skipped=True, reason="telemetry_invalid")

        result = TickResult()
        try:
            for sample in samples:
                await self._samples.append(sample)
                result.samples.append(sample)
                self._previous_value[sample.type] = self._last_value[sample.type]
                self._last_value[sample.type] = sample.value

            for sample in samples:
                alert = await self._evaluate(sample, now, gate_now)
                if alert is not None:
                    result.alerts.append(alert)
        except Exception:
            logger.exception(
                "alerting_tick_persistence_error",
                samples_written=len(result.samples),
                alerts_written=len(result.alerts),
            )
            result.reason = "persistence_error"

        self._tick_count += 1
        logger.debug(
            "metrics_sampled",
            cpu=samples[0].value,
            memory=samples[1].value,
            alerts=len(result.alerts),
        )

        for alert in result.alerts:
            await self._emit(alert)
        return result

    async def _read_telemetry(self) -> TelemetrySnapshot | None:
        try:
            return await self._sample_with_timeout()
        except TelemetryTimeoutError as exc:
            logger.warning("telemetry_timeout", error=str(exc))
        except TelemetryError as exc:
            logger.warning(
                "telemetry_error",
                provider=type(self._provider).__name__,
                error=str(exc),
            )
        except Exception:
            logger.exception("telemetry_error", provider=type(self._provider).__name__)
        return None

    async def _sample_with_timeout(self) -> TelemetrySnapshot:
        timeout = self._config.telemetry_timeout_secs
        try:
            return await asyncio.wait_for(self._provider.sample(), timeout=timeout)
        except TimeoutError as exc:
            raise TelemetryTimeoutError(
                f"no telemetry reading within {timeout:g}s"
            ) from exc

    async def _evaluate(self, sample: Sample, now: float, gate_now: float) -> Alert | None:
        config = await self._thresholds.get(sample.type)
        if config is None:
            logger.debug("threshold_missing", metric_type=sample.type)
            return None

        breach = evaluate_threshold(sample.value, config)
        if breach is None:
            return None

        if not self._cooldown.ready(sample.type, gate_now):
            logger.debug(
                "alert_suppressed_cooldown",
                metric_type=sample.type,
                severity=breach.severity,
                value=sample.value,
                last_alert_at=self._cooldown.last_alert_at(sample.type),
            )
            return None

        alert = Alert(
            type=sample.type,
            severity=breach.severity,
            message=format_alert_message(sample.type, breach.severity, sample.value),
            value=sample.value,
            threshold=breach.threshold,
            timestamp=now,
        )
        await self._alerts.append(alert)
        self._cooldown.mark(sample.type, gate_now)
        logger.info(
            "alert_emitted",
            metric_type=alert.type,
            severity=alert.severity,
            value=alert.value,
            threshold=alert.threshold,
        )
        return alert

    async def _emit(self, alert: Alert) -> None:
        for cb in self._callbacks:
            try:
                result = cb(alert)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                logger.exception("alert_callback_error", alert_id=alert.id)

    # ── Queries ─────────────────────────────────────────────────

    async def current_metrics(self) -> CurrentMetrics:
        """Latest stored value per type and the change since the tick before.

        Trend compares only two consecutive ticks; it is not smoothed.
        """
        cpu = await self._samples.latest(MetricType.CPU)
        memory = await self._samples.latest(MetricType.MEMORY)
        cpu_value = cpu.value if cpu is not None else 0.0
        memory_value = memory.value if memory is not None else 0.0
        return CurrentMetrics(
            cpu=cpu_value,
            memory=memory_value,
            cpu_trend=round(cpu_value - self._previous_value[MetricType.CPU], 1),
            memory_trend=round(memory_value - self._previous_value[MetricType.MEMORY], 1),
        )

    async def history(self, limit: int | None = None) -> list[Sample]:
        return await self._samples.recent(limit if limit is not None else self._config.history_limit)

    async def alerts(self) -> list[Alert]:
        return await self._alerts.list()

    async def acknowledge(self, alert_id: str) -> bool:
        acknowledged = await self._alerts.acknowledge(alert_id)
        if not acknowledged:
            logger.info("acknowledge_unknown_alert", alert_id=alert_id)
        return acknowledged

    async def clear_alerts(self) -> None:
        await self._alerts.clear()
        logger.info("alerts_cleared")

    async def thresholds(self) -> list[ThresholdConfig]:
        return await self._thresholds.all()

    async def update_threshold(
        self,
        metric_type: MetricType,
        update: ThresholdUpdate,
    ) -> ThresholdConfig:
        config = await self._thresholds.set(metric_type, update)
        logger.info(
            "threshold_updated",
            metric_type=metric_type,
            warning=config.warning,
            critical=config.critical,
        )
        return config

    async def summary(self) -> SummaryReport:
        alerts = await self._alerts.list()
        recent = await self._samples.recent(AVERAGE_WINDOW)
        return build_summary(alerts, recent, now=self._clock())
