#!/usr/bin/env python3
"""Sample this host until interrupted, logging threshold alerts as they fire.

Usage::

    # Run with default config
    python scripts/run.py

    # Custom config file
    python scripts/run.py --config config/settings.yaml

    # Faster ticks, console output
    python scripts/run.py --interval 1 --log-format console
"""

from __future__ import annotations

import argparse
import asyncio
import signal
import sys

import structlog

from src.alerting.factory import create_alerting_engine
from src.core.config import load_settings
from src.core.logging import setup_logging
from src.core.types import Alert, MetricType

logger = structlog.get_logger(__name__)


def _log_alert(alert: Alert) -> None:
    logger.warning(
        "alert",
        metric_type=alert.type,
        severity=alert.severity,
        message=alert.message,
    )


async def run(args: argparse.Namespace) -> int:
    """Start the alerting engine and run until a shutdown signal."""
    settings = load_settings(args.config)
    if args.interval is not None:
        settings.alerting.tick_interval_secs = args.interval
    setup_logging(level=args.log_level, fmt=args.log_format)

    engine = create_alerting_engine(settings)
    engine.on_alert(_log_alert)

    thresholds = await engine.thresholds()
    logger.info(
        "monitor_starting",
        tick_interval_secs=settings.alerting.tick_interval_secs,
        thresholds={t.type.value: [t.warning, t.critical] for t in thresholds},
    )

    await engine.start()

    stop_event = asyncio.Event()

    def _signal_handler() -> None:
        logger.info("shutdown_signal_received")
        stop_event.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _signal_handler)
        except NotImplementedError:
            # Windows: signal handlers not supported on ProactorEventLoop
            pass

    try:
        await stop_event.wait()
    except KeyboardInterrupt:
        logger.info("keyboard_interrupt")

    await engine.close()

    summary = await engine.summary()
    logger.info(
        "monitor_stopped",
        ticks=engine.tick_count,
        skipped_ticks=engine.skipped_ticks,
        total_alerts=summary.total_alerts,
        average_cpu=summary.average_metrics.get(MetricType.CPU),
        average_memory=summary.average_metrics.get(MetricType.MEMORY),
    )
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Sample host CPU/memory and raise threshold alerts.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Tick interval override in seconds",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override: DEBUG, INFO, WARNING, ERROR",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Log renderer override",
    )
    args = parser.parse_args()

    code = asyncio.run(run(args))
    sys.exit(code)


if __name__ == "__main__":
    main()
