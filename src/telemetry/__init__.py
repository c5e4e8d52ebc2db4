"""Telemetry providers — where the alerting engine gets its readings."""

from src.telemetry.base import TelemetryProvider
from src.telemetry.exceptions import (
    TelemetryError,
    TelemetryTimeoutError,
    TelemetryUnavailableError,
)
from src.telemetry.host import HostTelemetryProvider

__all__ = [
    "HostTelemetryProvider",
    "TelemetryError",
    "TelemetryProvider",
    "TelemetryTimeoutError",
    "TelemetryUnavailableError",
]
