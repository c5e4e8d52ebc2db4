"""Exception hierarchy for telemetry providers."""

from __future__ import annotations


class TelemetryError(Exception):
    """Base exception for all telemetry acquisition errors."""


class TelemetryUnavailableError(TelemetryError):
    """The underlying source could not produce a reading."""


class TelemetryTimeoutError(TelemetryError):
    """A reading did not arrive within the configured timeout."""
