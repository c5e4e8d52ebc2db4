"""Persistence sink — sample history, threshold registry, alert store."""

from src.storage.base import AlertStore, SampleStore, ThresholdRegistry
from src.storage.exceptions import StorageError, ThresholdNotFoundError
from src.storage.memory import MemoryAlertStore, MemorySampleStore, MemoryThresholdRegistry

__all__ = [
    "AlertStore",
    "MemoryAlertStore",
    "MemorySampleStore",
    "MemoryThresholdRegistry",
    "SampleStore",
    "StorageError",
    "ThresholdNotFoundError",
    "ThresholdRegistry",
]
