"""Threshold alerting — periodic sampling, cooldown, summary report."""

from src.alerting.cooldown import CooldownTracker
from src.alerting.engine import AlertingEngine
from src.alerting.factory import create_alerting_engine
from src.alerting.rules import (
    ThresholdBreach,
    evaluate_threshold,
    format_alert_message,
    round_percent,
)
from src.alerting.summary import build_summary

__all__ = [
    "AlertingEngine",
    "CooldownTracker",
    "ThresholdBreach",
    "build_summary",
    "create_alerting_engine",
    "evaluate_threshold",
    "format_alert_message",
    "round_percent",
]
