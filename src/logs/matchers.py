"""Line classifiers for free-form log text.

Structured matchers are tried in ``LINE_MATCHERS`` order and the first one
that yields an entry wins.  A matcher only accepts a line when its captured
level token, upper-cased, is a known :class:`LogSeverity`; otherwise the next
matcher gets a chance.  Lines no matcher accepts fall back to keyword
sniffing.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from src.core.types import LogEntry, LogSeverity

LineMatcher = Callable[[str], LogEntry | None]

_BRACKETED = re.compile(r"^\[(\w+)\]\s+(.+)$")
_COLON = re.compile(r"^(\w+):\s+(.+)$")
_DATED_BRACKETED = re.compile(r"^\d{4}-\d{2}-\d{2}.*?\[(\w+)\]\s+(.+)$")
_DATED_COLON = re.compile(r"^\d{4}-\d{2}-\d{2}.*?(\w+):\s+(.+)$")

_LEVELS = {level.value: level for level in LogSeverity}

# Checked in this order; ERROR outranks WARN outranks INFO.
SNIFF_ORDER: tuple[LogSeverity, ...] = (LogSeverity.ERROR, LogSeverity.WARN, LogSeverity.INFO)


def _match(pattern: re.Pattern[str], line: str) -> LogEntry | None:
    m = pattern.match(line)
    if m is None:
        return None
    level = _LEVELS.get(m.group(1).upper())
    if level is None:
        return None
    return LogEntry(level=level, message=m.group(2).strip())


def match_bracketed(line: str) -> LogEntry | None:
    """``[LEVEL] message``"""
    return _match(_BRACKETED, line)


def match_colon(line: str) -> LogEntry | None:
    """``LEVEL: message``"""
    return _match(_COLON, line)


def match_dated_bracketed(line: str) -> LogEntry | None:
    """``2024-01-15 10:30:00 [LEVEL] message``"""
    return _match(_DATED_BRACKETED, line)


def match_dated_colon(line: str) -> LogEntry | None:
    """``2024-01-15 10:30:00 LEVEL: message``"""
    return _match(_DATED_COLON, line)


LINE_MATCHERS: tuple[LineMatcher, ...] = (
    match_bracketed,
    match_colon,
    match_dated_bracketed,
    match_dated_colon,
)


def sniff_severity(line: str) -> LogEntry | None:
    """Classify by keyword anywhere in the line; the message is the whole line."""
    upper = line.upper()
    for level in SNIFF_ORDER:
        if level.value in upper:
            return LogEntry(level=level, message=line)
    return None


def classify_line(
    line: str,
    matchers: tuple[LineMatcher, ...] = LINE_MATCHERS,
) -> LogEntry | None:
    """Return the first structured match, else the sniffed severity, else None."""
    for matcher in matchers:
        entry = matcher(line)
        if entry is not None:
            return entry
    return sniff_severity(line)
