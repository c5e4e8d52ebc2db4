"""Log analysis — line classification and error frequency ranking."""

from src.logs.analyzer import LogAnalyzer, analyze
from src.logs.matchers import (
    LINE_MATCHERS,
    SNIFF_ORDER,
    classify_line,
    match_bracketed,
    match_colon,
    match_dated_bracketed,
    match_dated_colon,
    sniff_severity,
)

__all__ = [
    "LINE_MATCHERS",
    "SNIFF_ORDER",
    "LogAnalyzer",
    "analyze",
    "classify_line",
    "match_bracketed",
    "match_colon",
    "match_dated_bracketed",
    "match_dated_colon",
    "sniff_severity",
]
