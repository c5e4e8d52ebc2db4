"""LogAnalyzer — severity counts and most frequent errors for uploaded logs."""

from __future__ import annotations

from pathlib import Path

import structlog

from src.core.config import LogAnalysisConfig
from src.core.types import ErrorFrequency, LogAnalysisResult, LogSeverity
from src.logs.matchers import classify_line

logger = structlog.get_logger(__name__)


class LogAnalyzer:
    """Stateless analyzer; one instance may serve any number of callers.

    Usage::

        analyzer = LogAnalyzer()
        report = analyzer.analyze(text)
        report.counts[LogSeverity.ERROR], report.top_errors
    """

    def __init__(self, config: LogAnalysisConfig | None = None) -> None:
        self._config = config or LogAnalysisConfig()

    @property
    def top_errors_limit(self) -> int:
        return self._config.top_errors_limit

    def analyze(self, text: str) -> LogAnalysisResult:
        """Classify every non-blank line of *text* and rank repeated errors.

        Blank and whitespace-only lines are dropped before counting.
        Lines that cannot be classified still count toward ``total_lines``
        but toward no severity.  Error messages are compared exactly; equal
        counts keep the order in which each message first appeared.
        """
        lines = [line.rstrip("\r") for line in text.split("\n")]
        lines = [line for line in lines if line.strip()]

        counts = {level: 0 for level in LogSeverity}
        # dict keeps first-seen order for the tie-break below.
        error_counts: dict[str, int] = {}
        unclassified = 0

        for line in lines:
            entry = classify_line(line)
            if entry is None:
                unclassified += 1
                continue
            counts[entry.level] += 1
            if entry.level == LogSeverity.ERROR:
                error_counts[entry.message] = error_counts.get(entry.message, 0) + 1

        ranked = sorted(error_counts.items(), key=lambda item: -item[1])
        top_errors = [
            ErrorFrequency(message=message, count=count)
            for message, count in ranked[: self._config.top_errors_limit]
        ]

        logger.debug(
            "log_analysis_complete",
            total_lines=len(lines),
            unclassified=unclassified,
            distinct_errors=len(error_counts),
        )
        return LogAnalysisResult(total_lines=len(lines), counts=counts, top_errors=top_errors)

    def analyze_bytes(self, data: bytes, encoding: str = "utf-8") -> LogAnalysisResult:
        """Decode raw upload bytes (invalid sequences replaced) and analyze."""
        return self.analyze(data.decode(encoding, errors="replace"))

    def analyze_file(self, path: str | Path) -> LogAnalysisResult:
        return self.analyze_bytes(Path(path).read_bytes())


def analyze(text: str) -> LogAnalysisResult:
    """Analyze *text* with default settings."""
    return LogAnalyzer().analyze(text)
