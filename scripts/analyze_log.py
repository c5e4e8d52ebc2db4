#!/usr/bin/env python3
"""Analyze a log file and print severity counts and the most frequent errors.

Usage::

    python scripts/analyze_log.py /var/log/app.log
    python scripts/analyze_log.py app.log --json
    cat app.log | python scripts/analyze_log.py -
"""

from __future__ import annotations

import argparse
import json
import sys

from src.core.config import load_settings
from src.core.logging import setup_logging
from src.core.types import LogAnalysisResult, LogSeverity
from src.logs.analyzer import LogAnalyzer


def render_text(result: LogAnalysisResult) -> str:
    """Plain-text report for terminal output."""
    lines = [f"Total lines: {result.total_lines}"]
    for level in LogSeverity:
        lines.append(f"  {level.value:<5}  {result.counts.get(level, 0)}")
    if result.top_errors:
        lines.append("Top errors:")
        for i, err in enumerate(result.top_errors, start=1):
            lines.append(f"  {i}. ({err.count}x) {err.message}")
    else:
        lines.append("No errors found.")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze a log file.")
    parser.add_argument("path", help="Log file to analyze, or '-' for stdin")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument("--json", action="store_true", help="Emit the report as JSON")
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    setup_logging(fmt="console")
    analyzer = LogAnalyzer(settings.log_analysis)

    if args.path == "-":
        result = analyzer.analyze_bytes(sys.stdin.buffer.read())
    else:
        try:
            result = analyzer.analyze_file(args.path)
        except OSError as exc:
            print(f"Cannot read {args.path}: {exc}", file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        print(render_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
