"""Profiling harness for the wildcard matchers."""

from fuzzymatch_lite.profiling.harness import (
    ScanResult,
    generate_text,
    run_scan,
    run_scan_naive,
)
from fuzzymatch_lite.profiling.report import format_comparison, format_report

__all__ = [
    "ScanResult",
    "format_comparison",
    "format_report",
    "generate_text",
    "run_scan",
    "run_scan_naive",
]
