"""Report generation for profiling results.

Formats ScanResult data into human-readable tables for terminal output.
"""
from __future__ import annotations

from fuzzymatch_lite.profiling.harness import ScanResult


def format_report(result: ScanResult, label: str | None = None) -> str:
    """Format a ScanResult as a readable report string."""
    total = result.total_time_ms or 1.0
    lines = [
        f"=== {label or result.label} ===",
        f"Text length:       {result.text_length:,}",
        f"Pattern length:    {result.pattern_length}",
        f"Fragments:         {result.fragment_count}",
        f"Matches:           {result.match_count:,}",
        f"Total time:        {result.total_time_ms:.1f} ms",
        f"Throughput:        {result.chars_per_sec:,.0f} chars/sec",
        f"",
        f"Breakdown:",
        f"  Build:           {result.build_time_ms:.1f} ms "
        f"({result.build_time_ms / total * 100:.1f}%)",
        f"  Scan:            {result.scan_time_ms:.1f} ms "
        f"({result.scan_time_ms / total * 100:.1f}%)",
    ]
    return "\n".join(lines)


def format_comparison(before: ScanResult, after: ScanResult) -> str:
    """Format a before/after comparison table."""

    def _speedup(old: float, new: float) -> str:
        if new <= 0:
            return "inf"
        ratio = old / new
        return f"{ratio:.1f}x"

    lines = [
        f"{'Metric':<30} {before.label:>12} {after.label:>12} {'Speedup':>10}",
        "-" * 66,
        f"{'Total time (ms)':<30} {before.total_time_ms:>12.1f} "
        f"{after.total_time_ms:>12.1f} "
        f"{_speedup(before.total_time_ms, after.total_time_ms):>10}",
        f"{'Throughput (chars/sec)':<30} {before.chars_per_sec:>12,.0f} "
        f"{after.chars_per_sec:>12,.0f} "
        f"{_speedup(after.chars_per_sec, before.chars_per_sec):>10}",
        f"{'Matches':<30} {before.match_count:>12,} {after.match_count:>12,}",
    ]
    return "\n".join(lines)
