"""Profiling harness for the wildcard matchers.

Generates a random text over a small alphabet, then times building
the automaton and scanning the text. The same text can be fed to the
naive matcher for a before/after comparison.

A small alphabet is deliberate: it makes fragments occur often, so
the terminal link chains and the counter window get real work.
"""
from __future__ import annotations

import cProfile
import io
import pstats
import random
import time
from dataclasses import dataclass

from fuzzymatch_lite.matching.naive import find_fuzzy_matches_naive
from fuzzymatch_lite.matching.wildcard import DEFAULT_WILDCARD, WildcardMatcher


@dataclass(slots=True)
class ScanResult:
    """Timing results from a single scan run."""
    label: str
    text_length: int
    pattern_length: int
    fragment_count: int
    build_time_ms: float
    scan_time_ms: float
    total_time_ms: float
    chars_per_sec: float
    match_count: int
    cprofile_stats: str | None = None


def generate_text(length: int, alphabet: str = "ab", seed: int = 42) -> str:
    """Random text of *length* characters drawn from *alphabet*."""
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    rng = random.Random(seed)
    return "".join(rng.choice(alphabet) for _ in range(length))


def _profiled(fn) -> str:
    pr = cProfile.Profile()
    pr.enable()
    fn()
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(30)
    return s.getvalue()


def run_scan(
    text_length: int = 100_000,
    pattern: str = "ab?a??b",
    alphabet: str = "ab",
    seed: int = 42,
    wildcard: str = DEFAULT_WILDCARD,
    profile: bool = False,
) -> ScanResult:
    """Build a WildcardMatcher and stream a random text through it.

    If profile=True, the scan is wrapped in cProfile and the stats are
    included in the result.
    """
    text = generate_text(text_length, alphabet, seed)

    t0 = time.perf_counter()
    matcher = WildcardMatcher.build_for(pattern, wildcard)
    build_ms = (time.perf_counter() - t0) * 1000

    hits = 0

    def _on_match() -> None:
        nonlocal hits
        hits += 1

    def _run() -> None:
        scan = matcher.scan
        for ch in text:
            scan(ch, _on_match)

    cprofile_text = None
    t0 = time.perf_counter()
    if profile:
        cprofile_text = _profiled(_run)
    else:
        _run()
    scan_ms = (time.perf_counter() - t0) * 1000
    total_ms = build_ms + scan_ms

    return ScanResult(
        label="automaton",
        text_length=text_length,
        pattern_length=matcher.pattern_length,
        fragment_count=matcher.fragment_count,
        build_time_ms=build_ms,
        scan_time_ms=scan_ms,
        total_time_ms=total_ms,
        chars_per_sec=text_length / (total_ms / 1000) if total_ms > 0 else 0,
        match_count=hits,
        cprofile_stats=cprofile_text,
    )


def run_scan_naive(
    text_length: int = 100_000,
    pattern: str = "ab?a??b",
    alphabet: str = "ab",
    seed: int = 42,
    wildcard: str = DEFAULT_WILDCARD,
    profile: bool = False,
) -> ScanResult:
    """Baseline: the same text through find_fuzzy_matches_naive()."""
    text = generate_text(text_length, alphabet, seed)
    found: list[int] = []

    def _run() -> None:
        found.extend(find_fuzzy_matches_naive(pattern, text, wildcard))

    cprofile_text = None
    t0 = time.perf_counter()
    if profile:
        cprofile_text = _profiled(_run)
    else:
        _run()
    total_ms = (time.perf_counter() - t0) * 1000

    return ScanResult(
        label="naive",
        text_length=text_length,
        pattern_length=len(pattern),
        fragment_count=pattern.count(wildcard) + 1,
        build_time_ms=0.0,
        scan_time_ms=total_ms,
        total_time_ms=total_ms,
        chars_per_sec=text_length / (total_ms / 1000) if total_ms > 0 else 0,
        match_count=len(found),
        cprofile_stats=cprofile_text,
    )
