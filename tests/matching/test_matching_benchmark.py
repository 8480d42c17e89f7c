"""Benchmark tests: automaton matcher vs the naive baseline."""

import time

import pytest

from fuzzymatch_lite.matching.naive import find_fuzzy_matches_naive
from fuzzymatch_lite.matching.wildcard import find_fuzzy_matches
from fuzzymatch_lite.profiling.harness import generate_text


@pytest.mark.benchmark
class TestMatchingBenchmark:
    def test_same_results_on_large_text(self):
        text = generate_text(50_000, alphabet="ab", seed=7)
        pattern = "ab?ba??a"
        assert find_fuzzy_matches(pattern, text) == find_fuzzy_matches_naive(pattern, text)

    def test_long_pattern_scan_time(self):
        """Scan cost should not grow with pattern length.

        The naive matcher does O(n * m) work; the automaton does O(n)
        transitions plus one counter bump per fragment occurrence.
        """
        text = generate_text(20_000, alphabet="ab", seed=11)
        short = "a?b"
        long = "ab" * 100 + "?" + "ba" * 100

        start = time.perf_counter()
        find_fuzzy_matches(short, text)
        short_time = time.perf_counter() - start

        start = time.perf_counter()
        find_fuzzy_matches(long, text)
        long_time = time.perf_counter() - start

        print(f"\n  short pattern: {short_time * 1000:.1f} ms")
        print(f"  long pattern:  {long_time * 1000:.1f} ms")
        # Generous bound; a naive scan would be ~100x slower here.
        assert long_time < short_time * 20 + 0.5
