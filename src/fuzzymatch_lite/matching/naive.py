"""Naive O(n * m) wildcard search: test every alignment individually.

This is the baseline for benchmarking and the reference the
automaton-based matcher is checked against in tests.
"""

from __future__ import annotations

from fuzzymatch_lite.matching.wildcard import DEFAULT_WILDCARD


def find_fuzzy_matches_naive(
    pattern: str,
    text: str,
    wildcard: str = DEFAULT_WILDCARD,
) -> list[int]:
    if len(wildcard) != 1:
        raise ValueError(
            f"wildcard must be a single character, got {wildcard!r}"
        )
    m = len(pattern)
    if m == 0:
        # Same convention as the streaming matcher: the empty pattern
        # is reported once after each consumed character.
        return list(range(1, len(text) + 1))
    results: list[int] = []
    for start in range(len(text) - m + 1):
        if all(
            pc == wildcard or pc == tc
            for pc, tc in zip(pattern, text[start:start + m])
        ):
            results.append(start)
    return results
