"""Wildcard pattern matching over character streams."""

from fuzzymatch_lite.matching.naive import find_fuzzy_matches_naive
from fuzzymatch_lite.matching.wildcard import (
    DEFAULT_WILDCARD,
    Fragment,
    WildcardMatcher,
    find_fuzzy_matches,
    fragments_of,
    iter_fuzzy_matches,
    split_pattern,
)

__all__ = [
    "DEFAULT_WILDCARD",
    "Fragment",
    "WildcardMatcher",
    "find_fuzzy_matches",
    "find_fuzzy_matches_naive",
    "fragments_of",
    "iter_fuzzy_matches",
    "split_pattern",
]
