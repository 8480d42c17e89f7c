"""Tests for the naive baseline matcher."""

import pytest

from fuzzymatch_lite.matching.naive import find_fuzzy_matches_naive
from fuzzymatch_lite.matching.wildcard import find_fuzzy_matches


class TestNaive:
    def test_exact(self):
        assert find_fuzzy_matches_naive("ab", "ababab") == [0, 2, 4]

    def test_wildcards(self):
        assert find_fuzzy_matches_naive("a?a", "aaa") == [0]
        assert find_fuzzy_matches_naive("a?a", "aaaa") == [0, 1]
        assert find_fuzzy_matches_naive("a??b", "axxb") == [0]

    def test_text_shorter_than_pattern(self):
        assert find_fuzzy_matches_naive("abcd", "abc") == []

    def test_empty_pattern_matches_after_each_character(self):
        assert find_fuzzy_matches_naive("", "ab") == [1, 2]
        assert find_fuzzy_matches_naive("", "") == []

    @pytest.mark.parametrize("text", ["", "a", "abc"])
    def test_empty_pattern_agrees_with_automaton(self, text):
        assert find_fuzzy_matches_naive("", text) == find_fuzzy_matches("", text)

    def test_bad_wildcard(self):
        with pytest.raises(ValueError, match="single character"):
            find_fuzzy_matches_naive("a", "a", wildcard="ab")
