"""Streaming wildcard matching on top of the Aho-Corasick automaton.

A pattern like "ab??c?d" is split on the wildcard into fragments
["ab", "", "c", "d"]. Adjacent wildcards are not coalesced; they
delimit an empty fragment. Each fragment is identified by the offset
just past its last character in the original pattern:

    pattern   a b ? ? c ? d
    offset    0 1 2 3 4 5 6
    "ab" -> 2,  "" -> 3,  "c" -> 5,  "d" -> 7

All fragments go into one automaton. While scanning, a fragment with
identifier `id` found ending at text position i says: "if the whole
pattern is aligned here, it ends at i + (pattern_length - id)". So we
bump a counter pattern_length - id slots ahead of the current
position. When the counter for the current position reaches the
number of fragments, every fragment has been seen at the offset the
alignment needs, and the pattern occurs ending at i.

The counters live in a ring buffer of pattern_length + 1 slots, so
memory does not depend on how long the text is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from fuzzymatch_lite.automaton.builder import Automaton, AutomatonBuilder
from fuzzymatch_lite.automaton.cursor import NodeReference

log = logging.getLogger(__name__)

DEFAULT_WILDCARD = "?"


@dataclass(frozen=True, slots=True)
class Fragment:
    """A wildcard-free piece of the pattern and its end offset."""
    text: str
    end_offset: int


def _check_wildcard(wildcard: str) -> None:
    if len(wildcard) != 1:
        raise ValueError(
            f"wildcard must be a single character, got {wildcard!r}"
        )


def split_pattern(pattern: str, wildcard: str = DEFAULT_WILDCARD) -> list[str]:
    """Split *pattern* on every occurrence of *wildcard*.

    Consecutive wildcards delimit empty strings, and a leading or
    trailing wildcard yields an empty first or last piece. An empty
    pattern yields a single empty piece.
    """
    _check_wildcard(wildcard)
    return pattern.split(wildcard)


def fragments_of(pattern: str, wildcard: str = DEFAULT_WILDCARD) -> list[Fragment]:
    """Split *pattern* into fragments tagged with their end offsets."""
    fragments: list[Fragment] = []
    offset = 0
    for piece in split_pattern(pattern, wildcard):
        offset += len(piece)
        fragments.append(Fragment(piece, offset))
        offset += 1  # the wildcard that follows
    return fragments


class WildcardMatcher:
    """Consumes text one character at a time and reports pattern ends.

    Usage:
        matcher = WildcardMatcher.build_for("a?c")
        for i, ch in enumerate(text):
            matcher.scan(ch, lambda: print("match ends at", i))

    reset() discards everything scanned so far so the same automaton
    can be replayed against a new stream.
    """

    __slots__ = (
        "_automaton", "_state", "_pattern_length", "_fragment_count",
        "_counts", "_front",
    )

    def __init__(
        self,
        automaton: Automaton,
        pattern_length: int,
    ) -> None:
        self._automaton = automaton
        self._pattern_length = pattern_length
        self._fragment_count = automaton.fragment_count
        self._state: NodeReference = automaton.root()
        self._counts: list[int] = [0] * (pattern_length + 1)
        self._front = 0
        self.reset()

    @classmethod
    def build_for(
        cls, pattern: str, wildcard: str = DEFAULT_WILDCARD
    ) -> WildcardMatcher:
        builder = AutomatonBuilder()
        for fragment in fragments_of(pattern, wildcard):
            builder.add(fragment.text, fragment.end_offset)
        matcher = cls(builder.build(), len(pattern))
        log.debug(
            "Wildcard matcher for pattern of length %d with %d fragment(s)",
            matcher.pattern_length,
            matcher.fragment_count,
        )
        return matcher

    @property
    def pattern_length(self) -> int:
        return self._pattern_length

    @property
    def fragment_count(self) -> int:
        return self._fragment_count

    @property
    def automaton(self) -> Automaton:
        return self._automaton

    @property
    def counters(self) -> tuple[int, ...]:
        """Snapshot of the window, front (current position) first."""
        size = len(self._counts)
        return tuple(
            self._counts[(self._front + k) % size] for k in range(size)
        )

    def reset(self) -> None:
        self._state = self._automaton.root()
        for k in range(len(self._counts)):
            self._counts[k] = 0
        self._front = 0
        # Empty fragments end at the root before any text is read.
        self._count_fragment_ends()
        self._shift()

    def scan(self, character: str, on_match: Callable[[], None]) -> None:
        """Feed one character; call on_match() if a full pattern ends here."""
        self._state = self._state.next(character)
        self._count_fragment_ends()
        if self._counts[self._front] == self._fragment_count:
            on_match()
        self._shift()

    def _count_fragment_ends(self) -> None:
        counts = self._counts
        size = len(counts)
        front = self._front
        length = self._pattern_length

        def bump(fragment_id: int) -> None:
            counts[(front + length - fragment_id) % size] += 1

        self._state.generate_matches(bump)

    def _shift(self) -> None:
        self._counts[self._front] = 0
        self._front = (self._front + 1) % len(self._counts)


def iter_fuzzy_matches(
    pattern: str,
    chars: Iterable[str],
    wildcard: str = DEFAULT_WILDCARD,
) -> Iterator[int]:
    """Yield 0-indexed start positions of *pattern* in a character stream.

    Positions come out in ascending order as soon as the last
    character of each occurrence has been consumed.
    """
    matcher = WildcardMatcher.build_for(pattern, wildcard)
    length = matcher.pattern_length
    found: list[int] = []
    for i, character in enumerate(chars):
        matcher.scan(character, lambda: found.append(i + 1 - length))
        if found:
            yield from found
            found.clear()


def find_fuzzy_matches(
    pattern: str,
    text: str,
    wildcard: str = DEFAULT_WILDCARD,
) -> list[int]:
    """Return every start position where *pattern* matches *text*.

    Each wildcard in the pattern matches any single character.
    Overlapping occurrences are all reported.

        >>> find_fuzzy_matches("a?a", "aaaa")
        [0, 1]
    """
    return list(iter_fuzzy_matches(pattern, text, wildcard))
