"""Input and output glue for the command-line matcher.

Input is whitespace-delimited tokens: the pattern first, then the
text. Output is the number of matches on one line and the match
positions, each followed by a space, on the next.
"""
from __future__ import annotations

from typing import Iterable, TextIO


class InputError(ValueError):
    """Raised when the input stream does not hold enough tokens."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Expected {expected} whitespace-delimited token(s), "
            f"got {received}"
        )


def read_tokens(stream: TextIO, count: int = 2) -> list[str]:
    """Read the first *count* tokens from *stream*.

    Raises InputError if the stream runs out first. Anything after
    the first *count* tokens is ignored.
    """
    tokens = stream.read().split()
    if len(tokens) < count:
        raise InputError(count, len(tokens))
    return tokens[:count]


def format_matches(positions: Iterable[int]) -> str:
    positions = list(positions)
    body = "".join(f"{p} " for p in positions)
    return f"{len(positions)}\n{body}\n"
