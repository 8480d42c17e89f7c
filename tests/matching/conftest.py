"""Shared fixtures for wildcard matching tests."""
from __future__ import annotations

import random

import pytest

SEED = 42


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def random_cases(rng: random.Random) -> list[tuple[str, str]]:
    """(pattern, text) pairs over a tiny alphabet so matches are frequent."""
    cases: list[tuple[str, str]] = []
    for _ in range(300):
        pattern = "".join(rng.choice("ab?") for _ in range(rng.randint(1, 7)))
        text = "".join(rng.choice("abc") for _ in range(rng.randint(0, 40)))
        cases.append((pattern, text))
    return cases
