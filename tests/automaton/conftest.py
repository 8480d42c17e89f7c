"""Shared fixtures for automaton tests."""
from __future__ import annotations

import pytest

from fuzzymatch_lite.automaton.builder import Automaton, AutomatonBuilder
from fuzzymatch_lite.automaton.node import AutomatonNode

# The textbook Aho-Corasick example.
CLASSIC = [("he", 1), ("she", 2), ("his", 3), ("hers", 4)]


def build(fragments: list[tuple[str, int]]) -> Automaton:
    builder = AutomatonBuilder()
    for fragment, fragment_id in fragments:
        builder.add(fragment, fragment_id)
    return builder.build()


def walk(automaton: Automaton, path: str) -> AutomatonNode:
    """Follow trie children (not automaton transitions) from the root."""
    node = automaton.root().node
    for ch in path:
        node = node.children[ch]
    return node


@pytest.fixture
def classic() -> Automaton:
    return build(CLASSIC)


@pytest.fixture
def build_automaton():
    return build


@pytest.fixture
def node_at():
    return walk
