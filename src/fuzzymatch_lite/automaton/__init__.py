"""Aho-Corasick automaton: trie nodes, builder and cursor."""

from fuzzymatch_lite.automaton.builder import Automaton, AutomatonBuilder
from fuzzymatch_lite.automaton.cursor import NodeReference
from fuzzymatch_lite.automaton.node import (
    AutomatonNode,
    automaton_transition,
    trie_transition,
)

__all__ = [
    "Automaton",
    "AutomatonBuilder",
    "AutomatonNode",
    "NodeReference",
    "automaton_transition",
    "trie_transition",
]
