"""Graph traversal used to decorate the automaton trie."""

from fuzzymatch_lite.graph.traversal import (
    Edge,
    OutgoingEdges,
    breadth_first_search,
)

__all__ = [
    "Edge",
    "OutgoingEdges",
    "breadth_first_search",
]
