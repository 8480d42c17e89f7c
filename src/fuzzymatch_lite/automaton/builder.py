"""Aho-Corasick automaton over a set of string fragments.

Building happens in three phases:

    1. Build the trie: insert each fragment character by character
       and record its identifier on the node where it ends.
    2. Suffix links (BFS from root): a node's suffix link points at
       the node for the longest proper suffix of its path that is
       also a path in the trie. For a child of the root that is the
       root. Deeper down it is the automaton transition from the
       parent's suffix link on the edge character.
    3. Terminal links (second BFS): a node's terminal link is the
       nearest node along its suffix chain that terminates at least
       one fragment, or None if there is no such node.

Phases 2 and 3 are separate passes over the same traversal engine
with different callbacks. Both lean on BFS order: by the time a node
is handled, everything shallower than it is already final.

Fragments may be empty. An empty fragment ends at the root, which
makes the root itself a match state, and every node whose suffix
chain reaches the root gets a terminal link to it.
"""

from __future__ import annotations

import logging
from typing import Iterator

from fuzzymatch_lite.automaton.cursor import NodeReference
from fuzzymatch_lite.automaton.node import AutomatonNode, automaton_transition
from fuzzymatch_lite.graph.traversal import Edge, breadth_first_search

log = logging.getLogger(__name__)


class TrieGraph:
    """Exposes the trie's parent -> child edges to the traversal engine."""

    __slots__ = ()

    def outgoing_edges(
        self, vertex: AutomatonNode
    ) -> Iterator[Edge[AutomatonNode, str]]:
        for character, child in vertex.children.items():
            yield Edge(vertex, child, character)


class Automaton:
    """A built automaton. Owns the root node; never changes shape.

    Obtain one from AutomatonBuilder.build(). Scanning goes through
    the NodeReference returned by root().
    """

    __slots__ = ("_root", "_fragment_count")

    def __init__(self, root: AutomatonNode, fragment_count: int) -> None:
        self._root = root
        self._fragment_count = fragment_count

    @property
    def fragment_count(self) -> int:
        return self._fragment_count

    def root(self) -> NodeReference:
        return NodeReference(self._root, self._root)

    def node_count(self) -> int:
        """Count trie nodes (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __repr__(self) -> str:
        return (
            f"Automaton(fragments={self._fragment_count}, "
            f"nodes={self.node_count()})"
        )


class AutomatonBuilder:
    """Collects (fragment, identifier) pairs and builds an Automaton.

    Usage:
        builder = AutomatonBuilder()
        builder.add("he", 1)
        builder.add("she", 2)
        automaton = builder.build()

    The same string may be added more than once under different
    identifiers; both identifiers end up on the same node.
    """

    def __init__(self) -> None:
        self._fragments: list[tuple[str, int]] = []

    def add(self, fragment: str, fragment_id: int) -> None:
        self._fragments.append((fragment, fragment_id))

    def __len__(self) -> int:
        return len(self._fragments)

    def build(self) -> Automaton:
        root = AutomatonNode()
        for fragment, fragment_id in self._fragments:
            _insert(root, fragment, fragment_id)
        _build_suffix_links(root)
        _build_terminal_links(root)

        automaton = Automaton(root, len(self._fragments))
        log.debug(
            "Built automaton: %d fragment(s), %d node(s)",
            automaton.fragment_count,
            automaton.node_count(),
        )
        return automaton


def _insert(root: AutomatonNode, fragment: str, fragment_id: int) -> None:
    node = root
    for character in fragment:
        child = node.children.get(character)
        if child is None:
            child = AutomatonNode()
            node.children[character] = child
        node = child
    node.terminated_ids.append(fragment_id)


def _build_suffix_links(root: AutomatonNode) -> None:
    def examine_vertex(node: AutomatonNode) -> None:
        if node is root:
            node.suffix_link = node

    def examine_edge(edge: Edge[AutomatonNode, str]) -> None:
        parent, child = edge.source, edge.target
        if parent is root:
            child.suffix_link = root
            return
        # parent.suffix_link is shallower than parent, hence already final
        child.suffix_link = automaton_transition(
            parent.suffix_link, root, edge.label  # type: ignore[arg-type]
        )

    breadth_first_search(
        root,
        TrieGraph(),
        on_examine_vertex=examine_vertex,
        on_examine_edge=examine_edge,
    )


def _build_terminal_links(root: AutomatonNode) -> None:
    def discover(node: AutomatonNode) -> None:
        suffix = node.suffix_link
        if suffix is None or suffix is node:
            return
        if suffix.terminated_ids:
            node.terminal_link = suffix
        else:
            node.terminal_link = suffix.terminal_link

    breadth_first_search(root, TrieGraph(), on_discover=discover)
