"""Generic breadth-first search with callback hooks.

The traversal knows nothing about what a vertex is. It asks the graph
for the outgoing edges of a vertex and reports three kinds of events
to the caller:

    on_discover(vertex)        -- vertex seen for the first time,
                                  called before it is enqueued
    on_examine_vertex(vertex)  -- vertex dequeued from the frontier
    on_examine_edge(edge)      -- each outgoing edge of the examined
                                  vertex, before its target is checked

Vertices are tracked by identity (id()), not equality. Two distinct
trie nodes with identical contents are still two vertices.

Discovery order is strictly level by level. The automaton builder
depends on this: a node's suffix link can only be computed once its
parent's suffix link is final, and BFS guarantees parents are
finished first.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Protocol, TypeVar

V = TypeVar("V")
L = TypeVar("L")


@dataclass(frozen=True, slots=True)
class Edge(Generic[V, L]):
    """A directed, labelled edge source -> target."""
    source: V
    target: V
    label: L


class OutgoingEdges(Protocol[V, L]):
    def outgoing_edges(self, vertex: V) -> Iterable[Edge[V, L]]: ...


def breadth_first_search(
    origin: V,
    graph: OutgoingEdges[V, L],
    *,
    on_discover: Callable[[V], None] | None = None,
    on_examine_vertex: Callable[[V], None] | None = None,
    on_examine_edge: Callable[[Edge[V, L]], None] | None = None,
) -> int:
    """Traverse *graph* breadth-first from *origin*.

    Returns the number of discovered vertices.
    """
    discovered: set[int] = {id(origin)}
    frontier: deque[V] = deque([origin])
    if on_discover is not None:
        on_discover(origin)

    while frontier:
        vertex = frontier.popleft()
        if on_examine_vertex is not None:
            on_examine_vertex(vertex)

        for edge in graph.outgoing_edges(vertex):
            if on_examine_edge is not None:
                on_examine_edge(edge)
            target = edge.target
            if id(target) not in discovered:
                discovered.add(id(target))
                if on_discover is not None:
                    on_discover(target)
                frontier.append(target)

    return len(discovered)
