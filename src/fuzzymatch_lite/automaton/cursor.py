"""NodeReference: a copyable cursor into a built automaton.

A reference holds two borrowed pointers, the current node and the
root, and nothing else. Moving the cursor never mutates it; next()
returns a new reference. It is the only handle code outside the
automaton package uses to read node internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from fuzzymatch_lite.automaton.node import AutomatonNode, automaton_transition


@dataclass(frozen=True, slots=True, eq=False)
class NodeReference:
    """Immutable pointer to an automaton state.

    An empty reference (node=None) is falsy. It shows up as the end of
    a terminal link chain and is not a valid state to scan from.
    """
    node: AutomatonNode | None = None
    root: AutomatonNode | None = None

    def _require_node(self) -> AutomatonNode:
        if self.node is None:
            raise RuntimeError("Empty NodeReference does not point at a state")
        return self.node

    def next(self, character: str) -> NodeReference:
        """Follow the automaton transition on *character*."""
        node = self._require_node()
        return NodeReference(
            automaton_transition(node, self.root, character),  # type: ignore[arg-type]
            self.root,
        )

    def is_terminal(self) -> bool:
        """True if at least one fragment ends exactly at this state."""
        return self._require_node().is_terminal

    def is_root(self) -> bool:
        return self.node is not None and self.node is self.root

    def terminated_ids(self) -> tuple[int, ...]:
        return tuple(self._require_node().terminated_ids)

    def terminal_link(self) -> NodeReference:
        return NodeReference(self._require_node().terminal_link, self.root)

    def generate_matches(self, on_match: Callable[[int], None]) -> None:
        """Report every fragment ending at the current text position.

        Walks the terminal link chain, so only states that actually
        terminate a fragment are visited after the first.
        """
        current = self._require_node()
        while current is not None:
            for fragment_id in current.terminated_ids:
                on_match(fragment_id)
            current = current.terminal_link

    def iter_matches(self) -> Iterator[int]:
        """Generator form of generate_matches()."""
        current = self._require_node()
        while current is not None:
            yield from current.terminated_ids
            current = current.terminal_link

    def __bool__(self) -> bool:
        return self.node is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeReference):
            return NotImplemented
        return self.node is other.node

    def __hash__(self) -> int:
        return id(self.node)
