"""Trie vertices of the Aho-Corasick automaton and its transition function.

Each AutomatonNode owns its trie children. Everything else it points
at (suffix link, terminal link, cached transitions) is a plain
back-reference into the same tree, never a second owner. The root's
suffix link points at the root itself.

The automaton transition from a node on a character is:

    1. the trie child for that character, if there is one;
    2. otherwise the root, if the node is the root;
    3. otherwise the transition from the node's suffix link.

Rule 3 walks towards the root along suffix links. We do that walk in
a loop rather than by recursion (a single long fragment would make the
chain as deep as the fragment), and cache the answer on every node
the walk passed through. Each (node, character) pair is resolved at
most once over the lifetime of the automaton, which is what makes a
text scan amortized O(1) per character.

The cache is written lazily during scanning. It is a memo of a pure
function, so the automaton is observably immutable, but two threads
scanning the same automaton at once would race on the dict writes.
One scan per automaton at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class AutomatonNode:
    """A node in the fragment trie.

    children maps a character to the child node this node owns.
    terminated_ids lists the identifiers of fragments ending exactly here.
    """
    children: dict[str, AutomatonNode] = field(default_factory=dict)
    terminated_ids: list[int] = field(default_factory=list)
    suffix_link: AutomatonNode | None = field(default=None, repr=False)
    terminal_link: AutomatonNode | None = field(default=None, repr=False)
    transition_cache: dict[str, AutomatonNode] = field(
        default_factory=dict, repr=False
    )

    @property
    def is_terminal(self) -> bool:
        return bool(self.terminated_ids)


def trie_transition(node: AutomatonNode, character: str) -> AutomatonNode | None:
    """Return the trie child of *node* for *character*, or None."""
    return node.children.get(character)


def automaton_transition(
    node: AutomatonNode,
    root: AutomatonNode,
    character: str,
) -> AutomatonNode:
    """Return the automaton state reached from *node* on *character*.

    Requires suffix links to be set on *node* and on every node of its
    suffix chain (the builder guarantees this by working in BFS order).
    """
    pending: list[AutomatonNode] = []
    current = node
    while True:
        cached = current.transition_cache.get(character)
        if cached is not None:
            target = cached
            break
        pending.append(current)
        child = current.children.get(character)
        if child is not None:
            target = child
            break
        if current is root:
            target = root
            break
        if current.suffix_link is None:
            raise RuntimeError("Suffix links are not built for this node")
        current = current.suffix_link

    for visited in pending:
        visited.transition_cache[character] = target
    return target
