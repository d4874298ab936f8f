"""Prefix trie stored as an arena of index-addressed nodes."""

from __future__ import annotations

ROOT = 0


class Trie:
    """Letter trie the move search walks one node at a time.

    Nodes are integers indexing into parallel lists.  Each node's children
    are kept sorted by letter so that iteration order is deterministic.
    """

    __slots__ = ("_children", "_terminal")

    def __init__(self):
        self._children: list[dict[str, int]] = [{}]
        self._terminal: list[bool] = [False]

    @property
    def root(self) -> int:
        return ROOT

    def insert(self, word: str) -> None:
        node = ROOT
        for ch in word:
            nexts = self._children[node]
            child = nexts.get(ch)
            if child is None:
                child = self._new_node()
                if nexts and ch < next(reversed(nexts)):
                    nexts[ch] = child
                    self._children[node] = dict(sorted(nexts.items()))
                else:
                    nexts[ch] = child
            node = child
        self._terminal[node] = True

    def children(self, node: int) -> dict[str, int]:
        """Letter -> child node, in ascending letter order."""
        return self._children[node]

    def child(self, node: int, letter: str) -> int | None:
        return self._children[node].get(letter)

    def is_terminal(self, node: int) -> bool:
        return self._terminal[node]

    def is_leaf(self, node: int) -> bool:
        return not self._children[node]

    def find_prefix(self, prefix: str) -> int | None:
        """Node reached by walking *prefix* from the root, or None."""
        node = ROOT
        for ch in prefix:
            node = self._children[node].get(ch)
            if node is None:
                return None
        return node

    def is_word(self, word: str) -> bool:
        node = self.find_prefix(word)
        return node is not None and self._terminal[node]

    def is_prefix(self, prefix: str) -> bool:
        return self.find_prefix(prefix) is not None

    def _new_node(self) -> int:
        self._children.append({})
        self._terminal.append(False)
        return len(self._children) - 1
