"""Prefix trie for word lookups and prefix-bounded suggestions."""

from __future__ import annotations

from itertools import islice
from typing import Iterator


class TrieNode:
    """Single character position in the trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie answering membership and suggestion queries.

    Children are kept in a plain dict, so sibling order is the order in
    which each next character was first inserted. Suggestions follow that
    order; it is not alphabetical.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def insert(self, word: str) -> None:
        if not word:
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    is_word = contains

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def iter_words(self, prefix: str = "") -> Iterator[str]:
        """Yield complete words starting with *prefix*, depth first.

        A node's own word comes before the words below it, and siblings
        come in insertion order. The generator only walks as far as the
        consumer pulls.
        """
        node = self._walk(prefix)
        if node is None:
            return
        stack = [(node, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                yield path
            # reversed so the first-inserted child is popped first
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, path + ch))

    def suggest(self, prefix: str, limit: int) -> list[str]:
        """Up to *limit* dictionary words that extend *prefix*."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        return list(islice(self.iter_words(prefix), limit))

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
