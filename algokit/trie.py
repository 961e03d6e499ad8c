"""Prefix tree over lowercase ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    end: bool = False


def _check(word: str) -> str:
    for ch in word:
        if ch not in string.ascii_lowercase:
            raise ValueError(f"character {ch!r} is not a lowercase letter a-z")
    return word


class Trie:
    """A trie of words made of the letters a to z."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in _check(text):
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in _check(word):
            node = node.children.setdefault(ch, _TrieNode())
        node.end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.end

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None