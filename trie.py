# trie.py
# Character-keyed prefix tree: insert, exact lookup, prefix lookup.

from typing import Dict, Iterable, Optional


class TrieNode:
    """One position in the prefix space."""

    __slots__ = ("terminal", "children")

    def __init__(self):
        self.terminal = False
        self.children: Dict[str, "TrieNode"] = {}


class Trie:
    """
    Prefix tree over Python strings, one edge per code point.
      - Trie() -> empty trie (root only)
      - insert(word) -> word
      - contains(word) -> bool
      - starts_with(prefix) -> bool
    The root stands for the empty prefix; it is terminal only once "" is inserted.
    Words are str only: other sequences (lists, bytes) raise TypeError.
    """

    __slots__ = ("root",)

    def __init__(self):
        self.root = TrieNode()

    # ---------- Public API ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "Trie":
        """Build a trie holding every word in ``words``."""
        trie = cls()
        for w in words:
            trie.insert(w)
        return trie

    def insert(self, word: str) -> str:
        """Add ``word`` and return it unchanged. Inserting twice is a no-op."""
        _check_str(word)
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child
        node.terminal = True
        return word

    def contains(self, word: str) -> bool:
        """True if ``word`` itself was inserted (a mere prefix is not enough)."""
        _check_str(word)
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word begins with ``prefix`` (always true for "")."""
        _check_str(prefix)
        return self._walk(prefix) is not None

    def __contains__(self, word) -> bool:
        return self.contains(word)

    # ---------- Helpers ----------
    def _walk(self, s: str) -> Optional[TrieNode]:
        """Return the node reached after consuming s, or None if no such path."""
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node


def _check_str(value):
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
