"""
Prefix-trie matcher.

Given a list of literal alternatives, decide which one appears next in the text
by walking a character trie instead of trying every alternative in turn.

The matcher consumes the longest alternative that is a prefix of the remaining
input. Cost is proportional to the length of the matched text, not to the
number of alternatives.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: Dict[str, "_Node"] = {}
        self.terminal = False


class PrefixTrie:
    """
    Longest-match matcher over a fixed set of literal strings.

    An empty alternative set (or an empty alternative) matches the empty string.
    Duplicate alternatives collapse into a single trie path.
    """

    def __init__(self, alternatives: Iterable[str]) -> None:
        self._root = _Node()
        self._size = 0
        for alt in alternatives:
            self._insert(alt)
        if self._size == 0:
            self._root.terminal = True

    def _insert(self, word: str) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.terminal = True
        self._size += 1

    def first_chars(self) -> frozenset:
        """
        Characters an alternative can start with (used to skip hopeless positions).
        """
        return frozenset(self._root.children)

    def matches_empty(self) -> bool:
        return self._root.terminal

    def match(self, text: str, pos: int) -> Optional[Tuple[str, int]]:
        """
        Match at text[pos:].

        Returns (matched_string, new_pos) or None. On None nothing is consumed.
        """
        node = self._root
        best_end = pos if node.terminal else -1
        i = pos
        n = len(text)
        while i < n:
            node = node.children.get(text[i])
            if node is None:
                break
            i += 1
            if node.terminal:
                best_end = i

        if best_end < 0:
            return None
        return text[pos:best_end], best_end
