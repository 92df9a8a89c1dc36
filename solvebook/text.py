"""String puzzles: prefix replacement, largest concatenation, digit clearing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Optional


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    word_end: bool = False


class Trie:
    """A prefix tree of words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.word_end = True

    def shortest_root(self, word: str) -> Optional[str]:
        """Return the shortest stored word that prefixes ``word``, or None."""
        node = self._root
        for position, ch in enumerate(word):
            if node.word_end:
                return word[:position]
            node = node.children.get(ch)
            if node is None:
                return None
        return word if node.word_end else None


def replace_words(dictionary: Iterable[str], sentence: str) -> str:
    """Replace each word of a sentence with its shortest root from the dictionary.

    Runs of spaces collapse to one; a trailing space is kept as a single space.
    """
    trie = Trie(dictionary)
    words = [word for word in sentence.split(" ") if word]
    if sentence.endswith(" "):
        words.append("")
    return " ".join(trie.shortest_root(word) or word for word in words)


def _concat_order(a: str, b: str) -> int:
    ab, ba = a + b, b + a
    if ab > ba:
        return -1
    if ab < ba:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Arrange numbers so that their concatenation is as large as possible."""
    parts = sorted(map(str, nums), key=cmp_to_key(_concat_order))
    if not parts:
        raise ValueError("largest_number needs at least one number")
    if parts[0] == "0":
        return "0"
    return "".join(parts)


def clear_digits(s: str) -> str:
    """Remove every digit together with the closest lowercase letter before it."""
    kept: list[str] = []
    for ch in s:
        if "a" <= ch <= "z":
            kept.append(ch)
        elif "0" <= ch <= "9" and kept:
            kept.pop()
    return "".join(kept)