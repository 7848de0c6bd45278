# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Any, Dict, Iterable

from constants import TERMINATOR


class TrieNode:
    """Node for the Trie structure for efficient prefix searching.

    Words are stored lowercased with TERMINATOR appended, so a path that
    spells ``word`` only proves a prefix, while ``word + TERMINATOR``
    proves a complete entry.
    """

    def __init__(self, char: str = ""):
        self.char = char
        self.children: Dict[str, 'TrieNode'] = {}

    def insert(self, word: str):
        """Inserts a word into the Trie."""
        node = self
        for letter in word.lower() + TERMINATOR:
            if letter not in node.children:
                node.children[letter] = TrieNode(letter)
            node = node.children[letter]

    def prefix_exists(self, text: str) -> bool:
        """Follows ``text`` one character at a time; False at the first missing branch."""
        node = self
        for letter in text:
            node = node.children.get(letter)
            if node is None:
                return False
        return True

    def contains(self, word: str) -> bool:
        return self.prefix_exists(word.lower() + TERMINATOR)

    def to_dict(self) -> Dict[str, Any]:
        """Nested dict of the subtree, for dumping as JSON."""
        data: Dict[str, Any] = {"self": self.char}
        stack = [(self, data)]
        while stack:
            node, out = stack.pop()
            if not node.children:
                continue
            out["children"] = {}
            for letter, child in node.children.items():
                child_data = {"self": child.char}
                out["children"][letter] = child_data
                stack.append((child, child_data))
        return data

    def __repr__(self):
        return f"<TrieNode {self.char!r} ({len(self.children)} children)>"


def build_trie(words: Iterable[str]) -> TrieNode:
    """Builds a Trie from raw word list entries. Any string is accepted."""
    root = TrieNode()
    for word in words:
        root.insert(word)
    return root
