# -*- coding: utf-8 -*-
import logging
from typing import Iterable, List, Optional, Set

from constants import TERMINATOR
from trie import TrieNode, build_trie

logger = logging.getLogger(__name__)


class SearchState:
    """Backtracking state for one search: the candidate being built and
    which letter positions it currently uses."""

    def __init__(self, letters: str):
        self.letters = letters
        self.used: List[bool] = [False] * len(letters)
        self.buffer: List[str] = []
        self.taken: List[int] = []

    @property
    def candidate(self) -> str:
        return "".join(self.buffer)

    def __len__(self):
        return len(self.buffer)

    def acquire(self, index: int) -> str:
        """Extends the candidate with the letter at ``index``; returns the new candidate."""
        self.used[index] = True
        self.buffer.append(self.letters[index])
        self.taken.append(index)
        return self.candidate

    def release(self):
        """Undoes the most recent acquire."""
        self.used[self.taken.pop()] = False
        self.buffer.pop()


def search(root: TrieNode, letters: str, min_length: int, max_length: int) -> List[str]:
    """
    Finds every word spelled by some ordering of a subset of ``letters``
    whose length lies in [min_length, max_length].

    Both bounds are inclusive and used as given. Results come back in
    discovery order with duplicates removed, since repeated letters can
    spell the same word from different positions.

    Strategy:
    - Depth-first, trying unused positions left to right at each depth
    - On reaching a candidate, record it once if it is in range and a complete word
    - Descend only while the candidate is still a prefix of some dictionary word
    - An explicit stack holds the next position to try at each depth, so
      depth is bounded by the number of letters, not the interpreter
    """
    state = SearchState(letters)
    results: List[str] = []
    seen: Set[str] = set()
    stack = [0]

    while stack:
        index = stack[-1]
        if index == len(letters):
            stack.pop()
            if state.taken:
                state.release()
            continue
        stack[-1] = index + 1
        if state.used[index]:
            continue

        candidate = state.acquire(index)
        if not root.prefix_exists(candidate):
            state.release()
            continue
        _record(root, candidate, min_length, max_length, results, seen)
        stack.append(0)

    return results


def _record(root: TrieNode, candidate: str, min_length: int, max_length: int,
            results: List[str], seen: Set[str]):
    if min_length <= len(candidate) <= max_length:
        if root.prefix_exists(candidate + TERMINATOR) and candidate not in seen:
            seen.add(candidate)
            results.append(candidate)


def normalize_letters(input_str: str) -> str:
    return input_str.lower()


class AnagramSolver:
    """Unscrambler over a word list (Trie + Prefix Pruning)

    Strategy:
      - Loads the word list lowercased into a Trie, once
      - Tries every ordering of every subset of the input letters
      - Abandons a branch as soon as no dictionary word starts with it
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self.trie = TrieNode()
        self.word_count = 0
        if words is not None:
            self.load_words(words)

    def load_words(self, words: Iterable[str]):
        """Builds the Trie from the word list, replacing any previous one."""
        words = list(words)
        logger.info(f"Loading {len(words):,} words into dictionary")
        self.trie = build_trie(words)
        self.word_count = len(words)

    def find_words(self, letters: str, min_length: int = 0, max_length: Optional[int] = None) -> List[str]:
        """Finds the dictionary words that can be made from ``letters``.

        ``max_length`` defaults to the number of letters.
        """
        letters = normalize_letters(letters)
        if not max_length:
            max_length = len(letters)
        logger.info(f"Finding words of {min_length} to {max_length} length")
        matches = search(self.trie, letters, min_length, max_length)
        logger.info(f"Found {len(matches):,} words")
        return matches
