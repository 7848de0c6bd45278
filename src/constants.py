# -*- coding: utf-8 -*-
import logging
from typing import List, Tuple

VERSION = "1.5"

# Appended to every stored word so a full word and a bare prefix
# take different paths through the trie.
TERMINATOR = "\n"

DEFAULT_WORD_FILE = "collins_scrabble_words_2019.txt"

SORT_ALPHA: Tuple[str, ...] = ("a", "alpha")
SORT_LENGTH: Tuple[str, ...] = ("l", "len")
SORT_METHODS: List[str] = [*SORT_ALPHA, *SORT_LENGTH]

# Log levels, numbered like the --log-level flag
VERBOSE = logging.DEBUG
DETAIL = 15
DEFAULT_LOG_LEVEL = logging.INFO
MIN_LOG_LEVEL = 10
MAX_LOG_LEVEL = 60

FATAL_EXIT_CODE = 254
