# -*- coding: utf-8 -*-
import codecs
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from constants import DETAIL

logger = logging.getLogger(__name__)

# POSIX [[:cntrl:]]
CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]+')


def split_lines(text: str) -> List[str]:
    """Splits on any run of control characters, whatever the platform's line endings."""
    return CONTROL_CHARS.split(text)


def strip_control(text: str) -> str:
    return CONTROL_CHARS.sub('', text)


def has_control(text: str) -> bool:
    return CONTROL_CHARS.search(text) is not None


def decode_terminator(value: str) -> str:
    """Turns escape text such as ``\\r`` into the character it names."""
    return codecs.decode(value, 'unicode_escape')


def read_words(path: Union[str, Path], terminator: Optional[str] = None) -> List[str]:
    """Reads a word list file into raw entries.

    When ``terminator`` is given, those trailing characters are stripped
    from every entry. Raises OSError if the file can't be read.
    """
    path = Path(path)
    text = path.read_text(encoding='utf-8', errors='ignore')
    words = split_lines(text)
    if terminator:
        words = [w.rstrip(terminator) for w in words]
    logger.log(DETAIL, f"Read {len(words):,} lines from {path}")
    return words
