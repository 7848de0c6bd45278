# -*- coding: utf-8 -*-
import json
import logging
import re
from typing import List, Optional

from constants import DETAIL, SORT_ALPHA, SORT_LENGTH, VERBOSE

logger = logging.getLogger(__name__)


def filter_matches(matches: List[str], pattern: str) -> List[str]:
    """Keeps the words where ``pattern`` matches. Raises re.error on a bad pattern."""
    regex = re.compile(pattern)
    kept = []
    for match in matches:
        if regex.search(match):
            kept.append(match)
        else:
            logger.log(VERBOSE, match)
    logger.log(DETAIL, f"Applied filter {pattern}")
    return kept


def sort_matches(matches: List[str], method: Optional[str] = None, reverse: bool = False) -> List[str]:
    """Sorts alphabetically ('a'/'alpha') or by length ('l'/'len'), then optionally reverses.

    Length sorting is stable, so words of equal length keep discovery order.
    """
    matches = list(matches)
    if method in SORT_ALPHA:
        matches.sort()
        logger.log(DETAIL, "Sorted alphabetically")
    elif method in SORT_LENGTH:
        matches.sort(key=len)
        logger.log(DETAIL, "Sorted by length")
    if reverse:
        matches.reverse()
        logger.log(DETAIL, "Reversed sorting")
    return matches


def limit_matches(matches: List[str], limit: Optional[int]) -> List[str]:
    if limit and 0 < limit < len(matches):
        logger.log(DETAIL, f"Trimmed list to {limit}")
        return matches[:limit]
    return matches


def render(matches: List[str], as_json: bool = False) -> str:
    """Renders the words as a JSON array or one per line."""
    if as_json:
        return json.dumps(matches, ensure_ascii=False)
    return '\n'.join(matches)
