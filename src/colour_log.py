# -*- coding: utf-8 -*-
import logging
import sys
from typing import Dict

import colorama
from colorama import Back, Fore, Style

from constants import DETAIL

# Lower bound of each level band -> colour
LEVEL_COLOURS: Dict[int, str] = {
    10: Fore.LIGHTBLACK_EX,
    20: '',
    30: Fore.GREEN,
    40: Fore.LIGHTYELLOW_EX,
    50: Back.RED + Fore.LIGHTWHITE_EX,
}


def colour_for(levelno: int) -> str:
    """Colour of the level band (10s, 20s, ...) that ``levelno`` falls in."""
    return LEVEL_COLOURS.get(levelno // 10 * 10, LEVEL_COLOURS[20])


class ColourFormatter(logging.Formatter):
    """Wraps each message in the colour of its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        return colour_for(record.levelno) + message + Style.RESET_ALL


def configure_logging(level: int = logging.INFO, stream=None):
    colorama.just_fix_windows_console()
    logging.addLevelName(DETAIL, 'DETAIL')
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ColourFormatter('%(message)s'))
    logging.basicConfig(level=level, handlers=[handler], force=True)
