#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
unscramble - take some letters and arrange them in different orders and find the words

Loads a word list into a Trie, then tries every ordering of every subset
of the letters, pruning as soon as no dictionary word starts with the
letters so far.

Examples:
    unscramble -l tacos --min 3 -s len -r
    echo tacos | unscramble --filter '^c' -j
"""
import argparse
import json
import logging
import re
import sys
import time
from pathlib import Path
from typing import List, Optional

from anagram_solver import AnagramSolver
from colour_log import configure_logging
from constants import (DEFAULT_LOG_LEVEL, DEFAULT_WORD_FILE, DETAIL, FATAL_EXIT_CODE,
                       MAX_LOG_LEVEL, MIN_LOG_LEVEL, SORT_METHODS, VERBOSE, VERSION)
from results import filter_matches, limit_matches, render, sort_matches
from wordlist import decode_terminator, has_control, read_words, strip_control

logger = logging.getLogger(__name__)


def letters_from_stdin(stdin) -> Optional[str]:
    """Last line piped on stdin, without control characters. None for a terminal."""
    if stdin is None or stdin.isatty():
        return None
    letters = None
    try:
        for line in stdin:
            letters = strip_control(line)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading stdin {e}", file=sys.stderr)
        return None
    return letters


def _letters(value: str) -> str:
    if has_control(value):
        raise argparse.ArgumentTypeError("letters must not contain control characters")
    return value


def _log_level(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value}")
    if not MIN_LOG_LEVEL <= number <= MAX_LOG_LEVEL:
        raise argparse.ArgumentTypeError(f"number must be between {MIN_LOG_LEVEL} and {MAX_LOG_LEVEL}")
    return number


def build_parser(stdin_letters: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='unscramble',
        description="take some letters and arrange them in different orders and find the words",
    )
    parser.add_argument('-v', '--version', action='version', version=VERSION, help="Current version")

    # Input options
    parser.add_argument('-l', '--letters', type=_letters, default=stdin_letters,
                        required=stdin_letters is None, help="Letters")
    parser.add_argument('-t', '--terminator', type=decode_terminator,
                        help="Any existing terminating characters on word files lines, Ex. \\r")
    parser.add_argument('-f', '--file', type=Path, default=Path.cwd() / DEFAULT_WORD_FILE,
                        help="Words file")

    # Output options
    parser.add_argument('-s', '--sort', choices=SORT_METHODS, help="Sorting method")
    parser.add_argument('-r', '--sort-reverse', action='store_true', help="Sort reversed")
    parser.add_argument('--limit', type=int, default=0, help="Limit to x results")
    parser.add_argument('--min', type=int, default=0, help="Length of the smallest word")
    parser.add_argument('--max', type=int, default=0, help="Length of the largest word")
    parser.add_argument('-j', '--json', action='store_true', help="Json output")
    parser.add_argument('--filter', help="Filter output with regex, Ex ^a.*[ety]$")
    parser.add_argument('--log-level', type=_log_level, default=DEFAULT_LOG_LEVEL,
                        help="Set the logging level")
    return parser


class Stopwatch:
    """Logs elapsed time since start at DETAIL level."""

    def __init__(self):
        self.start = time.perf_counter()

    def lap(self, label: str, detail: str = ''):
        elapsed = (time.perf_counter() - self.start) * 1000
        if detail:
            label = f"{label:<15} {detail:<44}"
        logger.log(DETAIL, f"{label:<60} {elapsed:8.1f}ms")


def fatal(message: str) -> int:
    logger.critical(message)
    return FATAL_EXIT_CODE


def main(argv: Optional[List[str]] = None, stdin=None) -> int:
    """Main function to run the unscrambler."""
    watch = Stopwatch()
    if stdin is None:
        stdin = sys.stdin

    args = build_parser(letters_from_stdin(stdin)).parse_args(argv)
    configure_logging(args.log_level)

    for name, value in vars(args).items():
        logger.log(DETAIL, f"{name}: {value!r}")
    watch.lap("Loaded options:")
    logger.log(DETAIL, "Debug ON")
    logger.info("Starting")

    try:
        words = read_words(args.file, args.terminator)
    except OSError as e:
        return fatal(f"Unable to read word file {args.file}: {e}")
    watch.lap("Loaded file:", str(args.file))

    solver = AnagramSolver(words)
    watch.lap("Built word tree:")
    if logger.isEnabledFor(VERBOSE):
        try:
            logger.log(VERBOSE, json.dumps(solver.trie.to_dict(), indent=2, ensure_ascii=False))
        except RecursionError:
            logger.warning("Word tree too deep to dump as JSON")

    matches = solver.find_words(args.letters, args.min, args.max)
    watch.lap("Found matches:")

    if args.filter:
        try:
            matches = filter_matches(matches, args.filter)
        except re.error as e:
            return fatal(f"Invalid filter {args.filter!r}: {e}")
    matches = sort_matches(matches, args.sort, args.sort_reverse)
    matches = limit_matches(matches, args.limit)
    watch.lap("Sorted and filtered:")

    logger.info(f"Displaying {len(matches):,} words")
    logger.info("----")
    output = render(matches, args.json)
    if output:
        print(output)
    logger.info("----")
    logger.info("Done")
    watch.lap("Printed words:")
    return 0


if __name__ == '__main__':
    sys.exit(main())
