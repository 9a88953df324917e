"""CLI entrypoint for the word search solver."""

from __future__ import annotations

import argparse
import logging
import sys

from wordsearch.core.constants import DEFAULT_MIN_LETTERS
from wordsearch.core.exceptions import WordSearchError
from wordsearch.engine.search import SearchConfig, WordSearch
from wordsearch.utils.logger import configure_logging, get_logger, resolve_level
from wordsearch.utils.pretty import print_report


LOGGER = get_logger("wordsearch.cli")


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find every dictionary word hidden in a word search puzzle",
    )
    parser.add_argument("dictionary", type=str, help="Word list file (one word per line) or http(s) URL")
    parser.add_argument("puzzle", type=str, help="Puzzle file: '<rows> <cols>' header then space-separated letters")
    parser.add_argument(
        "min_letters",
        type=non_negative_int,
        nargs="?",
        default=DEFAULT_MIN_LETTERS,
        help=f"Minimum word length to report (default {DEFAULT_MIN_LETTERS})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of threads scanning row blocks",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Timeout in seconds when the dictionary is a URL",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default WARNING)",
    )
    parser.add_argument(
        "--memory",
        action="store_true",
        help="Trace allocations and report peak memory use",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(resolve_level(args.log_level, default=logging.WARNING))

    config = SearchConfig(
        dictionary_path=args.dictionary,
        puzzle_path=args.puzzle,
        min_length=args.min_letters,
        workers=args.workers,
        timeout_seconds=args.timeout,
        track_memory=args.memory,
    )
    try:
        result = WordSearch(config).run()
    except WordSearchError as exc:
        LOGGER.error("Search failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print_report(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
