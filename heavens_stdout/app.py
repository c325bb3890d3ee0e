"""Command line entry point: let the heavens talk, or search their messages."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from .generator import DEFAULT_WORDSET_DIR, Generator
from .search import ParallelSearch, format_result, normalize_query
from .talk import TYPING_SPEED, type_out

SEARCHING = "Searching in gods messages..."


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with a ``talk`` mode (the default) and a ``search`` mode."""
    parser = argparse.ArgumentParser(
        prog="heavens_stdout",
        description="Listen to what the heavens have to say.",
    )
    parser.set_defaults(mode="talk", wordset=DEFAULT_WORDSET_DIR, speed=TYPING_SPEED, seed=None)
    modes = parser.add_subparsers(dest="mode")

    talk = modes.add_parser("talk", help="let the heavens speak a few sentences")
    talk.add_argument(
        "--wordset",
        type=Path,
        default=DEFAULT_WORDSET_DIR,
        help="directory holding the wordset dictionary JSON files",
    )
    talk.add_argument(
        "--speed",
        type=float,
        default=TYPING_SPEED,
        help="characters typed per second",
    )
    talk.add_argument("--seed", type=int, default=None, help="seed for reproducible speech")

    search = modes.add_parser("search", help="find a string in the heavens' endless letters")
    search.add_argument("query", nargs="+", help="text to look for (letters a-z)")
    search.add_argument("--workers", type=int, default=None, help="number of parallel searches")
    return parser


def _talk(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    generator = Generator.from_directory(args.wordset, rng)
    type_out(generator.generate_random_sentences(), sys.stdout, args.speed)
    sys.stdout.write("\n")
    return 0


def _search(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    query = normalize_query(" ".join(args.query))
    try:
        searcher = ParallelSearch(args.workers)
    except ValueError as error:
        parser.error(str(error))
    print(SEARCHING, flush=True)
    try:
        result = searcher.run(query)
    except ValueError as error:
        parser.error(str(error))
    if result is None:
        return 1
    print(format_result(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the program with ``argv`` (defaults to the process arguments)."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.mode == "search":
        return _search(args, parser)
    try:
        return _talk(args)
    except ValueError as error:
        parser.error(str(error))
    return 2