"""Derived Anagram Chain Finder.

Finds the longest chains of words in a dictionary where each word is formed from the
previous one by inserting exactly one character and rearranging the letters, e.g.
`a -> at -> ate -> tear`.  Every longest chain starting from a chosen word (or any of
its anagrams) is listed.
"""

import argparse
import sys

from .solver import solver
from .solver.config import SolverConfig


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="anagramchain",
        description="Find the longest derived anagram chains in a word list.",
    )
    parser.add_argument(
        "dictionary",
        nargs="?",
        help="Path to the dictionary file, one word per line (prompted for if omitted)",
    )
    parser.add_argument(
        "start_word",
        nargs="?",
        help="Starting word (prompted for if omitted, unused with --survey)",
    )
    parser.add_argument(
        "--survey",
        action="store_true",
        help="Report the longest chains anywhere in the dictionary instead",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of worker processes for --survey (0 runs serially)",
    )
    return parser


def prompt(message: str) -> str:
    """Prompt for a value, keeping the first whitespace-delimited token of the answer."""
    tokens = input(message).split()
    if not tokens:
        raise ValueError(f"No input given for '{message.strip()}'")
    return tokens[0]


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the anagram chain finder."""
    args = create_parser().parse_args(argv)

    try:
        settings = SolverConfig()
        if args.workers is not None:
            settings = settings.model_copy(update={"max_workers": args.workers})

        dictionary = args.dictionary or prompt("Enter Dictionary File Path: ")
        if args.survey:
            solver.run_survey(dictionary, settings=settings)
            return 0
        start_word = args.start_word or prompt("Enter Starting Word: ")
        solver.run(dictionary, start_word, settings=settings)
    except (OSError, ValueError, EOFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
