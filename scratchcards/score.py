from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from scratchcards.card_parser import MalformedInputError
from scratchcards.scoring_engine import ScoreOutput, ScoringEngine, score_file

USAGE_MESSAGE = "please give a filename as parameter"
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 2


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def print_details(out: ScoreOutput) -> None:
    for r in out.cards:
        print(f"card {r.index + 1}: matches={r.match_count} points={r.points} copies={r.copies}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scratchcards",
        description="Score a scratch card file: total points and total cards won through copies.",
    )
    parser.add_argument("file", nargs="?", help="Card file, one 'Card N: winning | drawn' line per card.")
    parser.add_argument("--details", action="store_true", help="Print matches, points and copies for every card.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.file is None:
        print(USAGE_MESSAGE)
        return EXIT_USAGE

    setup_logging(args.verbose)

    try:
        out = score_file(args.file, ScoringEngine())
    except (OSError, UnicodeDecodeError, MalformedInputError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.details:
        print_details(out)
    for line in out.report_lines():
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
