from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from scratchcards.card import Card

logger = logging.getLogger(__name__)


class MalformedInputError(ValueError):
    """A card line that does not have the ``label: winning | drawn`` shape."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}: {line!r}")


def _parse_numbers(text: str, line_no: int, line: str) -> Tuple[int, ...]:
    numbers = []
    # split() with no separator collapses runs of whitespace
    for token in text.split():
        if not (token.isascii() and token.isdigit()):
            raise MalformedInputError(line_no, line, f"not a number: {token!r}")
        numbers.append(int(token))
    return tuple(numbers)


def parse_line(line: str, index: int, line_no: int | None = None) -> Card:
    """
    Parse ``Card N: a b c | x y z`` into a Card.

    The label before ``:`` is ignored. ``line_no`` is only used in error
    messages and defaults to ``index + 1``.
    """
    if line_no is None:
        line_no = index + 1
    line = line.rstrip("\r\n")

    halves = line.split("|")
    if len(halves) != 2:
        reason = "missing '|' separator" if len(halves) < 2 else "more than one '|' separator"
        raise MalformedInputError(line_no, line, reason)
    left, right = halves

    _label, sep, winning_text = left.partition(":")
    if not sep:
        raise MalformedInputError(line_no, line, "missing ':' after card label")

    winning = _parse_numbers(winning_text, line_no, line)
    drawn = _parse_numbers(right, line_no, line)
    return Card(index=index, winning=frozenset(winning), drawn=drawn)


def parse_lines(lines: Iterable[str]) -> List[Card]:
    """
    Parse every line, numbering cards from 0 in input order.

    Blank lines are only allowed at the end of the input; a blank line
    followed by another card is malformed. Stops at the first malformed
    line; nothing is returned for a partial parse.
    """
    lines = list(lines)
    while lines and not lines[-1].strip():
        lines.pop()

    cards: List[Card] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            raise MalformedInputError(line_no, line, "blank line between cards")
        card = parse_line(line, index=len(cards), line_no=line_no)
        logger.debug(
            "card %d: %d winning, %d drawn, %d matches",
            card.index + 1,
            len(card.winning),
            len(card.drawn),
            card.match_count,
        )
        cards.append(card)
    return cards


def read_card_file(path: str | Path) -> List[Card]:
    """
    Read a UTF-8 card file and parse it.

    The file is fully read and closed before parsing starts. Missing or
    unreadable paths raise the usual OSError subclasses.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        lines = fh.read().splitlines()
    logger.debug("read %d lines from %s", len(lines), path)
    return parse_lines(lines)
