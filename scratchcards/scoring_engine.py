from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from scratchcards.card import Card
from scratchcards.card_parser import read_card_file
from scratchcards.copy_table import CopyTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardResult:
    index: int
    match_count: int
    points: int
    copies: int


@dataclass(frozen=True)
class ScoreOutput:
    points_sum: int
    card_count: int
    cards: Tuple[CardResult, ...] = ()
    notes: Tuple[str, ...] = ()

    def report_lines(self) -> Tuple[str, str]:
        return (f"total = {self.points_sum} points", f"total cards= {self.card_count}")


class ScoringEngine:
    """
    Single forward pass over the cards.

    For each card, in order:
      - points: 0 without matches, otherwise 2^(matches - 1)
      - copies: the card's slot in the copy table is already final, because
        copies only ever flow forward; that count is pushed onto the next
        `matches` cards before moving on
      - totals: points and final copies are added to the running sums

    Both totals are built strictly left to right.
    """

    def compute(self, cards: Sequence[Card]) -> ScoreOutput:
        table = CopyTable.standard(len(cards))
        points_sum = 0
        card_count = 0
        results: List[CardResult] = []
        dropped = 0

        for pos, card in enumerate(cards):
            c = card.match_count
            points = card.points

            reached = table.propagate(pos, c)
            if reached < c:
                dropped += c - reached
            if c:
                logger.debug(
                    "card %d: %d matches, pushed %d copies to %d later cards",
                    pos + 1,
                    c,
                    table.copies_of(pos),
                    reached,
                )

            copies = table.copies_of(pos)
            card_count += copies
            points_sum += points
            results.append(CardResult(index=pos, match_count=c, points=points, copies=copies))

        notes = []
        if not cards:
            notes.append("No cards in input")
        if dropped:
            notes.append(f"{dropped} copy slot(s) past the last card were dropped")

        return ScoreOutput(
            points_sum=points_sum,
            card_count=card_count,
            cards=tuple(results),
            notes=tuple(notes),
        )


def score_file(path: str | Path, engine: ScoringEngine | None = None) -> ScoreOutput:
    cards = read_card_file(path)
    return (engine or ScoringEngine()).compute(cards)
