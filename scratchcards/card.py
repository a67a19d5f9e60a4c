from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Tuple


def points_for(match_count: int) -> int:
    if match_count <= 0:
        return 0
    return 1 << (match_count - 1)


@dataclass(frozen=True)
class Card:
    """
    One scratch card line, after parsing.

    - index: 0-based position in the input (blank lines are not counted)
    - winning: the winning numbers, as a set
    - drawn: the numbers on the card, in the order they were written
    """

    index: int
    winning: FrozenSet[int]
    drawn: Tuple[int, ...]

    @property
    def matches(self) -> FrozenSet[int]:
        return self.winning.intersection(self.drawn)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def points(self) -> int:
        return points_for(self.match_count)
