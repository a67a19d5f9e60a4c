from __future__ import annotations
from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass(frozen=True)
class CopyTable:
    """
    Per-card copy counts, one slot per card position.

    Every card starts with one copy (the original). Winning card i with c
    matches adds its own copy count to positions i+1..i+c; positions past
    the last card are dropped.

    The array is mutated in place, so entries at or before the card being
    processed are final and entries after it can still grow. Slots hold
    Python ints (object dtype); counts grow geometrically and must not wrap.
    """

    counts: np.ndarray

    @staticmethod
    def standard(card_total: int) -> "CopyTable":
        if card_total < 0:
            raise ValueError(f"card_total must be >= 0, got {card_total}")
        return CopyTable(counts=np.ones(card_total, dtype=object))

    def __len__(self) -> int:
        return int(self.counts.shape[0])

    def copies_of(self, index: int) -> int:
        return int(self.counts[index])

    def propagate(self, index: int, match_count: int) -> int:
        """
        Add the copy count of ``index`` to the next ``match_count`` slots.

        Returns how many slots actually received copies.
        """
        if match_count <= 0:
            return 0
        add = self.counts[index]
        # numpy clamps the slice at the end of the table
        window = self.counts[index + 1 : index + 1 + match_count]
        window += add
        return int(window.shape[0])

    def total(self) -> int:
        return int(self.counts.sum())

    def as_list(self) -> List[int]:
        return [int(v) for v in self.counts]
