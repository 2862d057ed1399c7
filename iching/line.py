"""
Lines are the building blocks of trigrams and hexagrams.

A line is broken (yin) or unbroken (yang) and may be "changing" (old yin,
old yang). The numeric values follow the casting tradition:

    6 = old yin     (broken, changing)
    7 = young yang  (unbroken)
    8 = young yin   (broken)
    9 = old yang    (unbroken, changing)
"""

from __future__ import annotations

import random
from enum import Enum, IntEnum
from typing import Optional

from .errors import IntegerOutOfRange


class Orientation(Enum):
    BROKEN = "broken"
    UNBROKEN = "unbroken"


class Coin(IntEnum):
    """A single coin; heads counts 3 and tails counts 2."""
    TAILS = 2
    HEADS = 3

    @classmethod
    def toss(cls, rng: Optional[random.Random] = None) -> "Coin":
        rng = rng if rng is not None else random
        return cls.HEADS if rng.random() < 0.5 else cls.TAILS


class Line(IntEnum):
    """Line values as produced by the three-coin method."""
    OLD_YIN = 6      # ⚋ → ⚊ (changing yin to yang)
    YOUNG_YANG = 7   # ⚊ (stable yang)
    YOUNG_YIN = 8    # ⚋ (stable yin)
    OLD_YANG = 9     # ⚊ → ⚋ (changing yang to yin)

    @classmethod
    def from_digit(cls, n: int) -> "Line":
        return cls(IntegerOutOfRange.check(n, 6, 9, "Line"))

    @classmethod
    def from_parts(cls, orientation: Orientation, changing: bool) -> "Line":
        return _BY_PARTS[(orientation, changing)]

    @classmethod
    def generate_by_coin_toss(cls, rng: Optional[random.Random] = None) -> "Line":
        """
        Toss three coins and sum them (6-9).
        Each line value therefore occurs with probability 1/8, 3/8, 3/8, 1/8
        for 6, 7, 8, 9.
        """
        total = sum(Coin.toss(rng) for _ in range(3))
        return cls(total)

    @classmethod
    def generate_by_yarrow_stalks(cls, rng: Optional[random.Random] = None) -> "Line":
        """
        Draw a line with the probabilities of the yarrow stalk procedure:
        old yin 1/16, young yin 7/16, old yang 3/16, young yang 5/16.
        """
        rng = rng if rng is not None else random
        return rng.choices(_YARROW_LINES, weights=_YARROW_WEIGHTS, k=1)[0]

    @property
    def orientation(self) -> Orientation:
        if self in (Line.OLD_YIN, Line.YOUNG_YIN):
            return Orientation.BROKEN
        return Orientation.UNBROKEN

    def is_broken(self) -> bool:
        return self.orientation is Orientation.BROKEN

    def is_changing(self) -> bool:
        return self in (Line.OLD_YIN, Line.OLD_YANG)

    def settle(self) -> "Line":
        """Resolve a changing line into the stable line it changes into."""
        return _SETTLED[self]

    def __str__(self) -> str:
        return _ASCII[self]


_BY_PARTS = {
    (Orientation.BROKEN, True): Line.OLD_YIN,
    (Orientation.UNBROKEN, False): Line.YOUNG_YANG,
    (Orientation.BROKEN, False): Line.YOUNG_YIN,
    (Orientation.UNBROKEN, True): Line.OLD_YANG,
}

_SETTLED = {
    Line.OLD_YIN: Line.YOUNG_YANG,
    Line.YOUNG_YANG: Line.YOUNG_YANG,
    Line.YOUNG_YIN: Line.YOUNG_YIN,
    Line.OLD_YANG: Line.YOUNG_YIN,
}

_ASCII = {
    Line.OLD_YIN: "-X-",
    Line.YOUNG_YANG: "---",
    Line.YOUNG_YIN: "- -",
    Line.OLD_YANG: "-O-",
}

_YARROW_LINES = (Line.OLD_YIN, Line.YOUNG_YIN, Line.OLD_YANG, Line.YOUNG_YANG)
_YARROW_WEIGHTS = (1, 7, 3, 5)
