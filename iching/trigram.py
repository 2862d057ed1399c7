"""
Trigrams (八卦) and their names.

A Trigram keeps its three lines from top to bottom. The name of a trigram
depends only on whether each line is broken; changing flags are ignored.

    ☰ Qian  ---    ☱ Dui   - -    ☲ Li    ---    ☳ Zhen  - -
            ---            ---            - -            - -
            ---            ---            ---            ---

    ☴ Xun   ---    ☵ Kan   - -    ☶ Gen   ---    ☷ Kun   - -
            ---            ---            - -            - -
            - -            - -            - -            - -
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .divination import DivinationMethod
from .errors import IntegerOutOfRange
from .line import Line, Orientation

_B = Orientation.BROKEN
_U = Orientation.UNBROKEN


@dataclass(frozen=True)
class TrigramInfo:
    symbol: str
    romanized: str
    chinese: str
    english_translation: str
    attribute: str
    image: str
    family_relationship: str
    pattern: Tuple[Orientation, Orientation, Orientation]  # top to bottom


class TrigramName(IntEnum):
    """The eight trigrams, valued by their rank in the Bagua numbering."""
    QIAN = 1
    DUI = 2
    LI = 3
    ZHEN = 4
    XUN = 5
    KAN = 6
    GEN = 7
    KUN = 8

    @classmethod
    def from_rank(cls, n: int) -> "TrigramName":
        return cls(IntegerOutOfRange.check(n, 1, 8, "Trigram"))

    @classmethod
    def from_orientations(
        cls, top: Orientation, middle: Orientation, bottom: Orientation
    ) -> "TrigramName":
        return _BY_PATTERN[(top, middle, bottom)]

    @property
    def info(self) -> TrigramInfo:
        return TRIGRAM_INFO[self]

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def symbol(self) -> str:
        return self.info.symbol

    @property
    def romanized(self) -> str:
        return self.info.romanized

    @property
    def chinese(self) -> str:
        return self.info.chinese

    @property
    def english_translation(self) -> str:
        return self.info.english_translation

    @property
    def attribute(self) -> str:
        return self.info.attribute

    @property
    def image(self) -> str:
        return self.info.image

    @property
    def family_relationship(self) -> str:
        return self.info.family_relationship

    @property
    def pattern(self) -> Tuple[Orientation, Orientation, Orientation]:
        return self.info.pattern

    def describe(self) -> str:
        return "\n".join([
            f"{self.symbol} (No. {self.rank})",
            f"{self.romanized} - {self.english_translation}",
            "",
            f"Attribute: {self.attribute}",
            f"Image in nature: {self.image}",
            f"Family Relationship: {self.family_relationship}",
        ])

    def __str__(self) -> str:
        return self.name.capitalize()


TRIGRAM_INFO = {
    TrigramName.QIAN: TrigramInfo("☰", "Qián", "乾", "The Creative", "strong",
                                  "heaven", "father", (_U, _U, _U)),
    TrigramName.DUI: TrigramInfo("☱", "Duì", "兌", "The Joyous", "joyful",
                                 "lake", "third daughter", (_B, _U, _U)),
    TrigramName.LI: TrigramInfo("☲", "Lí", "離", "The Clinging", "light-giving",
                                "fire", "second daughter", (_U, _B, _U)),
    TrigramName.ZHEN: TrigramInfo("☳", "Zhèn", "震", "The Arousing", "inciting, movement",
                                  "thunder", "first son", (_B, _B, _U)),
    TrigramName.XUN: TrigramInfo("☴", "Xùn", "巽", "The Gentle", "penetrating",
                                 "wind, wood", "first daughter", (_U, _U, _B)),
    TrigramName.KAN: TrigramInfo("☵", "Kǎn", "坎", "The Abysmal", "dangerous",
                                 "water", "second son", (_B, _U, _B)),
    TrigramName.GEN: TrigramInfo("☶", "Gèn", "艮", "Keeping Still", "resting",
                                 "mountain", "third son", (_U, _B, _B)),
    TrigramName.KUN: TrigramInfo("☷", "Kūn", "坤", "The Receptive", "devoted, yielding",
                                 "earth", "mother", (_B, _B, _B)),
}

# All eight orientation patterns are present, so classification is total.
_BY_PATTERN = {info.pattern: name for name, info in TRIGRAM_INFO.items()}


@dataclass(frozen=True)
class Trigram:
    """Three lines, listed from the top line to the bottom line."""
    top: Line
    middle: Line
    bottom: Line

    @classmethod
    def generate_random(
        cls, method: DivinationMethod, rng: Optional[random.Random] = None
    ) -> "Trigram":
        # Lines are cast from the bottom up.
        bottom = method.generate_line(rng)
        middle = method.generate_line(rng)
        top = method.generate_line(rng)
        return cls(top, middle, bottom)

    @classmethod
    def from_name(cls, name: TrigramName) -> "Trigram":
        stable = {_B: Line.YOUNG_YIN, _U: Line.YOUNG_YANG}
        return cls(*(stable[orientation] for orientation in name.pattern))

    @classmethod
    def from_rank(cls, n: int) -> "Trigram":
        return cls.from_name(TrigramName.from_rank(n))

    @property
    def lines(self) -> Tuple[Line, Line, Line]:
        return (self.top, self.middle, self.bottom)

    def classify(self) -> TrigramName:
        return TrigramName.from_orientations(
            self.top.orientation, self.middle.orientation, self.bottom.orientation
        )

    def is_changing(self) -> bool:
        return any(line.is_changing() for line in self.lines)

    def settled(self) -> "Trigram":
        return Trigram(self.top.settle(), self.middle.settle(), self.bottom.settle())

    def __str__(self) -> str:
        return "\n".join(str(line) for line in self.lines)
