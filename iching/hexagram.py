"""
Hexagrams: a trigram above a trigram.

Line positions are numbered the traditional way, from 1 at the bottom of the
lower trigram to 6 at the top of the upper trigram:

    6  above.top
    5  above.middle
    4  above.bottom
    3  below.top
    2  below.middle
    1  below.bottom
"""

from __future__ import annotations

import random
import string
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .divination import DivinationMethod
from .line import Line
from .sequence import HexagramOrdering, TrigramPair, sequence_number, trigram_pair
from .sequence import symbol as pair_symbol
from .trigram import Trigram, TrigramName

LINE_COUNT = 6


@dataclass(frozen=True)
class Hexagram:
    above: Trigram
    below: Trigram

    @classmethod
    def generate_random(
        cls, method: DivinationMethod, rng: Optional[random.Random] = None
    ) -> "Hexagram":
        below = Trigram.generate_random(method, rng)
        above = Trigram.generate_random(method, rng)
        return cls(above, below)

    @classmethod
    def from_lines(cls, lines: List[Line]) -> "Hexagram":
        """Build a hexagram from six lines ordered bottom (position 1) to top."""
        if len(lines) != LINE_COUNT:
            raise ValueError(f"A hexagram needs {LINE_COUNT} lines, got {len(lines)}")
        l1, l2, l3, l4, l5, l6 = lines
        return cls(above=Trigram(l6, l5, l4), below=Trigram(l3, l2, l1))

    @classmethod
    def from_digits(cls, digits: str) -> "Hexagram":
        """
        Build a hexagram from a self-cast string of six digits 6-9,
        bottom line first (e.g. "789768").
        """
        digits = digits.strip()
        if len(digits) != LINE_COUNT or not all(d in string.digits for d in digits):
            raise ValueError(
                f"Expected {LINE_COUNT} digits between 6 and 9, got {digits!r}"
            )
        return cls.from_lines([Line.from_digit(int(d)) for d in digits])

    def to_digits(self) -> str:
        return "".join(str(int(line)) for line in self.lines)

    @classmethod
    def from_names(cls, above: TrigramName, below: TrigramName) -> "Hexagram":
        return cls(Trigram.from_name(above), Trigram.from_name(below))

    @classmethod
    def from_number(cls, number: int) -> "Hexagram":
        return cls.from_names(*trigram_pair(number))

    @property
    def lines(self) -> Tuple[Line, ...]:
        """The six lines, bottom (position 1) to top (position 6)."""
        return tuple(reversed(self.below.lines)) + tuple(reversed(self.above.lines))

    def trigram_names(self, with_changes: bool = False) -> TrigramPair:
        above, below = self.above, self.below
        if with_changes:
            above, below = above.settled(), below.settled()
        return above.classify(), below.classify()

    def sequence_number(
        self,
        with_changes: bool = False,
        ordering: HexagramOrdering = HexagramOrdering.KING_WEN,
    ) -> int:
        return sequence_number(self.trigram_names(with_changes), ordering)

    def symbol(self, with_changes: bool = False) -> str:
        return pair_symbol(self.trigram_names(with_changes))

    def changing_line_positions(self) -> List[int]:
        return [
            position
            for position, line in enumerate(self.lines, start=1)
            if line.is_changing()
        ]

    def settled(self) -> "Hexagram":
        return Hexagram(self.above.settled(), self.below.settled())

    def relating_hexagram(self) -> Optional["Hexagram"]:
        """The hexagram this one changes into, or None if no line is changing."""
        if not self.changing_line_positions():
            return None
        return self.settled()

    def nuclear_hexagram(self) -> "Hexagram":
        """
        The inner hexagram: lines 2-4 form its lower trigram and lines 3-5
        its upper trigram. Built from stable lines of the same orientation.
        """
        stable = [Line.from_parts(line.orientation, False) for line in self.lines]
        return Hexagram.from_lines(stable[1:4] + stable[2:5])

    def __str__(self) -> str:
        return "\n".join(str(line) for line in reversed(self.lines))
