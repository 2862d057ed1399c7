"""
Hexagram sequence numbers.

KING_WEN_SEQUENCE maps every (above, below) trigram pair to its number in the
King Wen sequence. The unicode hexagram block (U+4DC0..U+4DFF) follows the
same order, so the glyph of hexagram n is chr(0x4DC0 + n - 1).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from .errors import IntegerOutOfRange
from .trigram import TrigramName

TrigramPair = Tuple[TrigramName, TrigramName]

HEXAGRAM_COUNT = 64
_SYMBOL_BASE = 0x4DC0


class HexagramOrdering(Enum):
    """Numbering schemes for the 64 hexagrams. Only King Wen is provided."""
    KING_WEN = "king-wen"


_Q = TrigramName.QIAN
_K = TrigramName.KUN
_Z = TrigramName.ZHEN
_A = TrigramName.KAN
_G = TrigramName.GEN
_X = TrigramName.XUN
_L = TrigramName.LI
_D = TrigramName.DUI

# (above, below) -> King Wen number
KING_WEN_SEQUENCE: Dict[TrigramPair, int] = {
    (_Q, _Q): 1,  (_Q, _K): 12, (_Q, _Z): 25, (_Q, _A): 6,
    (_Q, _G): 33, (_Q, _X): 44, (_Q, _L): 13, (_Q, _D): 10,
    (_K, _Q): 11, (_K, _K): 2,  (_K, _Z): 24, (_K, _A): 7,
    (_K, _G): 15, (_K, _X): 46, (_K, _L): 36, (_K, _D): 19,
    (_Z, _Q): 34, (_Z, _K): 16, (_Z, _Z): 51, (_Z, _A): 40,
    (_Z, _G): 62, (_Z, _X): 32, (_Z, _L): 55, (_Z, _D): 54,
    (_A, _Q): 5,  (_A, _K): 8,  (_A, _Z): 3,  (_A, _A): 29,
    (_A, _G): 39, (_A, _X): 48, (_A, _L): 63, (_A, _D): 60,
    (_G, _Q): 26, (_G, _K): 23, (_G, _Z): 27, (_G, _A): 4,
    (_G, _G): 52, (_G, _X): 18, (_G, _L): 22, (_G, _D): 41,
    (_X, _Q): 9,  (_X, _K): 20, (_X, _Z): 42, (_X, _A): 59,
    (_X, _G): 53, (_X, _X): 57, (_X, _L): 37, (_X, _D): 61,
    (_L, _Q): 14, (_L, _K): 35, (_L, _Z): 21, (_L, _A): 64,
    (_L, _G): 56, (_L, _X): 50, (_L, _L): 30, (_L, _D): 38,
    (_D, _Q): 43, (_D, _K): 45, (_D, _Z): 17, (_D, _A): 47,
    (_D, _G): 31, (_D, _X): 28, (_D, _L): 49, (_D, _D): 58,
}

_PAIRS_BY_NUMBER: Dict[int, TrigramPair] = {
    number: pair for pair, number in KING_WEN_SEQUENCE.items()
}


def king_wen_number(pair: TrigramPair) -> int:
    return KING_WEN_SEQUENCE[pair]


def number_symbol(number: int) -> str:
    _check_number(number)
    return chr(_SYMBOL_BASE + number - 1)


def symbol(pair: TrigramPair) -> str:
    return number_symbol(king_wen_number(pair))


def trigram_pair(number: int) -> TrigramPair:
    """The (above, below) trigram names of the hexagram with this number."""
    _check_number(number)
    return _PAIRS_BY_NUMBER[number]


def sequence_number(
    pair: TrigramPair, ordering: HexagramOrdering = HexagramOrdering.KING_WEN
) -> int:
    if ordering is HexagramOrdering.KING_WEN:
        return king_wen_number(pair)
    raise NotImplementedError(f"Unsupported hexagram ordering: {ordering}")


def _check_number(number: int) -> None:
    IntegerOutOfRange.check(number, 1, HEXAGRAM_COUNT, "Hexagram")
