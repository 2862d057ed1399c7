from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from .line import Line


class DivinationMethod(str, Enum):
    """How each line of a hexagram is generated."""
    # https://en.wikipedia.org/wiki/I_Ching_divination#Yarrow_stalks
    ANCIENT_YARROW_STALK = "ancient-yarrow-stalk"
    # https://en.wikipedia.org/wiki/I_Ching_divination#Coins
    COIN_TOSS = "coin-toss"

    def generate_line(self, rng: Optional[random.Random] = None) -> Line:
        if self is DivinationMethod.COIN_TOSS:
            return Line.generate_by_coin_toss(rng)
        return Line.generate_by_yarrow_stalks(rng)

    def __str__(self) -> str:
        return self.value
