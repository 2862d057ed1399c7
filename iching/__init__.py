"""
Divination using the I Ching.

The I Ching (a.k.a. the *Book of Changes*) is an ancient method of divination
based on cleromancy. Six numbers between 6 and 9 are generated in order to
create a hexagram, the meaning of which is contained in the I Ching book.

Example:

    hexagrams = HexagramJson.load()
    hexagram = Hexagram.generate_random(DivinationMethod.COIN_TOSS)
    info = hexagrams.get_by_number(hexagram.sequence_number())
"""

from . import config
from .divination import DivinationMethod
from .errors import IChingError, IntegerOutOfRange, RepositoryError
from .hexagram import Hexagram
from .line import Coin, Line, Orientation
from .reading import Diviner, Reading
from .repository import HexagramInfo, HexagramJson, HexagramRepository, LineMeaning
from .sequence import HexagramOrdering, king_wen_number, symbol, trigram_pair
from .trigram import Trigram, TrigramName

__version__ = config.APP_VERSION

__all__ = [
    "Coin",
    "DivinationMethod",
    "Diviner",
    "Hexagram",
    "HexagramInfo",
    "HexagramJson",
    "HexagramOrdering",
    "HexagramRepository",
    "IChingError",
    "IntegerOutOfRange",
    "Line",
    "LineMeaning",
    "Orientation",
    "Reading",
    "RepositoryError",
    "Trigram",
    "TrigramName",
    "king_wen_number",
    "symbol",
    "trigram_pair",
]
