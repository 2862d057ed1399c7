"""
Hexagram reference texts (names, judgements, images and line meanings).

A repository is built fully loaded: HexagramJson.load() reads and validates
the JSON data set and returns a ready-to-use, immutable repository.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

from . import config
from .errors import IntegerOutOfRange, RepositoryError
from .hexagram import LINE_COUNT, Hexagram
from .sequence import HEXAGRAM_COUNT, HexagramOrdering, king_wen_number, number_symbol
from .trigram import TrigramName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineMeaning:
    """The meaning of a changing line at a position (1 = bottom line)."""
    position: int
    meaning: str


@dataclass(frozen=True)
class HexagramInfo:
    number: int
    english_name: str
    chinese_name: str
    pinyin: str
    above: TrigramName
    below: TrigramName
    judgement: str
    images: str
    lines: Tuple[LineMeaning, ...]

    @property
    def symbol(self) -> str:
        return number_symbol(self.number)

    @property
    def hexagram(self) -> Hexagram:
        return Hexagram.from_names(self.above, self.below)

    def line_meanings(self, positions: Iterable[int]) -> List[LineMeaning]:
        wanted = set(positions)
        return [line for line in self.lines if line.position in wanted]

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "HexagramInfo":
        try:
            name = record["name"]
            trigrams = record["trigrams"]
            return cls(
                number=int(record["number"]),
                english_name=name["english"],
                chinese_name=name["chinese"],
                pinyin=name["pinyin"],
                above=TrigramName.from_rank(int(trigrams["above"])),
                below=TrigramName.from_rank(int(trigrams["below"])),
                judgement=record["judgement"],
                images=record["images"],
                lines=tuple(
                    LineMeaning(position=int(line["position"]), meaning=line["meaning"])
                    for line in record["lines"]
                ),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(f"Malformed hexagram record {record!r:.60}: {e}") from e


class HexagramRepository(Protocol):
    """Anything that can supply reference texts for hexagrams."""

    @property
    def ordering(self) -> HexagramOrdering: ...

    def get_by_number(self, number: int) -> Optional[HexagramInfo]: ...

    def get_info_for_hexagram(
        self, hexagram: Hexagram, with_changes: bool = False
    ) -> HexagramInfo: ...


class HexagramJson:
    """Hexagram texts loaded from a JSON file, numbered by the King Wen sequence."""

    def __init__(
        self,
        entries: Sequence[HexagramInfo],
        ordering: HexagramOrdering = HexagramOrdering.KING_WEN,
    ):
        self._ordering = ordering
        self._by_number: Dict[int, HexagramInfo] = _validate(entries)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "HexagramJson":
        json_path = Path(path) if path is not None else config.HEXAGRAM_DATA_PATH
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RepositoryError(f"Failed to load hexagram data from {json_path}: {e}") from e

        if not isinstance(records, list):
            raise RepositoryError(f"Hexagram data in {json_path} must be a JSON list")

        repository = cls([HexagramInfo.from_record(record) for record in records])
        logger.debug("Loaded %d hexagrams from %s", len(repository), json_path)
        return repository

    @property
    def ordering(self) -> HexagramOrdering:
        return self._ordering

    def get_by_number(self, number: int) -> Optional[HexagramInfo]:
        IntegerOutOfRange.check(number, 1, HEXAGRAM_COUNT, "Hexagram")
        return self._by_number.get(number)

    def get_info_for_hexagram(
        self, hexagram: Hexagram, with_changes: bool = False
    ) -> HexagramInfo:
        return self._by_number[hexagram.sequence_number(with_changes, self._ordering)]

    def __iter__(self):
        return iter(self._by_number[n] for n in sorted(self._by_number))

    def __len__(self) -> int:
        return len(self._by_number)


def _validate(entries: Sequence[HexagramInfo]) -> Dict[int, HexagramInfo]:
    by_number: Dict[int, HexagramInfo] = {}
    for info in entries:
        if info.number in by_number:
            raise RepositoryError(f"Hexagram No. {info.number} appears more than once")
        expected = king_wen_number((info.above, info.below))
        if info.number != expected:
            raise RepositoryError(
                f"Hexagram No. {info.number} has trigrams {info.above} over {info.below}, "
                f"which is No. {expected}"
            )
        positions = sorted(line.position for line in info.lines)
        if positions != list(range(1, LINE_COUNT + 1)):
            raise RepositoryError(
                f"Hexagram No. {info.number} needs one meaning for each line 1-{LINE_COUNT}"
            )
        by_number[info.number] = info

    if len(by_number) != HEXAGRAM_COUNT:
        missing = sorted(set(range(1, HEXAGRAM_COUNT + 1)) - set(by_number))
        raise RepositoryError(f"Hexagram data is incomplete, missing {missing}")
    return by_number
