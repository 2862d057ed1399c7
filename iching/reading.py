from __future__ import annotations

import hashlib
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .divination import DivinationMethod
from .hexagram import Hexagram
from .repository import HexagramInfo, HexagramRepository, LineMeaning

logger = logging.getLogger(__name__)


@dataclass
class Reading:
    """Complete I-Ching reading result."""
    question: Optional[str]
    timestamp: str
    seed_hash: str
    method: Optional[DivinationMethod]

    # Primary hexagram
    hexagram: Hexagram
    primary_info: HexagramInfo

    # Changing lines
    changing_positions: List[int] = field(default_factory=list)
    changing_line_meanings: List[LineMeaning] = field(default_factory=list)

    # Relating hexagram (if lines are changing)
    relating_info: Optional[HexagramInfo] = None

    # Nuclear hexagram
    nuclear_info: Optional[HexagramInfo] = None

    @property
    def relating_hexagram(self) -> Optional[Hexagram]:
        return self.hexagram.relating_hexagram()


def create_seed(question: str, timestamp: str) -> Tuple[int, str]:
    """Creates the generator seed for a question asked at a moment, and its hex digest."""
    seed_bytes = hashlib.sha256(f"{question}|{timestamp}".encode("utf-8")).digest()
    return int.from_bytes(seed_bytes, "big"), seed_bytes.hex()


class Diviner:
    """Casts hexagrams and assembles readings from a repository of texts."""

    def __init__(
        self,
        repository: HexagramRepository,
        method: DivinationMethod = DivinationMethod.ANCIENT_YARROW_STALK,
        show_nuclear: bool = True,
    ):
        self.repository = repository
        self.method = method
        self.show_nuclear = show_nuclear

    def cast(self, question: Optional[str] = None, rng: Optional[random.Random] = None) -> Reading:
        """
        Cast a new hexagram.
        Without an injected generator, the lines are drawn from a generator seeded
        with the question and the current UTC time.
        """
        timestamp = _now()
        seed_hash = ""
        if rng is None:
            seed, seed_hex = create_seed(question or "", timestamp)
            seed_hash = seed_hex[:16]
            rng = random.Random(seed)

        hexagram = Hexagram.generate_random(self.method, rng)
        logger.debug("Cast %s with %s", hexagram.to_digits(), self.method)
        return self.read(hexagram, question, timestamp=timestamp, seed_hash=seed_hash, method=self.method)

    def read(
        self,
        hexagram: Hexagram,
        question: Optional[str] = None,
        timestamp: Optional[str] = None,
        seed_hash: str = "",
        method: Optional[DivinationMethod] = None,
    ) -> Reading:
        """Look up the texts for an already cast hexagram."""
        primary_info = self.repository.get_info_for_hexagram(hexagram)

        changing_positions = hexagram.changing_line_positions()
        changing_line_meanings = primary_info.line_meanings(changing_positions)

        relating_info = None
        relating = hexagram.relating_hexagram()
        if relating is not None:
            relating_info = self.repository.get_info_for_hexagram(relating)

        nuclear_info = None
        if self.show_nuclear:
            nuclear_info = self.repository.get_info_for_hexagram(hexagram.nuclear_hexagram())

        return Reading(
            question=question,
            timestamp=timestamp or _now(),
            seed_hash=seed_hash,
            method=method,
            hexagram=hexagram,
            primary_info=primary_info,
            changing_positions=changing_positions,
            changing_line_meanings=changing_line_meanings,
            relating_info=relating_info,
            nuclear_info=nuclear_info,
        )


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")
