import itertools
import random

import pytest

from iching.divination import DivinationMethod
from iching.errors import IntegerOutOfRange
from iching.line import Line, Orientation
from iching.trigram import Trigram, TrigramName

YANG = Line.YOUNG_YANG
YIN = Line.YOUNG_YIN


def test_bagua_ranks():
    assert [name.rank for name in (
        TrigramName.QIAN, TrigramName.DUI, TrigramName.LI, TrigramName.ZHEN,
        TrigramName.XUN, TrigramName.KAN, TrigramName.GEN, TrigramName.KUN,
    )] == list(range(1, 9))


@pytest.mark.parametrize("rank", range(1, 9))
def test_rank_round_trip(rank):
    trigram = Trigram.from_rank(rank)
    assert not trigram.is_changing()
    assert trigram.classify().rank == rank
    assert Trigram.from_name(trigram.classify()) == trigram


@pytest.mark.parametrize("rank", [-3, 0, 9, 64])
def test_from_rank_rejects_out_of_range(rank):
    with pytest.raises(IntegerOutOfRange):
        Trigram.from_rank(rank)
    with pytest.raises(IntegerOutOfRange):
        TrigramName.from_rank(rank)


@pytest.mark.parametrize("rank", [1.0, "1", True])
def test_from_rank_rejects_non_integers(rank):
    with pytest.raises(IntegerOutOfRange):
        TrigramName.from_rank(rank)


def test_classification_is_total_over_all_lines():
    names = set()
    for top, middle, bottom in itertools.product(Line, repeat=3):
        names.add(Trigram(top, middle, bottom).classify())
    assert names == set(TrigramName)


def test_classification_ignores_changing_flags():
    for top, middle, bottom in itertools.product(Line, repeat=3):
        trigram = Trigram(top, middle, bottom)
        stable = Trigram(*(Line.from_parts(line.orientation, False) for line in trigram.lines))
        assert trigram.classify() is stable.classify()


@pytest.mark.parametrize("lines, expected", [
    ((YANG, YANG, YANG), TrigramName.QIAN),
    ((YIN, YIN, YIN), TrigramName.KUN),
    ((YIN, YIN, YANG), TrigramName.ZHEN),
    ((YIN, YANG, YIN), TrigramName.KAN),
    ((YANG, YIN, YIN), TrigramName.GEN),
    ((YANG, YANG, YIN), TrigramName.XUN),
    ((YANG, YIN, YANG), TrigramName.LI),
    ((YIN, YANG, YANG), TrigramName.DUI),
])
def test_classify_top_to_bottom(lines, expected):
    assert Trigram(*lines).classify() is expected


def test_settled_flips_only_changing_lines():
    trigram = Trigram(Line.OLD_YANG, Line.YOUNG_YIN, Line.OLD_YIN)
    assert trigram.is_changing()
    assert trigram.settled() == Trigram(Line.YOUNG_YIN, Line.YOUNG_YIN, Line.YOUNG_YANG)
    assert trigram.classify() is TrigramName.GEN
    assert trigram.settled().classify() is TrigramName.ZHEN


def test_generate_random_uses_one_method_for_all_lines():
    class CountingMethod:
        def __init__(self):
            self.calls = 0

        def generate_line(self, rng=None):
            self.calls += 1
            return Line.OLD_YIN

    method = CountingMethod()
    trigram = Trigram.generate_random(method)
    assert method.calls == 3
    assert trigram.lines == (Line.OLD_YIN,) * 3


def test_generate_random_is_reproducible():
    first = Trigram.generate_random(DivinationMethod.COIN_TOSS, random.Random(3))
    second = Trigram.generate_random(DivinationMethod.COIN_TOSS, random.Random(3))
    assert first == second


def test_metadata():
    qian = TrigramName.QIAN
    assert qian.symbol == "☰"
    assert qian.romanized == "Qián"
    assert qian.chinese == "乾"
    assert qian.english_translation == "The Creative"
    assert qian.attribute == "strong"
    assert qian.image == "heaven"
    assert qian.family_relationship == "father"
    assert TrigramName.KUN.symbol == "☷"
    assert TrigramName.XUN.image == "wind, wood"
    assert len({name.symbol for name in TrigramName}) == 8


def test_pattern_matches_canonical_trigram():
    for name in TrigramName:
        assert tuple(line.orientation for line in Trigram.from_name(name).lines) == name.pattern
    assert TrigramName.ZHEN.pattern == (Orientation.BROKEN, Orientation.BROKEN, Orientation.UNBROKEN)


def test_describe():
    text = TrigramName.ZHEN.describe()
    assert text.splitlines()[0] == "☳ (No. 4)"
    assert "Zhèn - The Arousing" in text
    assert "Image in nature: thunder" in text
    assert "Family Relationship: first son" in text
