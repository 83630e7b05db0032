"""Tests for shanten.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mjshanten.core.errors import MalformedHandSize
from mjshanten.core.hand import Hand
from mjshanten.rules.shanten import (
    NOT_APPLICABLE, BlockKind, ShapeTag, analyze, decompose_standard, shanten,
    shanten_chiitoi, shanten_kokushi, shanten_standard,
)


def make_hand(s):
    return Hand.from_string(s)


def make_34(s):
    """Helper: create 34 array from shorthand."""
    return Hand.from_string(s).to_34_array()


class TestShanten:
    def test_agari(self):
        """Complete hand should have shanten -1."""
        result = analyze(make_hand("123m222p456s777z99m"))
        assert result.shanten == -1
        assert result.is_agari
        assert result.achieved_by == ShapeTag.STANDARD
        assert result.k == 4

    def test_agari_decomposition(self):
        d = analyze(make_hand("123m222p456s777z99m")).decomposition
        assert sorted(str(b) for b in d.sets) == ["123m", "222p", "456s", "777z"]
        assert str(d.head) == "99m"
        assert d.partials == []
        assert d.isolated == []

    def test_tenpai(self):
        """One tile short of the last triplet = shanten 0."""
        result = analyze(make_hand("123m222p456s77z99m"))
        assert result.shanten == 0
        assert result.is_tenpai

    def test_tanki_tenpai(self):
        assert shanten(make_hand("123m456p789s1z555z")) == 0

    def test_high_shanten(self):
        assert shanten(make_hand("1357m2468p12345z")) == 4

    def test_all_isolated(self):
        arr = make_34("159m159p159s12345z")
        assert shanten_standard(arr) == 8

    def test_isolated_reported(self):
        result = analyze(make_hand("123m456p789s157z99m"))
        assert result.shanten == 1
        assert result.decomposition.isolated == [27, 31, 33]

    def test_never_below_minus_one(self):
        for s in ("123m222p456s777z99m", "11z", "1199m1199p1199s77z",
                  "119m19p19s1234567z", "111m222m333m444m55m"):
            assert shanten(make_hand(s)) >= -1


class TestGeneralizedSize:
    def test_two_tiles(self):
        assert shanten(make_hand("11z")) == -1
        assert shanten(make_hand("12z")) == 0

    def test_five_tiles(self):
        assert shanten(make_hand("123m45p")) == 0
        assert shanten(make_hand("123m55p")) == -1

    def test_seventeen_tiles(self):
        result = analyze(make_hand("123m456m789m123p456p11z"))
        assert result.k == 5
        assert result.shanten == -1

    def test_seventeen_tiles_shanten(self):
        # Missing one tile of the last sequence, plus an isolated honor
        result = analyze(make_hand("123m456m789m123p45p11z7z"))
        assert result.k == 5
        assert result.shanten == 0

    def test_no_pair_cap(self):
        """Six partials with no pair: only k of them count."""
        result = analyze(make_hand("13m57m13p57p13s57s12z"))
        assert result.shanten == 4
        assert result.achieved_by == ShapeTag.STANDARD

    def test_standard_with_explicit_k(self):
        arr = make_34("123m55p")
        assert shanten_standard(arr, num_melds=1) == -1
        assert shanten_standard(arr, k=2, num_melds=1) == -1

    def test_negative_k(self):
        with pytest.raises(MalformedHandSize):
            decompose_standard(make_34("11z"), -1)


class TestMelds:
    def test_meld_counts_as_set(self):
        result = analyze(make_hand("123m55p[777z]"))
        assert result.k == 2
        assert result.shanten == -1
        d = result.decomposition
        assert len(d.melds) == 1
        assert [str(b) for b in d.sets] == ["123m"]
        assert str(d.head) == "55p"

    def test_only_concealed_tiles_searched(self):
        result = analyze(make_hand("55p[777z]"))
        assert result.k == 1
        assert result.shanten == -1
        assert result.decomposition.sets == []
        assert str(result.decomposition.head) == "55p"

    def test_quad_meld(self):
        assert shanten(make_hand("123m456m789m11z[5555z]")) == -1

    def test_meld_equivalence(self):
        pairs = [
            ("123m456p789s11z555z", "123m456p789s11z[555z]"),
            ("13m456p78s1z99m555z", "13m456p78s1z99m[555z]"),
            ("123m456p789s1z555z", "456p789s1z555z[123m]"),
        ]
        for concealed, declared in pairs:
            assert shanten(make_hand(concealed)) == shanten(make_hand(declared))

    def test_meld_equivalence_value(self):
        assert shanten(make_hand("13m456p78s1z99m[555z]")) == 1


class TestChiitoi:
    def test_chiitoi_complete(self):
        result = analyze(make_hand("1199m1199p1199s77z"))
        assert result.shanten == -1
        assert result.achieved_by == ShapeTag.SEVEN_PAIRS
        assert result.by_shape[ShapeTag.STANDARD] == 3
        assert len(result.decomposition.partials) == 7
        assert all(b.kind == BlockKind.PAIR for b in result.decomposition.partials)

    def test_chiitoi_tenpai(self):
        """Six pairs + 1 single = 13 tiles, waiting for the single's pair."""
        assert shanten(make_hand("1199m1199p1199s1z")) == 0

    def test_triplet_counts_once(self):
        arr = make_34("111m22m33m44m55m66m7m")
        assert shanten_chiitoi(arr) == 0

    def test_quads_need_distinct_kinds(self):
        arr = make_34("1111m2222m3333m44m")
        assert shanten_chiitoi(arr) == 5

    def test_not_applicable_size(self):
        assert shanten_chiitoi(make_34("1199m1199p11s")) == NOT_APPLICABLE

    def test_standard_preferred_on_tie(self):
        result = analyze(make_hand("112233m445566p77z"))
        assert result.shanten == -1
        assert result.achieved_by == ShapeTag.STANDARD
        assert result.by_shape[ShapeTag.SEVEN_PAIRS] == -1


class TestKokushi:
    def test_kokushi_tenpai(self):
        """Twelve types plus a duplicate, 1s missing."""
        result = analyze(make_hand("119m19p9s1234567z"))
        assert result.shanten == 0
        assert result.achieved_by == ShapeTag.THIRTEEN_ORPHANS
        assert str(result.decomposition.head) == "11m"

    def test_kokushi_thirteen_sided(self):
        assert shanten_kokushi(make_34("19m19p19s1234567z")) == 0

    def test_kokushi_complete(self):
        result = analyze(make_hand("119m19p19s1234567z"))
        assert result.shanten == -1
        assert result.achieved_by == ShapeTag.THIRTEEN_ORPHANS
        assert len(result.decomposition.sets) == 13

    def test_simples_ignored(self):
        arr = make_34("19m19p19s123456z55m")
        # 12 types, no terminal/honor pair; the 5m pair does not help
        assert shanten_kokushi(arr) == 1


class TestShapeApplicability:
    def test_excluded_with_meld(self):
        hand = make_hand("1199m1199p1s77z[555z]")
        result = analyze(hand)
        assert result.shanten == 2
        assert set(result.by_shape) == {ShapeTag.STANDARD}
        # An unconditional seven-pairs count would have claimed 1
        naive = 6 - sum(1 for c in hand.to_34_array() if c >= 2)
        assert naive < result.shanten

    def test_excluded_for_non_canonical_size(self):
        hand = make_hand("1199m1199p1199s77z135z")
        result = analyze(hand)
        assert result.k == 5
        assert result.shanten == 4
        assert ShapeTag.SEVEN_PAIRS not in result.by_shape
        naive = 6 - min(7, sum(1 for c in hand.to_34_array() if c >= 2))
        assert naive == -1

    def test_canonical_runs_all_shapes(self):
        result = analyze(make_hand("123m222p456s777z99m"))
        assert set(result.by_shape) == set(ShapeTag)


class TestMonotonicity:
    def test_remove_any_tile_from_agari(self):
        complete = make_hand("123m222p456s777z99m")
        for tile in list(complete.counts):
            counts = dict(complete.counts)
            counts[tile] -= 1
            assert shanten(Hand(counts)) == 0

    def test_completing_tile_never_hurts(self):
        hand = make_hand("123m222p456s77z99m")
        before = shanten(hand)
        for name in ("7z", "9m"):
            drawn = Hand.from_string(str(hand) + name)
            assert shanten(drawn) < before


class TestErrors:
    def test_malformed_size(self):
        with pytest.raises(MalformedHandSize):
            analyze(make_hand("1234567m"))

    def test_malformed_size_with_meld(self):
        with pytest.raises(MalformedHandSize) as exc_info:
            analyze(make_hand("123m[777z]4m"))
        assert exc_info.value.tag == "MalformedHandSize"

    def test_to_dict(self):
        data = analyze(make_hand("123m55p[777z]")).to_dict()
        assert data["shanten"] == -1
        assert data["achieved_by"] == "standard"
        assert data["k"] == 2
        assert data["decomposition"]["melds"] == ["[777z]"]
        assert data["decomposition"]["head"] == "55p"
