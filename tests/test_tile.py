"""Tests for tile.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mjshanten.core.errors import NotationError
from mjshanten.core.tile import (
    Tile, TileSuit, ALL_TILES_34, YAOCHU_INDICES, is_sequence_start,
    make_tiles_from_string, tile_34_to_name, tiles_from_34_array,
    tiles_to_34_array, tiles_to_string,
)


class TestTileBasic:
    def test_tile_count(self):
        assert len(ALL_TILES_34) == 34

    def test_index_range(self):
        for i, t in enumerate(ALL_TILES_34):
            assert t.index34 == i

    def test_suit_assignment(self):
        assert ALL_TILES_34[0].suit == TileSuit.MAN
        assert ALL_TILES_34[0].rank == 1
        assert ALL_TILES_34[9].suit == TileSuit.PIN
        assert ALL_TILES_34[9].rank == 1
        assert ALL_TILES_34[18].suit == TileSuit.SOU
        assert ALL_TILES_34[26].rank == 9
        # East wind is honor rank 1, red dragon is honor rank 7
        assert ALL_TILES_34[27].suit == TileSuit.HONOR
        assert ALL_TILES_34[27].rank == 1
        assert ALL_TILES_34[33].rank == 7

    def test_invalid_rank(self):
        with pytest.raises(ValueError):
            Tile(TileSuit.HONOR, 8)
        with pytest.raises(ValueError):
            Tile(TileSuit.MAN, 0)
        with pytest.raises(ValueError):
            Tile.from_index34(34)

    def test_equality_and_hash(self):
        five_man = Tile(TileSuit.MAN, 5)
        assert five_man == ALL_TILES_34[4]
        assert five_man != Tile(TileSuit.PIN, 5)
        counts = {five_man: 2}
        assert counts[ALL_TILES_34[4]] == 2

    def test_ordering(self):
        tiles = [Tile(TileSuit.HONOR, 1), Tile(TileSuit.MAN, 9), Tile(TileSuit.PIN, 1)]
        assert [t.name for t in sorted(tiles)] == ["9m", "1p", "1z"]

    def test_yaochu(self):
        assert [t.index34 for t in ALL_TILES_34 if t.is_yaochu] == YAOCHU_INDICES
        assert ALL_TILES_34[0].is_terminal
        assert not ALL_TILES_34[27].is_terminal  # honor, not terminal
        assert not ALL_TILES_34[4].is_yaochu

    def test_names(self):
        assert tile_34_to_name(0) == "1m"
        assert tile_34_to_name(17) == "9p"
        assert tile_34_to_name(31) == "5z"
        assert repr(ALL_TILES_34[31]) == "Tile(5z)"

    def test_sequence_start(self):
        assert is_sequence_start(6)       # 7m 8m 9m
        assert not is_sequence_start(7)   # 8m 9m 1p crosses suits
        assert is_sequence_start(24)      # 7s
        assert not is_sequence_start(27)  # honors have no sequences


class TestConversion:
    def test_34_array_round(self):
        tiles = make_tiles_from_string("112m9p7z")
        arr = tiles_to_34_array(tiles)
        assert arr[0] == 2
        assert arr[1] == 1
        assert arr[17] == 1
        assert arr[33] == 1
        assert sum(arr) == 5
        assert tiles_from_34_array(arr) == sorted(tiles)

    def test_tiles_to_string(self):
        tiles = make_tiles_from_string("3m1m2m7z1p")
        assert tiles_to_string(tiles) == "123m1p7z"


class TestMakeTilesFromString:
    def test_basic(self):
        tiles = make_tiles_from_string("123m456p789s1234567z")
        assert len(tiles) == 16
        assert tiles[0] == Tile(TileSuit.MAN, 1)
        assert tiles[-1] == Tile(TileSuit.HONOR, 7)

    def test_whitespace_ignored(self):
        assert make_tiles_from_string("12m 3m  4p") == make_tiles_from_string("123m4p")

    def test_keeps_input_order(self):
        names = [t.name for t in make_tiles_from_string("9p1m")]
        assert names == ["9p", "1m"]

    def test_missing_suit(self):
        with pytest.raises(NotationError):
            make_tiles_from_string("123m45")

    def test_unused_suit(self):
        with pytest.raises(NotationError):
            make_tiles_from_string("m123p")

    def test_honor_out_of_range(self):
        with pytest.raises(NotationError):
            make_tiles_from_string("8z")

    def test_zero_rank(self):
        with pytest.raises(NotationError):
            make_tiles_from_string("0m")

    def test_unknown_character(self):
        with pytest.raises(NotationError):
            make_tiles_from_string("12x")
