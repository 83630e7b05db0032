"""Useful tiles (受け入れ) for a hand waiting on its draw.

A tile is useful when drawing it lowers the hand's shanten. At tenpai the
useful tiles are exactly the waits.
"""

from dataclasses import dataclass
from typing import List

from mjshanten.core.errors import MalformedHandSize
from mjshanten.core.hand import Hand, WAITING_HAND_SIZE
from mjshanten.core.tile import ALL_TILES_34, MAX_COPIES, Tile
from mjshanten.rules.shanten import analyze


@dataclass(frozen=True)
class UsefulTile:
    tile: Tile
    remaining: int       # copies not visible in hand or melds
    shanten_after: int


def useful_tiles(hand: Hand) -> List[UsefulTile]:
    """All tiles whose draw lowers shanten, in 34-index order."""
    if not hand.is_waiting:
        raise MalformedHandSize(
            f"Useful tiles need a {WAITING_HAND_SIZE}-tile hand, "
            f"but {hand.total_tiles} provided."
        )
    current = analyze(hand).shanten
    visible = hand.physical_34_array()

    result = []
    for idx, tile in enumerate(ALL_TILES_34):
        if visible[idx] >= MAX_COPIES:
            continue
        after = analyze(hand.with_tile(tile)).shanten
        if after < current:
            result.append(UsefulTile(tile, MAX_COPIES - visible[idx], after))
    return result


def count_useful_tiles(hand: Hand) -> int:
    """Total unseen copies of every useful tile."""
    return sum(u.remaining for u in useful_tiles(hand))


def waits(hand: Hand) -> List[Tile]:
    """Winning tiles of a tenpai hand; empty when not tenpai.

    Like useful_tiles, only defined for a hand waiting on its draw.
    """
    if analyze(hand).shanten != 0:
        return []
    return [u.tile for u in useful_tiles(hand)]
