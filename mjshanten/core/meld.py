"""Meld (副露) data structures for declared sequences, triplets and quads."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .errors import InvalidMeldShape
from .tile import Tile, is_sequence_start, tiles_to_string


class MeldType(Enum):
    SEQUENCE = "sequence"  # 順子 (chi)
    TRIPLET = "triplet"    # 刻子 (pon)
    QUAD = "quad"          # 槓子 (kan)


@dataclass(frozen=True)
class Meld:
    """A frozen, already-declared group.

    Always worth exactly one completed set, whether it holds 3 or 4 tiles.

    Attributes:
        meld_type: Shape of the meld
        tiles: Sorted tuple of the meld's tiles
    """
    meld_type: MeldType
    tiles: tuple  # tuple of Tile

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> 'Meld':
        """Classify tiles as a meld, raising InvalidMeldShape otherwise."""
        tiles = tuple(sorted(tiles))
        if len(tiles) == 4 and all(t == tiles[0] for t in tiles):
            return cls(MeldType.QUAD, tiles)
        if len(tiles) == 3:
            if tiles[0] == tiles[1] == tiles[2]:
                return cls(MeldType.TRIPLET, tiles)
            first = tiles[0].index34
            if (is_sequence_start(first)
                    and tiles[1].index34 == first + 1
                    and tiles[2].index34 == first + 2):
                return cls(MeldType.SEQUENCE, tiles)
        raise InvalidMeldShape(f"Not a valid meld: [{tiles_to_string(tiles)}]")

    @property
    def is_kan(self) -> bool:
        return self.meld_type == MeldType.QUAD

    @property
    def tile_index34(self) -> int:
        """The 34 index of the meld's lowest tile."""
        return self.tiles[0].index34

    def __str__(self):
        return f"[{tiles_to_string(self.tiles)}]"
