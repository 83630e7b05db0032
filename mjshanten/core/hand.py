"""Hand model - concealed tile counts plus declared melds."""

from typing import Dict, Iterable, List, Optional

from .errors import InvalidTileCount, MalformedHandSize, NotationError
from .meld import Meld
from .tile import (
    ALL_TILES_34, MAX_COPIES, Tile, counts_to_34_array, make_tiles_from_string,
    tiles_from_34_array, tiles_to_34_array, tiles_to_string,
)

# The canonical hand before its draw: 13 tiles, four sets still to build
WAITING_HAND_SIZE = 13
CANONICAL_SETS = 4


def target_sets_for(total: int) -> int:
    """Derive k from a total tile count (melds counted as 3 tiles each)."""
    if total == WAITING_HAND_SIZE:
        return CANONICAL_SETS
    if total < 2 or total % 3 != 2:
        raise MalformedHandSize(
            f"The number of tiles must be 3k+2 (2, 5, 8, 11, 14, 17...) "
            f"or {WAITING_HAND_SIZE}, but {total} provided."
        )
    return (total - 2) // 3


class Hand:
    """A read-only snapshot of a player's tiles.

    Attributes:
        counts: Concealed tile -> count (only non-zero entries kept)
        melds: Declared melds, each worth one completed set
    """

    def __init__(self, counts: Optional[Dict[Tile, int]] = None,
                 melds: Optional[Iterable[Meld]] = None):
        self.counts: Dict[Tile, int] = {
            tile: n for tile, n in sorted((counts or {}).items()) if n > 0
        }
        self.melds: List[Meld] = list(melds or [])

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile],
                   melds: Optional[Iterable[Meld]] = None) -> 'Hand':
        return cls.from_34_array(tiles_to_34_array(tiles), melds)

    @classmethod
    def from_34_array(cls, tiles_34: List[int],
                      melds: Optional[Iterable[Meld]] = None) -> 'Hand':
        return cls({ALL_TILES_34[i]: n for i, n in enumerate(tiles_34) if n}, melds)

    @classmethod
    def from_string(cls, s: str) -> 'Hand':
        """Parse notation like '45p8s144m[111z]25m44p3m'.

        Tiles may come in any order; bracketed groups are declared melds
        and are validated as such. Whitespace is ignored.
        """
        concealed = []
        melds = []
        buf = []
        meld_buf = None
        for i, ch in enumerate(s):
            if ch == '[':
                if meld_buf is not None:
                    raise NotationError(f"Second '[' found at index {i}.")
                concealed.extend(make_tiles_from_string("".join(buf)))
                buf = []
                meld_buf = []
            elif ch == ']':
                if meld_buf is None:
                    raise NotationError(f"Unmatched ']' found at index {i}.")
                melds.append(Meld.from_tiles(make_tiles_from_string("".join(meld_buf))))
                meld_buf = None
            elif meld_buf is not None:
                meld_buf.append(ch)
            else:
                buf.append(ch)
        if meld_buf is not None:
            raise NotationError("Unclosed '[' in input.")
        concealed.extend(make_tiles_from_string("".join(buf)))
        return cls.from_tiles(concealed, melds)

    @property
    def closed_tiles(self) -> List[Tile]:
        """Concealed tiles, sorted."""
        return tiles_from_34_array(self.to_34_array())

    def to_34_array(self) -> List[int]:
        """Convert concealed tiles to 34-length count array."""
        return counts_to_34_array(self.counts)

    def physical_34_array(self) -> List[int]:
        """Counts of every visible copy, concealed plus melded."""
        arr = self.to_34_array()
        for m in self.melds:
            for t in m.tiles:
                arr[t.index34] += 1
        return arr

    @property
    def num_melds(self) -> int:
        return len(self.melds)

    @property
    def concealed_count(self) -> int:
        return sum(self.counts.values())

    @property
    def total_tiles(self) -> int:
        """Concealed tiles plus 3 per meld (a quad still counts as 3)."""
        return self.concealed_count + 3 * len(self.melds)

    @property
    def is_waiting(self) -> bool:
        """Whether this is the 13-tile hand waiting for its draw."""
        return self.total_tiles == WAITING_HAND_SIZE

    @property
    def is_canonical(self) -> bool:
        """13/14-tile hand with no melds, where seven pairs and thirteen orphans apply."""
        return not self.melds and self.total_tiles in (WAITING_HAND_SIZE, WAITING_HAND_SIZE + 1)

    def validate(self):
        """Raise if any tile exceeds 4 copies or the size is malformed."""
        for idx, n in enumerate(self.physical_34_array()):
            if n > MAX_COPIES:
                raise InvalidTileCount(
                    f"{ALL_TILES_34[idx].name} appears {n} times (max {MAX_COPIES})"
                )
        target_sets_for(self.total_tiles)

    @property
    def target_sets(self) -> int:
        """Number of sets k the hand must complete (melds included)."""
        self.validate()
        return target_sets_for(self.total_tiles)

    def with_tile(self, tile: Tile) -> 'Hand':
        """A new hand with one more concealed copy of `tile`."""
        counts = dict(self.counts)
        counts[tile] = counts.get(tile, 0) + 1
        return Hand(counts, self.melds)

    def __str__(self):
        return tiles_to_string(self.closed_tiles) + "".join(str(m) for m in self.melds)

    def __repr__(self):
        return f"Hand({self})"
