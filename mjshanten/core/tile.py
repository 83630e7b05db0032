"""Tile definition with (suit, rank) identity and 34-index encoding."""

from enum import IntEnum
from typing import Dict, Iterable, List

from .errors import NotationError


class TileSuit(IntEnum):
    MAN = 0    # 萬子
    PIN = 1    # 筒子
    SOU = 2    # 索子
    HONOR = 3  # 字牌 (4 winds + 3 dragons)


SUIT_CHARS = {TileSuit.MAN: 'm', TileSuit.PIN: 'p', TileSuit.SOU: 's', TileSuit.HONOR: 'z'}
CHAR_SUITS = {ch: suit for suit, ch in SUIT_CHARS.items()}

# Highest rank per suit
MAX_RANK = {TileSuit.MAN: 9, TileSuit.PIN: 9, TileSuit.SOU: 9, TileSuit.HONOR: 7}

# Yaochu (terminal + honor) tile indices in 34 encoding
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]

# Tile names for 34 encoding
TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "1z", "2z", "3z", "4z", "5z", "6z", "7z",
]

MAX_COPIES = 4


class Tile:
    """Immutable tile identified by (suit, rank)."""
    __slots__ = ('_suit', '_rank', '_index34')

    def __init__(self, suit: TileSuit, rank: int):
        suit = TileSuit(suit)
        if not (1 <= rank <= MAX_RANK[suit]):
            raise ValueError(f"rank must be 1..{MAX_RANK[suit]} for {suit.name}, got {rank}")
        self._suit = suit
        self._rank = rank
        self._index34 = suit * 9 + rank - 1

    @classmethod
    def from_index34(cls, index34: int) -> 'Tile':
        if not (0 <= index34 < 34):
            raise ValueError(f"index34 must be 0..33, got {index34}")
        return ALL_TILES_34[index34]

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def index34(self) -> int:
        return self._index34

    @property
    def is_honor(self) -> bool:
        return self._suit == TileSuit.HONOR

    @property
    def is_terminal(self) -> bool:
        return not self.is_honor and self._rank in (1, 9)

    @property
    def is_yaochu(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def name(self) -> str:
        return TILE_NAMES_34[self._index34]

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._index34 == other._index34
        return NotImplemented

    def __hash__(self):
        return self._index34

    def __lt__(self, other):
        if isinstance(other, Tile):
            return (self._suit, self._rank) < (other._suit, other._rank)
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Tile):
            return (self._suit, self._rank) <= (other._suit, other._rank)
        return NotImplemented


# Pre-create all 34 tile identities
ALL_TILES_34 = [Tile(TileSuit(i // 9), i % 9 + 1) for i in range(34)]


def is_sequence_start(index34: int) -> bool:
    """Whether a sequence index34, index34+1, index34+2 stays inside one suit."""
    return index34 < 27 and index34 % 9 <= 6


def tile_34_to_name(index34: int) -> str:
    """Get tile name from 34 encoding."""
    return TILE_NAMES_34[index34]


def tiles_to_34_array(tiles: Iterable[Tile]) -> List[int]:
    """Convert tiles to a 34-length count array."""
    arr = [0] * 34
    for t in tiles:
        arr[t.index34] += 1
    return arr


def counts_to_34_array(counts: Dict[Tile, int]) -> List[int]:
    """Convert a tile->count mapping to a 34-length count array."""
    arr = [0] * 34
    for tile, n in counts.items():
        arr[tile.index34] += n
    return arr


def tiles_from_34_array(tiles_34: List[int]) -> List[Tile]:
    """Expand a 34-length count array back into a sorted tile list."""
    tiles = []
    for idx, n in enumerate(tiles_34):
        tiles.extend([ALL_TILES_34[idx]] * n)
    return tiles


def tiles_to_string(tiles: Iterable[Tile]) -> str:
    """Compact notation like '123m44p7z', suits in m/p/s/z order."""
    by_suit: Dict[TileSuit, List[int]] = {}
    for t in sorted(tiles):
        by_suit.setdefault(t.suit, []).append(t.rank)
    return "".join(
        "".join(str(r) for r in ranks) + SUIT_CHARS[suit]
        for suit, ranks in sorted(by_suit.items())
    )


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse a shorthand string like '123m456p789s1122z' into tiles.

    Whitespace is ignored. Digits are buffered until a suit letter
    (m, p, s, z) claims them.
    """
    tiles = []
    numbers = []
    for i, ch in enumerate(s):
        if ch.isspace():
            continue
        if ch.isdigit():
            numbers.append((int(ch), i))
        elif ch in CHAR_SUITS:
            if not numbers:
                raise NotationError(f"Unused suit character '{ch}' at index {i}.")
            suit = CHAR_SUITS[ch]
            for n, pos in numbers:
                if not (1 <= n <= MAX_RANK[suit]):
                    raise NotationError(f"Invalid rank '{n}{ch}' at index {pos}.")
                tiles.append(ALL_TILES_34[suit * 9 + n - 1])
            numbers = []
        else:
            raise NotationError(f"Unknown character '{ch}' at index {i}.")
    if numbers:
        raise NotationError(f"Missing suit character after digit at index {numbers[0][1]}.")
    return tiles
