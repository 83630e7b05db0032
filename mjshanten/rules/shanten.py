"""Shanten (向聴数) calculation.

Shanten = minimum number of tile exchanges needed to reach tenpai.
-1 means already a complete hand (agari).
0 means tenpai (one tile away).

The standard form is generalized from 4 mentsu + 1 jantai to k sets + 1
pair, where k comes from the hand's total tile count. Declared melds count
as completed sets and take no part in the search.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from mjshanten.core.errors import MalformedHandSize
from mjshanten.core.hand import Hand, target_sets_for
from mjshanten.core.meld import Meld
from mjshanten.core.tile import (
    ALL_TILES_34, YAOCHU_INDICES, is_sequence_start, tile_34_to_name, tiles_to_string,
)

# Returned by shape rules that do not apply to the hand
NOT_APPLICABLE = 99

SEVEN_PAIRS_COUNT = 7


class ShapeTag(Enum):
    STANDARD = "standard"                  # 面子手
    SEVEN_PAIRS = "seven_pairs"            # 七対子
    THIRTEEN_ORPHANS = "thirteen_orphans"  # 国士無双


class BlockKind(Enum):
    SEQUENCE = "sequence"            # 順子
    TRIPLET = "triplet"              # 刻子
    PAIR = "pair"                    # 対子 (head, or a seven-pairs pair)
    PROTO_RUN = "proto_run"          # 搭子
    PROTO_TRIPLET = "proto_triplet"  # 対子 not used as head
    ORPHAN = "orphan"                # 幺九牌 counted toward thirteen orphans


@dataclass(frozen=True)
class Block:
    """A group of concealed tiles, stored as 34-indices."""
    kind: BlockKind
    indices: Tuple[int, ...]

    @property
    def tiles(self):
        return [ALL_TILES_34[i] for i in self.indices]

    def __str__(self):
        return tiles_to_string(self.tiles)


@dataclass
class Decomposition:
    """How one shape rule reads the hand."""
    shape: ShapeTag
    melds: List[Meld] = field(default_factory=list)
    sets: List[Block] = field(default_factory=list)
    head: Optional[Block] = None
    partials: List[Block] = field(default_factory=list)
    isolated: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "shape": self.shape.value,
            "melds": [str(m) for m in self.melds],
            "sets": [str(b) for b in self.sets],
            "head": str(self.head) if self.head else None,
            "partials": [str(b) for b in self.partials],
            "isolated": [tile_34_to_name(i) for i in self.isolated],
        }


@dataclass
class ShantenResult:
    """Best shanten over every applicable shape."""
    shanten: int
    achieved_by: ShapeTag
    decomposition: Decomposition
    k: int
    by_shape: Dict[ShapeTag, int] = field(default_factory=dict)

    @property
    def is_agari(self) -> bool:
        return self.shanten == -1

    @property
    def is_tenpai(self) -> bool:
        return self.shanten == 0

    def to_dict(self) -> dict:
        return {
            "shanten": self.shanten,
            "achieved_by": self.achieved_by.value,
            "k": self.k,
            "by_shape": {tag.value: s for tag, s in self.by_shape.items()},
            "decomposition": self.decomposition.to_dict(),
        }


# --- Standard form ---

# Search state for one set of remaining counts:
# (sets, partials capped at k, has_pair) -> (sets, partials, head, isolated)
_Partial = Tuple[Tuple[Block, ...], Tuple[Block, ...], Optional[Block], Tuple[int, ...]]
_Options = Dict[Tuple[int, int, int], _Partial]


def _score(sets: int, partials: int, has_pair: int, k: int) -> int:
    """shanten = 2*(k - sets) - partials - pair, with partials capped by free set slots.

    Without a head, a hand whose sets and partials already fill all k slots
    still needs one tile for the pair; the cap drops the extra block.
    """
    usable = min(partials, k - sets)
    return max(2 * (k - sets) - usable - has_pair, -1)


def _group_options(counts: Tuple[int, ...], idx: int) -> List[Tuple[Block, bool, int, int]]:
    """Every way to use the lowest tile: (block, is_head, +sets, +partials)."""
    n = counts[idx]
    options = []

    # Koutsu (triplet)
    if n >= 3:
        options.append((Block(BlockKind.TRIPLET, (idx, idx, idx)), False, 1, 0))

    # Shuntsu (sequence) for number tiles
    if is_sequence_start(idx) and counts[idx + 1] and counts[idx + 2]:
        options.append((Block(BlockKind.SEQUENCE, (idx, idx + 1, idx + 2)), False, 1, 0))

    # Pair, either as the head or as a proto-triplet
    if n >= 2:
        options.append((Block(BlockKind.PAIR, (idx, idx)), True, 0, 0))
        options.append((Block(BlockKind.PROTO_TRIPLET, (idx, idx)), False, 0, 1))

    # Adjacent proto-run (e.g. 12, 23)
    if idx < 27 and idx % 9 <= 7 and counts[idx + 1]:
        options.append((Block(BlockKind.PROTO_RUN, (idx, idx + 1)), False, 0, 1))

    # Gap proto-run (e.g. 13, 24)
    if is_sequence_start(idx) and counts[idx + 2]:
        options.append((Block(BlockKind.PROTO_RUN, (idx, idx + 2)), False, 0, 1))

    return options


def _decompose(counts: Tuple[int, ...], k: int, memo: Dict[Tuple[int, ...], _Options]) -> _Options:
    """Best decomposition per score key for the remaining counts."""
    if counts in memo:
        return memo[counts]

    idx = next((i for i, c in enumerate(counts) if c), None)
    if idx is None:
        memo[counts] = {(0, 0, 0): ((), (), None, ())}
        return memo[counts]

    result: _Options = {}

    def merge(key, candidate):
        # Ties keep the earlier candidate; fewer isolated tiles wins otherwise
        current = result.get(key)
        if current is None or len(candidate[3]) < len(current[3]):
            result[key] = candidate

    for block, is_head, add_sets, add_partials in _group_options(counts, idx):
        reduced = list(counts)
        for i in block.indices:
            reduced[i] -= 1
        for (sets, partials, has_pair), (s_blocks, p_blocks, head, iso) in \
                _decompose(tuple(reduced), k, memo).items():
            if is_head and has_pair:
                continue
            key = (sets + add_sets, min(partials + add_partials, k), 1 if is_head else has_pair)
            if is_head:
                merge(key, (s_blocks, p_blocks, block, iso))
            elif add_sets:
                merge(key, ((block,) + s_blocks, p_blocks, head, iso))
            else:
                merge(key, (s_blocks, (block,) + p_blocks, head, iso))

    # Leave the tile isolated
    reduced = list(counts)
    reduced[idx] -= 1
    for key, (s_blocks, p_blocks, head, iso) in _decompose(tuple(reduced), k, memo).items():
        merge(key, (s_blocks, p_blocks, head, (idx,) + iso))

    memo[counts] = result
    return result


def decompose_standard(tiles_34: List[int], k: int,
                       melds: Optional[List[Meld]] = None) -> Tuple[int, Decomposition]:
    """Minimum standard-form shanten and one decomposition achieving it.

    `tiles_34` holds concealed tiles only; `k` counts every set the hand
    needs, melds included.
    """
    melds = list(melds or [])
    if k < 0:
        raise MalformedHandSize(f"Target set count must be non-negative, got {k}")

    memo: Dict[Tuple[int, ...], _Options] = {}
    options = _decompose(tuple(tiles_34), k, memo)

    best = None
    for (sets, partials, has_pair), partial in options.items():
        s = _score(sets + len(melds), partials, has_pair, k)
        rank = (s, len(partial[3]))
        if best is None or rank < best[0]:
            best = (rank, partial)

    (s, _), (s_blocks, p_blocks, head, iso) = best
    return s, Decomposition(
        shape=ShapeTag.STANDARD,
        melds=melds,
        sets=list(s_blocks),
        head=head,
        partials=list(p_blocks),
        isolated=list(iso),
    )


def shanten_standard(tiles_34: List[int], k: Optional[int] = None, num_melds: int = 0) -> int:
    """Shanten for standard form (k sets + 1 pair).

    When `k` is omitted it is derived from the concealed tiles plus 3 per meld.
    """
    if k is None:
        k = target_sets_for(sum(tiles_34) + 3 * num_melds)
    memo: Dict[Tuple[int, ...], _Options] = {}
    return min(
        _score(sets + num_melds, partials, has_pair, k)
        for sets, partials, has_pair in _decompose(tuple(tiles_34), k, memo)
    )


# --- Seven pairs ---

def _is_canonical_size(tiles_34: List[int]) -> bool:
    # Only a meld-free hand holds 13 or 14 concealed tiles
    return sum(tiles_34) in (13, 14)


def decompose_chiitoi(tiles_34: List[int]) -> Tuple[int, Decomposition]:
    """Seven pairs shanten and the pairs it counts."""
    if not _is_canonical_size(tiles_34):
        return NOT_APPLICABLE, Decomposition(ShapeTag.SEVEN_PAIRS)

    pairs = []
    isolated = []
    for idx, n in enumerate(tiles_34):
        if n >= 2 and len(pairs) < SEVEN_PAIRS_COUNT:
            pairs.append(Block(BlockKind.PAIR, (idx, idx)))
            isolated.extend([idx] * (n - 2))
        else:
            isolated.extend([idx] * n)

    kinds = sum(1 for c in tiles_34 if c >= 1)
    s = 6 - len(pairs)
    # Seven different kinds are needed; a quad cannot supply two pairs
    if kinds < SEVEN_PAIRS_COUNT:
        s += SEVEN_PAIRS_COUNT - kinds
    return s, Decomposition(ShapeTag.SEVEN_PAIRS, partials=pairs, isolated=isolated)


def shanten_chiitoi(tiles_34: List[int]) -> int:
    """Shanten for seven pairs (七対子).

    Formula: 6 - (number of pairs).
    Only valid when total=13 or 14 (no melds).
    """
    return decompose_chiitoi(tiles_34)[0]


# --- Thirteen orphans ---

def decompose_kokushi(tiles_34: List[int]) -> Tuple[int, Decomposition]:
    """Thirteen orphans shanten with the terminal/honor tiles it uses."""
    if not _is_canonical_size(tiles_34):
        return NOT_APPLICABLE, Decomposition(ShapeTag.THIRTEEN_ORPHANS)

    remaining = list(tiles_34)
    orphans = []
    for idx in YAOCHU_INDICES:
        if remaining[idx]:
            orphans.append(Block(BlockKind.ORPHAN, (idx,)))
            remaining[idx] -= 1

    head = None
    for idx in YAOCHU_INDICES:
        if remaining[idx]:
            head = Block(BlockKind.PAIR, (idx, idx))
            remaining[idx] -= 1
            break

    isolated = [idx for idx, n in enumerate(remaining) for _ in range(n)]
    s = 13 - len(orphans) - (1 if head else 0)
    return max(s, -1), Decomposition(
        ShapeTag.THIRTEEN_ORPHANS, sets=orphans, head=head, isolated=isolated,
    )


def shanten_kokushi(tiles_34: List[int]) -> int:
    """Shanten for thirteen orphans (国士無双).

    Formula: 13 - (number of yaochu types) - (1 if any yaochu pair).
    Only valid when total=13 or 14 (no melds).
    """
    return decompose_kokushi(tiles_34)[0]


# --- Aggregation ---

# (shape, applies to hand, evaluate(concealed 34-array, k, melds)).
# Order doubles as the tie-break: earlier shapes win ties.
_SHAPE_RULES: List[Tuple[ShapeTag, Callable[[Hand], bool], Callable]] = [
    (ShapeTag.STANDARD,
     lambda hand: True,
     decompose_standard),
    (ShapeTag.SEVEN_PAIRS,
     lambda hand: hand.is_canonical,
     lambda tiles_34, k, melds: decompose_chiitoi(tiles_34)),
    (ShapeTag.THIRTEEN_ORPHANS,
     lambda hand: hand.is_canonical,
     lambda tiles_34, k, melds: decompose_kokushi(tiles_34)),
]


def analyze(hand: Hand) -> ShantenResult:
    """Validate the hand and return its minimum shanten across applicable shapes.

    Raises a MalformedHandError subclass for hands that cannot be evaluated.
    """
    k = hand.target_sets
    tiles_34 = hand.to_34_array()

    best: Optional[Tuple[int, ShapeTag, Decomposition]] = None
    by_shape: Dict[ShapeTag, int] = {}
    for tag, applies, evaluate in _SHAPE_RULES:
        if not applies(hand):
            continue
        s, decomposition = evaluate(tiles_34, k, hand.melds)
        by_shape[tag] = s
        if best is None or s < best[0]:
            best = (s, tag, decomposition)

    s, tag, decomposition = best
    return ShantenResult(shanten=s, achieved_by=tag, decomposition=decomposition,
                         k=k, by_shape=by_shape)


def shanten(hand: Hand) -> int:
    """Calculate minimum shanten number across all hand forms."""
    return analyze(hand).shanten
