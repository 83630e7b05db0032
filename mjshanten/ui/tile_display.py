"""Tile display formatting with colors for terminal output."""

from typing import Iterable

from rich.text import Text

from mjshanten.core.tile import Tile, TileSuit


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.HONOR: "yellow",
}

_HONOR_KEYS = ["tile.east", "tile.south", "tile.west", "tile.north",
               "tile.haku", "tile.hatsu", "tile.chun"]


def tile_to_display_str(tile: Tile) -> str:
    """Localized string representation of a tile (for UI display).

    Number tiles (1m-9s) are universal. Honor tiles are translated.
    """
    if tile.is_honor:
        from mjshanten.ui.i18n import t
        return t(_HONOR_KEYS[tile.rank - 1])
    return tile.name


def tile_to_rich_text(tile: Tile) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    style = f"bold {SUIT_COLORS[tile.suit]}"
    return Text(f"[{tile_to_display_str(tile)}]", style=style)


def tiles_to_rich_text(tiles: Iterable[Tile], separator: str = "") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def groups_to_rich_text(groups: Iterable[Iterable[Tile]]) -> Text:
    """Render tile groups separated by spaces, e.g. melds or blocks."""
    result = Text()
    for i, group in enumerate(groups):
        if i > 0:
            result.append("  ")
        result.append_text(tiles_to_rich_text(group))
    return result
