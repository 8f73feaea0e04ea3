"""The playfield grid and its background tilemap."""

from .constants import (
    BACKGROUND_TILE_EMPTY,
    BACKGROUND_TILE_EMPTY_BOARD,
    BACKGROUND_TILES,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    HORIZONTAL_BOARD_OFFSET,
    SPACE_ABOVE_BOARD,
    SURROUNDING,
    TILEMAP_TILE_COUNT,
    Tile,
    background_index,
)

OUTLINE_TABLE_SIZE = 256


def _in_bounds(x, y):
    return 0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT


class Board:
    """A 10x22 grid of tiles mirrored into a 32x32 background tilemap."""

    def __init__(self, outline_table, tilemap):
        outline = tuple(outline_table)
        if len(outline) != OUTLINE_TABLE_SIZE:
            raise ValueError(
                f"outline table must have {OUTLINE_TABLE_SIZE} entries, got {len(outline)}"
            )
        background = list(tilemap)
        if len(background) != TILEMAP_TILE_COUNT:
            raise ValueError(
                f"tilemap must have {TILEMAP_TILE_COUNT} entries, got {len(background)}"
            )
        self.outline_table = outline
        self.background = background
        self.cells = [[Tile.EMPTY] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)]

    def is_solid(self, x, y):
        """True if (x, y) is outside the board or holds a tile."""
        if not _in_bounds(x, y):
            return True
        return self.cells[y][x] != Tile.EMPTY

    def get_tile(self, x, y):
        """The tile at (x, y); anything outside the board reads as empty."""
        if not _in_bounds(x, y):
            return Tile.EMPTY
        return self.cells[y][x]

    def set_tile(self, x, y, tile):
        """Place a tile and update its background entry."""
        if not _in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the board")
        tile = Tile(tile)
        self.cells[y][x] = tile
        if tile != Tile.EMPTY:
            entry = BACKGROUND_TILES[tile - 1]
        elif y < SPACE_ABOVE_BOARD:
            entry = BACKGROUND_TILE_EMPTY
        else:
            entry = BACKGROUND_TILE_EMPTY_BOARD
        self.background[background_index(x + HORIZONTAL_BOARD_OFFSET, y)] = entry

    def outline_for_tile(self, x, y):
        """Outline tile for (x, y) chosen by which of its neighbours are filled."""
        pattern = 0
        for dx, dy in SURROUNDING:
            filled = self.get_tile(x + dx, y + dy) != Tile.EMPTY
            pattern = (pattern << 1) | int(filled)
        return self.outline_table[pattern]

    def outline_tile(self, x, y):
        """Redraw outlines on the empty visible cells around (x, y)."""
        for dx, dy in SURROUNDING:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < BOARD_WIDTH
                and SPACE_ABOVE_BOARD <= ny < BOARD_HEIGHT
                and self.get_tile(nx, ny) == Tile.EMPTY
            ):
                index = background_index(nx + HORIZONTAL_BOARD_OFFSET, ny)
                self.background[index] = self.outline_for_tile(nx, ny)