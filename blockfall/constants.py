"""Board dimensions, tile kinds and tilemap entry helpers."""

from enum import IntEnum

BOARD_WIDTH = 10
BOARD_HEIGHT = 22
SPACE_ABOVE_BOARD = 2
HORIZONTAL_BOARD_OFFSET = 1

TILEMAP_WIDTH = 32
TILEMAP_TILE_COUNT = TILEMAP_WIDTH * TILEMAP_WIDTH

NEXT_QUEUE_CAPACITY = 8
PIECE_BAG_CAPACITY = 14

OAM_ENTRY_SIZE = 4


class Tile(IntEnum):
    """Contents of one board cell."""

    EMPTY = 0
    CYAN = 1
    PURPLE = 2
    GREEN = 3
    BLUE = 4
    YELLOW = 5
    RED = 6
    GRAY = 7
    ORANGE = 8


class Tetromino(IntEnum):
    """The seven piece shapes, in table order."""

    I = 0  # noqa: E741
    T = 1
    S = 2
    J = 3
    O = 4  # noqa: E741
    Z = 5
    L = 6


def tile_entry(tile, palette, priority, fliph, flipv):
    """Pack a tile number and its attributes into a 16-bit tilemap entry."""
    return (
        (tile & 0b1111111111)
        | ((palette & 0b111) << 10)
        | ((priority & 0b1) << 13)
        | ((flipv & 0b1) << 14)
        | ((fliph & 0b1) << 15)
    )


def background_index(x, y):
    """Index of cell (x, y) in a 32x32 tilemap."""
    return x + (y << 5)


def oam_id(sprite):
    """Byte offset of a sprite's entry in object attribute memory."""
    return sprite * OAM_ENTRY_SIZE


# Neighbour offsets, in the order that builds an outline pattern (high bit first).
SURROUNDING = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

BACKGROUND_TILES = tuple(
    tile_entry(0x20 + n, 1 if n < 4 else 2, 0, 0, 0) for n in range(8)
)

BACKGROUND_TILE_EMPTY = tile_entry(0, 0, 0, 0, 0)
BACKGROUND_TILE_EMPTY_BOARD = tile_entry(1, 0, 0, 0, 0)

# Sprite tile per tetromino; the gray mino is skipped.
TETROMINO_TILES = (0, 1, 2, 3, 4, 5, 7)
TETROMINO_PALETTES = (0, 0, 0, 0, 1, 1, 1)