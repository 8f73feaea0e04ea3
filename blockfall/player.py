"""A player's falling piece: movement, rotation with kicks, ghost piece and locking."""

from dataclasses import dataclass

from .constants import (
    BOARD_HEIGHT,
    TETROMINO_PALETTES,
    TETROMINO_TILES,
    Tetromino,
    Tile,
)

MINO_COUNT = 4
ROTATION_COUNT = 4
KICK_COUNT = 5
OUTLINE_TABLE_SIZE = 256
SPAWN_X = 5
SPAWN_Y = 1


def _u8(value):
    return value & 0xFF


def _freeze_grid(value, shape, name):
    """Turn nested sequences into nested tuples, checking each level's length.

    A shape entry of ``None`` accepts any length of at least ``KICK_COUNT``.
    """
    size, *rest = shape
    items = tuple(value)
    if size is None:
        if len(items) < KICK_COUNT:
            raise ValueError(f"{name} rows need at least {KICK_COUNT} entries, got {len(items)}")
    elif len(items) != size:
        raise ValueError(f"{name} needs {size} entries at this level, got {len(items)}")
    if not rest:
        return tuple(int(item) for item in items)
    return tuple(_freeze_grid(item, rest, name) for item in items)


@dataclass(frozen=True)
class PieceTables:
    """Lookup tables for piece shapes, wall-kick offsets and board outlines.

    Shape tables hold, per piece and rotation, the four minos' offsets from the
    piece position as unsigned bytes. Offset tables hold, per rotation, the
    kick offsets tried in order; only the first five are used.
    """

    tetromino_x: tuple
    tetromino_y: tuple
    jlstz_offset_x: tuple
    jlstz_offset_y: tuple
    i_offset_x: tuple
    i_offset_y: tuple
    o_offset_x: tuple
    o_offset_y: tuple
    outline: tuple

    def __post_init__(self):
        shape_dims = (len(Tetromino), ROTATION_COUNT, MINO_COUNT)
        offset_dims = (ROTATION_COUNT, None)
        for name in ("tetromino_x", "tetromino_y"):
            object.__setattr__(self, name, _freeze_grid(getattr(self, name), shape_dims, name))
        for name in (
            "jlstz_offset_x",
            "jlstz_offset_y",
            "i_offset_x",
            "i_offset_y",
            "o_offset_x",
            "o_offset_y",
        ):
            object.__setattr__(self, name, _freeze_grid(getattr(self, name), offset_dims, name))
        object.__setattr__(
            self, "outline", _freeze_grid(self.outline, (OUTLINE_TABLE_SIZE,), "outline")
        )

    def offset_tables(self, piece):
        """The (x, y) kick offset tables that apply to a piece."""
        if piece == Tetromino.I:
            return self.i_offset_x, self.i_offset_y
        if piece == Tetromino.O:
            return self.o_offset_x, self.o_offset_y
        return self.jlstz_offset_x, self.jlstz_offset_y


class Player:
    """The active piece of one player on a board, fed by a piece bag."""

    def __init__(self, tables, board, bag):
        self.tables = tables
        self.board = board
        self.bag = bag
        self.current_piece = Tetromino.I
        self.rotation = 0
        self.piece_x = 0
        self.piece_y = 0
        self.mino_x = [0] * MINO_COUNT
        self.mino_y = [0] * MINO_COUNT
        self.ghost_dirty = False
        self.ghost_offset = 0
        self.piece_tile = TETROMINO_TILES[Tetromino.I]
        self.piece_palette = TETROMINO_PALETTES[Tetromino.I]

    @property
    def minos(self):
        """Board cells of the four minos."""
        return list(zip(self.mino_x, self.mino_y))

    @property
    def ghost_tile(self):
        """Sprite tile of the ghost piece."""
        return self.piece_tile + 8

    @property
    def ghost_palette(self):
        """Sprite palette of the ghost piece."""
        return self.piece_palette + 4

    def check_collision(self, dx, dy):
        """True if the piece shifted by (dx, dy) would overlap a wall or tile."""
        return any(
            self.board.is_solid(_u8(x + dx), _u8(y + dy))
            for x, y in zip(self.mino_x, self.mino_y)
        )

    def attempt_move(self, dx, dy):
        """Shift the piece by (dx, dy) if it fits.

        Returns True if the piece was blocked and did not move.
        """
        if self.check_collision(dx, dy):
            return True
        self.piece_x = _u8(self.piece_x + dx)
        self.piece_y = _u8(self.piece_y + dy)
        self.mino_x = [_u8(x + dx) for x in self.mino_x]
        self.mino_y = [_u8(y + dy) for y in self.mino_y]
        self.ghost_dirty = True
        return False

    def kick_piece(self, goal_rotation):
        """Place the piece in a new rotation, trying each kick offset in turn.

        Returns True if one of the kicks fit; the rotation field itself is left
        to the caller.
        """
        if not 0 <= goal_rotation < ROTATION_COUNT:
            raise ValueError(f"rotation must be 0..{ROTATION_COUNT - 1}, got {goal_rotation}")
        piece = self.current_piece
        table_x, table_y = self.tables.offset_tables(piece)
        base_x = [_u8(m + self.piece_x) for m in self.tables.tetromino_x[piece][goal_rotation]]
        base_y = [_u8(m + self.piece_y) for m in self.tables.tetromino_y[piece][goal_rotation]]
        for kick in range(KICK_COUNT):
            kick_x = _u8(table_x[self.rotation][kick] - table_x[goal_rotation][kick])
            kick_y = _u8(table_y[self.rotation][kick] - table_y[goal_rotation][kick])
            xs = [_u8(x + kick_x) for x in base_x]
            ys = [_u8(y - kick_y) for y in base_y]
            if any(self.board.is_solid(x, y) for x, y in zip(xs, ys)):
                continue
            self.piece_x = _u8(self.piece_x + kick_x)
            self.piece_y = _u8(self.piece_y - kick_y)
            self.mino_x = xs
            self.mino_y = ys
            self.ghost_dirty = True
            return True
        return False

    def attempt_rotate(self, relative_rotation):
        """Rotate by a number of quarter turns clockwise, if any kick fits."""
        goal = (self.rotation + relative_rotation) & 0b11
        if self.kick_piece(goal):
            self.rotation = goal

    def relocate_ghost_piece(self):
        """Work out how far the piece could drop before landing."""
        offset = 1
        while not self.check_collision(0, offset) and offset < BOARD_HEIGHT + 1:
            offset += 1
        self.ghost_offset = offset - 1
        self.ghost_dirty = False

    def lock_piece(self):
        """Write the piece into the board and bring in the next one."""
        tile = Tile(TETROMINO_TILES[self.current_piece] + 1)
        for x, y in zip(self.mino_x, self.mino_y):
            self.board.set_tile(x, y, tile)
            self.board.outline_tile(x, y)
        self.next_piece()

    def next_piece(self):
        """Draw a piece from the bag and spawn it at the top of the board."""
        piece = Tetromino(self.bag.draw())
        self.piece_tile = TETROMINO_TILES[piece]
        self.piece_palette = TETROMINO_PALETTES[piece]
        self.current_piece = piece
        self.rotation = 0
        self.piece_x = SPAWN_X
        self.piece_y = SPAWN_Y
        self.mino_x = [_u8(m + SPAWN_X) for m in self.tables.tetromino_x[piece][0]]
        self.mino_y = [_u8(m + SPAWN_Y) for m in self.tables.tetromino_y[piece][0]]
        self.ghost_dirty = True