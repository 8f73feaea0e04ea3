import pytest

from blockfall.board import Board
from blockfall.constants import (
    BACKGROUND_TILES,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    TETROMINO_PALETTES,
    TETROMINO_TILES,
    TILEMAP_TILE_COUNT,
    Tetromino,
    Tile,
    background_index,
)
from blockfall.player import PieceTables, Player

HORIZONTAL = ((255, 0, 1, 2), (0, 0, 0, 0))
VERTICAL = ((0, 0, 0, 0), (255, 0, 1, 2))


def _shapes():
    xs, ys = [], []
    for _ in range(7):
        xs.append([HORIZONTAL[0], VERTICAL[0], HORIZONTAL[0], VERTICAL[0]])
        ys.append([HORIZONTAL[1], VERTICAL[1], HORIZONTAL[1], VERTICAL[1]])
    return xs, ys


def _zero_offsets():
    return [[0] * 8 for _ in range(4)]


def make_tables(jlstz_x=None):
    xs, ys = _shapes()
    return PieceTables(
        tetromino_x=xs,
        tetromino_y=ys,
        jlstz_offset_x=jlstz_x if jlstz_x is not None else _zero_offsets(),
        jlstz_offset_y=_zero_offsets(),
        i_offset_x=_zero_offsets(),
        i_offset_y=_zero_offsets(),
        o_offset_x=_zero_offsets(),
        o_offset_y=_zero_offsets(),
        outline=[0x100 + n for n in range(256)],
    )


class ScriptedBag:
    def __init__(self, pieces):
        self._pieces = iter(pieces)

    def draw(self):
        return next(self._pieces)


def make_player(pieces=(0, 0, 0, 0), tables=None):
    tables = tables or make_tables()
    board = Board(tables.outline, [0] * TILEMAP_TILE_COUNT)
    player = Player(tables, board, ScriptedBag(pieces))
    player.next_piece()
    return player


def test_spawn_position():
    player = make_player()
    assert player.current_piece == Tetromino.I
    assert player.rotation == 0
    assert (player.piece_x, player.piece_y) == (5, 1)
    assert player.mino_x == [4, 5, 6, 7]
    assert player.mino_y == [1, 1, 1, 1]
    assert player.ghost_dirty is True


def test_spawn_sprite_attributes():
    player = make_player(pieces=(Tetromino.O,))
    assert player.piece_tile == TETROMINO_TILES[Tetromino.O]
    assert player.piece_palette == TETROMINO_PALETTES[Tetromino.O]
    assert player.ghost_tile == player.piece_tile + 8
    assert player.ghost_palette == player.piece_palette + 4


def test_move_shifts_piece():
    player = make_player()
    before = player.minos
    assert player.attempt_move(1, 0) is False
    assert player.minos == [(x + 1, y) for x, y in before]
    assert player.piece_x == 6


def test_move_right_stops_at_wall():
    player = make_player()
    while not player.attempt_move(1, 0):
        pass
    assert max(player.mino_x) == BOARD_WIDTH - 1


def test_move_left_stops_at_wall():
    player = make_player()
    while not player.attempt_move(-1, 0):
        pass
    assert min(player.mino_x) == 0
    assert player.attempt_move(-1, 0) is True


def test_check_collision_with_tile():
    player = make_player()
    player.board.set_tile(5, 3, Tile.RED)
    assert player.check_collision(0, 2) is True
    assert player.check_collision(0, 1) is False


def test_ghost_on_empty_board():
    player = make_player()
    player.relocate_ghost_piece()
    assert player.ghost_offset == BOARD_HEIGHT - 1 - player.mino_y[0]
    assert player.ghost_dirty is False


def test_ghost_stops_above_tile():
    player = make_player()
    player.board.set_tile(5, 10, Tile.GREEN)
    player.relocate_ghost_piece()
    assert player.ghost_offset == 10 - 1 - player.mino_y[0]
    assert player.check_collision(0, player.ghost_offset) is False
    assert player.check_collision(0, player.ghost_offset + 1) is True


def test_rotate_clockwise():
    player = make_player()
    player.attempt_rotate(1)
    assert player.rotation == 1
    assert player.mino_x == [5, 5, 5, 5]
    assert player.mino_y == [0, 1, 2, 3]


def test_rotate_counter_clockwise_wraps():
    player = make_player()
    player.attempt_rotate(-1)
    assert player.rotation == 3


def test_rotation_blocked_leaves_piece():
    player = make_player()
    player.board.set_tile(5, 3, Tile.GRAY)
    before = player.minos
    assert player.kick_piece(1) is False
    player.attempt_rotate(1)
    assert player.rotation == 0
    assert player.minos == before


def test_kick_uses_second_offset():
    offsets = _zero_offsets()
    offsets[1][1] = 1
    player = make_player(pieces=(Tetromino.T,), tables=make_tables(jlstz_x=offsets))
    player.board.set_tile(5, 3, Tile.GRAY)
    player.attempt_rotate(1)
    assert player.rotation == 1
    assert player.piece_x == 4
    assert player.mino_x == [4, 4, 4, 4]


def test_i_piece_ignores_jlstz_offsets():
    offsets = _zero_offsets()
    offsets[1][1] = 1
    player = make_player(pieces=(Tetromino.I,), tables=make_tables(jlstz_x=offsets))
    player.board.set_tile(5, 3, Tile.GRAY)
    assert player.kick_piece(1) is False


def test_kick_rejects_bad_rotation():
    player = make_player()
    with pytest.raises(ValueError):
        player.kick_piece(4)


def test_lock_piece_writes_board():
    player = make_player(pieces=(Tetromino.I, Tetromino.S))
    cells = player.minos
    player.lock_piece()
    assert all(player.board.get_tile(x, y) == Tile.CYAN for x, y in cells)
    assert player.board.background[background_index(4 + 1, 1)] == BACKGROUND_TILES[0]
    assert player.board.background[background_index(4 + 1, 2)] == player.board.outline_for_tile(4, 2)
    assert player.current_piece == Tetromino.S


def test_tables_reject_bad_shape():
    xs, ys = _shapes()
    with pytest.raises(ValueError):
        PieceTables(
            tetromino_x=xs[:6],
            tetromino_y=ys,
            jlstz_offset_x=_zero_offsets(),
            jlstz_offset_y=_zero_offsets(),
            i_offset_x=_zero_offsets(),
            i_offset_y=_zero_offsets(),
            o_offset_x=_zero_offsets(),
            o_offset_y=_zero_offsets(),
            outline=[0] * 256,
        )


def test_tables_offset_selection():
    tables = make_tables()
    assert tables.offset_tables(Tetromino.I) == (tables.i_offset_x, tables.i_offset_y)
    assert tables.offset_tables(Tetromino.O) == (tables.o_offset_x, tables.o_offset_y)
    assert tables.offset_tables(Tetromino.Z) == (tables.jlstz_offset_x, tables.jlstz_offset_y)