"""One player's game session driven frame by frame from controller input."""

from enum import IntFlag

from .board import Board
from .constants import HORIZONTAL_BOARD_OFFSET, Tetromino, Tile
from .piece_bag import PieceBag
from .player import MINO_COUNT, Player

NEXT_QUEUE_LENGTH = 5
BAG_LENGTH = 7
BUMP_IMPULSE = 0b0000010000000000

_STARTING_TILES = (
    (1, 20, Tile.CYAN),
    (2, 20, Tile.PURPLE),
    (0, 21, Tile.GREEN),
    (1, 21, Tile.BLUE),
    (7, 20, Tile.YELLOW),
    (8, 20, Tile.RED),
    (8, 21, Tile.GRAY),
    (9, 21, Tile.ORANGE),
)


class Button(IntFlag):
    """Controller buttons, as bits of the joypad word."""

    R = 0x0010
    L = 0x0020
    X = 0x0040
    A = 0x0080
    RIGHT = 0x0100
    LEFT = 0x0200
    DOWN = 0x0400
    UP = 0x0800
    START = 0x1000
    SELECT = 0x2000
    Y = 0x4000
    B = 0x8000


def _u8(value):
    return value & 0xFF


class Game:
    """Board, piece bag and player, advanced one frame per call to update."""

    def __init__(self, tables, tilemap, rng=None):
        self.board = Board(tables.outline, tilemap)
        self.bag = PieceBag(NEXT_QUEUE_LENGTH, BAG_LENGTH, rng)
        self.player = Player(tables, self.board, self.bag)
        self.frame = 0
        self.board_x = 0
        self.board_y = 16
        self.board_offset_x = 0
        self.board_offset_y = 0
        self.move_left_bumped = False
        self.move_right_bumped = False
        self.last_bump_was_left = False
        self._buttons = Button(0)
        self._board_screen = (self.board_x, self.board_y)

        for x, y, tile in _STARTING_TILES:
            self.board.set_tile(x, y, tile)
        for x, y, _ in _STARTING_TILES:
            self.board.outline_tile(x, y)

        self.player.next_piece()
        while self.player.current_piece != Tetromino.I:
            self.player.next_piece()

    def update(self, buttons):
        """Advance one frame with the given buttons held."""
        self.frame += 1
        previous = self._buttons
        self._buttons = held = Button(buttons)
        pressed = held & ~previous
        player = self.player

        if pressed & Button.SELECT:
            player.next_piece()
        if pressed & Button.LEFT:
            self.move_left_bumped = player.attempt_move(-1, 0)
        if pressed & Button.RIGHT:
            self.move_right_bumped = player.attempt_move(1, 0)
        if pressed & Button.UP:
            player.attempt_move(0, -1)
        if pressed & Button.DOWN:
            player.attempt_move(0, 1)
        if pressed & Button.A:
            player.attempt_rotate(1)
        if pressed & Button.B:
            player.attempt_rotate(-1)
        if pressed & Button.START:
            player.lock_piece()
        if pressed & Button.L:
            player.attempt_move(0, player.ghost_offset)
            player.lock_piece()

        if player.ghost_dirty:
            player.relocate_ghost_piece()

        if held & Button.LEFT and self.move_left_bumped:
            self.board_offset_x |= BUMP_IMPULSE
            self.last_bump_was_left = True
        elif held & Button.RIGHT and self.move_right_bumped:
            self.board_offset_x |= BUMP_IMPULSE
            self.last_bump_was_left = False
        self.board_offset_x = (self.board_offset_x & 0xFFFF) >> 1

        shake_x = (self.board_offset_x >> 8) & 0xFF
        shake_y = (self.board_offset_y >> 8) & 0xFF
        if self.last_bump_was_left:
            shake_x = _u8(-shake_x)
        self._board_screen = (_u8(self.board_x + shake_x), _u8(self.board_y + shake_y))

    def sprite_positions(self):
        """Screen positions of the nine sprites.

        Sprites 0-3 are the piece's minos, 4-7 the ghost piece's minos and 8
        the piece position marker.
        """
        screen_x, screen_y = self._board_screen
        origin_x = _u8(screen_x + (HORIZONTAL_BOARD_OFFSET << 3))
        origin_y = _u8(screen_y - 1)
        player = self.player
        minos = [
            (_u8(origin_x + (mx << 3)), _u8(origin_y + (my << 3)))
            for mx, my in zip(player.mino_x, player.mino_y)
        ]
        ghosts = [(x, y + (player.ghost_offset << 3)) for x, y in minos]
        assert len(minos) == MINO_COUNT
        return minos + ghosts + [(player.piece_x, player.piece_y)]

    def scroll(self):
        """Background scroll registers that place the board on screen."""
        screen_x, screen_y = self._board_screen
        return (-screen_x) & 0xFFFF, (-screen_y) & 0xFFFF