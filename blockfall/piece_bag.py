"""Randomised piece bag feeding a preview queue."""

import random
from collections import deque

from .constants import NEXT_QUEUE_CAPACITY, PIECE_BAG_CAPACITY, Tetromino


class PieceBag:
    """Draws pieces from a shuffled bag through a fixed-length preview queue.

    A bag length of zero draws any of the seven pieces at random every time.
    The preview queue starts full of piece 0.
    """

    def __init__(self, next_queue_length, bag_length, rng=None):
        if not 0 <= next_queue_length <= NEXT_QUEUE_CAPACITY:
            raise ValueError(
                f"next queue length must be 0..{NEXT_QUEUE_CAPACITY}, got {next_queue_length}"
            )
        if not 0 <= bag_length <= PIECE_BAG_CAPACITY:
            raise ValueError(
                f"bag length must be 0..{PIECE_BAG_CAPACITY}, got {bag_length}"
            )
        self.next_queue_length = next_queue_length
        self.bag_length = bag_length
        self._rng = rng if rng is not None else random.Random()
        self._queue = deque([0] * next_queue_length)
        self._remaining = []

    @property
    def queue(self):
        """Upcoming pieces, soonest first."""
        return tuple(self._queue)

    @property
    def pieces_left(self):
        """Pieces still in the current bag."""
        return len(self._remaining)

    def draw(self):
        """Take the next piece."""
        if self.bag_length == 0:
            return self._rng.randrange(len(Tetromino))
        if not self._remaining:
            self._remaining = list(range(self.bag_length))
        piece = self._remaining.pop(self._rng.randrange(len(self._remaining)))
        if self.next_queue_length == 0:
            return piece
        upcoming = self._queue.popleft()
        self._queue.append(piece)
        return upcoming