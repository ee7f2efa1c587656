"""Builds the starting and goal boards."""

from __future__ import annotations

import logging

from backend.models.board import DIM_MAX, DIM_MIN, Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates boards of a given size. All methods are static."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        GameGenerator._check_size(size)
        tiles: list[list[int]] = []
        num = 1
        for r in range(size):
            row: list[int] = []
            for c in range(size):
                if r == size - 1 and c == size - 1:
                    row.append(0)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return Board(size=size, tiles=tiles)

    @staticmethod
    def initial(size: int) -> Board:
        """Return the starting board: tiles in descending order, blank last.

        For even sizes the descending fill is an odd permutation, so tiles
        1 and 2 in the last row are swapped to keep the board solvable.
        """
        GameGenerator._check_size(size)
        tiles: list[list[int]] = []
        for r in range(size):
            tiles.append([size * size - (c + 1 + r * size) for c in range(size)])

        if size % 2 == 0:
            tiles[size - 1][size - 2] = 2
            tiles[size - 1][size - 3] = 1
            logger.debug("Applied even-size fix-up for %d×%d board", size, size)

        return Board(size=size, tiles=tiles)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _check_size(size: int) -> None:
        if not DIM_MIN <= size <= DIM_MAX:
            raise ValueError(
                f"Board must be between {DIM_MIN} x {DIM_MIN} and "
                f"{DIM_MAX} x {DIM_MAX}, inclusive."
            )
