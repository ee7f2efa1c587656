"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.board import NOT_FOUND, Board, Position

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int) -> None:
        self.size = size
        board = GameGenerator.initial(size)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, tile: int) -> bool:
        """Slide *tile* into the empty slot.

        Returns True if the tile was on the board and adjacent to the
        empty slot. Selecting the empty slot itself (tile 0) is not a
        move and returns False.
        """
        row, col = self.state.board.find(tile)
        if (row, col) == NOT_FOUND:
            logger.debug("Tile %d is not on the board", tile)
            return False
        return self.move_tile(row, col)

    def move_tile(self, row: int, col: int) -> bool:
        """Move the tile at (row, col) into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        board = self.state.board
        blank = board.find(0)
        br, bc = blank

        if abs(row - br) + abs(col - bc) != 1:
            return False

        self._swap(board, (row, col), blank)
        self.state.increment_moves()
        return True

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, a: Position, b: Position) -> None:
        ar, ac = a
        br, bc = b
        board.tiles[ar][ac], board.tiles[br][bc] = (
            board.tiles[br][bc],
            board.tiles[ar][ac],
        )
