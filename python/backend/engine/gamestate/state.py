"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging
from enum import StrEnum

from backend.models.board import Board

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    RENDER = "render"
    CHECK_WIN = "check_win"
    PROMPT = "prompt"
    APPLY_MOVE = "apply_move"
    WON = "won"
    QUIT = "quit"


_TERMINAL = {Phase.WON, Phase.QUIT}


class GameState:
    """Holds the current board, loop phase, and move counters."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.phase: Phase = Phase.RENDER
        self.moves: int = 0
        self.illegal_moves: int = 0

    # -- phase tracking -------------------------------------------------------

    def advance(self, phase: Phase) -> None:
        if self.is_over:
            raise RuntimeError(f"Game already finished ({self.phase}).")
        logger.debug("Phase %s -> %s", self.phase, phase)
        self.phase = phase

    @property
    def is_over(self) -> bool:
        return self.phase in _TERMINAL

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def record_illegal(self) -> None:
        self.illegal_moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
