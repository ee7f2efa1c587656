"""The turn loop shared by every CLI frontend.

Frontends only supply a ``Renderer``; the loop itself owns the game
state, the game log, and the order of operations:

    RENDER -> CHECK_WIN -> (WON) | PROMPT -> (QUIT) | APPLY_MOVE -> RENDER
"""

from __future__ import annotations

import logging
from typing import Protocol

from backend.engine.gamelog import GameLog
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Phase
from backend.models.board import Board
from frontend.cli.input_handler import QUIT
from frontend.cli.settings import Settings

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def greet(self, size: int) -> None: ...

    def clear(self) -> None: ...

    def draw(self, board: Board) -> None: ...

    def ask_tile(self) -> int: ...

    def illegal_move(self) -> None: ...

    def victory(self) -> None: ...

    def pause(self, seconds: float) -> None: ...


def play(game: GamePlay, renderer: Renderer, log: GameLog, delay: float) -> Phase:
    """Run turns until the board is solved or the player quits.

    Returns the terminal phase, ``Phase.WON`` or ``Phase.QUIT``.
    """
    state = game.state
    tile = QUIT

    while not state.is_over:
        if state.phase is Phase.RENDER:
            renderer.clear()
            renderer.draw(state.board)
            log.write_board(state.board)
            state.advance(Phase.CHECK_WIN)

        elif state.phase is Phase.CHECK_WIN:
            if game.is_won:
                renderer.victory()
                state.advance(Phase.WON)
            else:
                state.advance(Phase.PROMPT)

        elif state.phase is Phase.PROMPT:
            tile = renderer.ask_tile()
            state.advance(Phase.QUIT if tile == QUIT else Phase.APPLY_MOVE)

        elif state.phase is Phase.APPLY_MOVE:
            log.write_move(tile)
            if not game.move(tile):
                state.record_illegal()
                logger.info("Illegal move: %d", tile)
                renderer.illegal_move()
                renderer.pause(delay)
            # Animation pause.
            renderer.pause(delay)
            state.advance(Phase.RENDER)

    logger.debug(
        "Session ended in %s after %d moves (%d illegal)",
        state.phase, state.moves, state.illegal_moves,
    )
    return state.phase


def start(size: int, renderer: Renderer, log: GameLog, settings: Settings) -> Phase:
    """Greet the player, set up a fresh board, and play it."""
    renderer.greet(size)
    renderer.pause(settings.greet_delay)
    game = GamePlay(size)
    return play(game, renderer, log, settings.delay)
