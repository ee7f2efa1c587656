"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, ``input``) for rendering and input.
"""

from __future__ import annotations

import sys
import time

from backend.engine.gamelog import GameLog
from backend.engine.gamestate import Phase
from backend.models.board import Board
from frontend.cli.input_handler import read_tile
from frontend.cli.session import start
from frontend.cli.settings import Settings


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return the board as text, one line per row, ``_`` for the blank."""
    width = max(2, len(str(board.size * board.size - 1)))

    lines: list[str] = []
    for row in board.tiles:
        cells: list[str] = []
        for val in row:
            if val == 0:
                cells.append(f" {'_':>{width}} ")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("".join(cells))
    return "\n".join(lines)


# -- renderer -----------------------------------------------------------------


class VanillaRenderer:
    """Plain ANSI renderer; the default frontend."""

    def greet(self, size: int) -> None:
        print(f"Dimensions are: {size} x {size}")
        _clear()
        print(f"{_BOLD}WELCOME TO GAME OF FIFTEEN{_R}")

    def clear(self) -> None:
        _clear()

    def draw(self, board: Board) -> None:
        print(_render_board(board))
        print()

    def ask_tile(self) -> int:
        return read_tile(input)

    def illegal_move(self) -> None:
        print(f"\n{_Y}Illegal move.{_R}")

    def victory(self) -> None:
        print(f"{_G}ftw!{_R}")

    def pause(self, seconds: float) -> None:
        sys.stdout.flush()
        if seconds > 0:
            time.sleep(seconds)


# -- public entry point -------------------------------------------------------


def run(size: int, log: GameLog, settings: Settings) -> Phase:
    """Play one game in the vanilla terminal."""
    return start(size, VanillaRenderer(), log, settings)
