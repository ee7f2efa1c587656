"""Turn loop tests driven by a scripted renderer.

No terminal and no sleeping: the renderer records what it was asked to
show and hands back tiles from a fixed script.
"""

from __future__ import annotations

import io

from backend.engine.gamelog import GameLog
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Phase
from backend.models.board import Board
from frontend.cli.input_handler import QUIT
from frontend.cli.session import play, start
from frontend.cli.settings import Settings

START_3x3 = [[8, 7, 6], [5, 4, 3], [2, 1, 0]]
AFTER_ONE = [[8, 7, 6], [5, 4, 3], [2, 0, 1]]
DELAY = 0.5


class ScriptedRenderer:
    """Records every call; ``ask_tile`` returns the scripted tiles in order."""

    def __init__(self, tiles: list[int]) -> None:
        self._tiles = list(tiles)
        self.events: list[str] = []
        self.frames: list[list[list[int]]] = []
        self.pauses: list[float] = []
        self.prompts = 0

    def greet(self, size: int) -> None:
        self.events.append(f"greet {size}")

    def clear(self) -> None:
        self.events.append("clear")

    def draw(self, board: Board) -> None:
        self.events.append("draw")
        self.frames.append([row[:] for row in board.tiles])

    def ask_tile(self) -> int:
        self.prompts += 1
        return self._tiles.pop(0) if self._tiles else QUIT

    def illegal_move(self) -> None:
        self.events.append("illegal")

    def victory(self) -> None:
        self.events.append("victory")

    def pause(self, seconds: float) -> None:
        self.pauses.append(seconds)


# -- helpers ------------------------------------------------------------------


def _rows(board: list[list[int]]) -> list[str]:
    return ["|".join(str(v) for v in row) for row in board]


def _run(rows: list[list[int]], tiles: list[int]) -> tuple[Phase, ScriptedRenderer, list[str]]:
    stream = io.StringIO()
    renderer = ScriptedRenderer(tiles)
    game = GamePlay.from_board(Board.from_rows(rows))
    phase = play(game, renderer, GameLog(stream), DELAY)
    return phase, renderer, stream.getvalue().splitlines()


# -- tests --------------------------------------------------------------------


def test_quit_on_first_prompt() -> None:
    phase, renderer, log = _run(START_3x3, [0])

    assert phase is Phase.QUIT
    assert renderer.events == ["clear", "draw"]
    assert renderer.frames == [START_3x3]
    assert renderer.pauses == []
    assert log == _rows(START_3x3)


def test_legal_then_illegal_then_quit() -> None:
    phase, renderer, log = _run(START_3x3, [1, 6, 0])

    assert phase is Phase.QUIT
    assert renderer.frames == [START_3x3, AFTER_ONE, AFTER_ONE]
    assert renderer.events.count("illegal") == 1
    assert "victory" not in renderer.events
    # One pause after the legal move, two after the illegal one.
    assert renderer.pauses == [DELAY, DELAY, DELAY]
    assert log == (
        _rows(START_3x3) + ["1"] + _rows(AFTER_ONE) + ["6"] + _rows(AFTER_ONE)
    )


def test_absent_tile_is_reported_and_logged() -> None:
    phase, renderer, log = _run(START_3x3, [42, 0])

    assert phase is Phase.QUIT
    assert renderer.events.count("illegal") == 1
    assert renderer.frames == [START_3x3, START_3x3]
    assert log[3] == "42"


def test_winning_move_ends_the_loop() -> None:
    near = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    goal = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    phase, renderer, log = _run(near, [8, 5, 5])

    assert phase is Phase.WON
    assert renderer.prompts == 1
    assert renderer.events[-1] == "victory"
    assert renderer.frames[-1] == goal
    assert log == _rows(near) + ["8"] + _rows(goal)


def test_solved_board_wins_without_prompting() -> None:
    goal = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    phase, renderer, log = _run(goal, [])

    assert phase is Phase.WON
    assert renderer.prompts == 0
    assert renderer.events == ["clear", "draw", "victory"]
    assert log == _rows(goal)


def test_start_greets_before_first_frame() -> None:
    renderer = ScriptedRenderer([])
    settings = Settings(delay=0.0, greet_delay=2.0)

    phase = start(4, renderer, GameLog(io.StringIO()), settings)

    assert phase is Phase.QUIT
    assert renderer.events[:3] == ["greet 4", "clear", "draw"]
    assert renderer.pauses == [2.0]
    assert renderer.frames[0][3] == [3, 1, 2, 0]
