"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and turn loop as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamelog import GameLog
from backend.engine.gamestate import Phase
from backend.models.board import Board
from frontend.cli.input_handler import read_tile
from frontend.cli.session import start
from frontend.cli.settings import Settings

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="right")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]_[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- renderer -----------------------------------------------------------------


class RichRenderer:
    """Draws each frame as a centred panel."""

    def __init__(self, con: Console | None = None) -> None:
        self.console = con or console

    def greet(self, size: int) -> None:
        self.console.clear()
        banner = Panel(
            Align.center(Text(f"Dimensions are: {size} x {size}", style="dim")),
            title="[bold]WELCOME TO GAME OF FIFTEEN[/bold]",
            border_style="bright_blue",
            padding=(1, 4),
        )
        self.console.print()
        self.console.print(Align.center(banner))

    def clear(self) -> None:
        self.console.clear()

    def draw(self, board: Board) -> None:
        panel = Panel(
            Align.center(_render_board(board)),
            title=f"[bold cyan]Fifteen  {board.size}×{board.size}[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 2),
        )
        self.console.print()
        self.console.print(Align.center(panel))

    def ask_tile(self) -> int:
        return read_tile(self.console.input)

    def illegal_move(self) -> None:
        self.console.print(Align.center(Text("\nIllegal move.", style="bold yellow")))

    def victory(self) -> None:
        congrats = Text()
        congrats.append("★ ", style="bold yellow")
        congrats.append("ftw!", style="bold green")
        congrats.append(" ★", style="bold yellow")
        self.console.print(Align.center(congrats))

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


# -- public entry point -------------------------------------------------------


def run(size: int, log: GameLog, settings: Settings) -> Phase:
    """Play one game in the Rich terminal."""
    return start(size, RichRenderer(), log, settings)
