#!/usr/bin/env python3
"""Game of Fifteen.

Usage::

    python main.py 4              # 4×4 board, vanilla terminal
    python main.py 3 -f rich      # Rich terminal, 3×3
    python main.py 5 --delay 0    # no animation pauses

Exit codes: 0 won or quit, 1 wrong argument count, 2 dimension out of
range, 3 log file could not be opened.
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import click
import typer
from typer.core import TyperCommand

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.board import DIM_MAX, DIM_MIN  # noqa: E402
from frontend.cli.settings import (  # noqa: E402
    DEFAULT_DELAY,
    DEFAULT_GREET_DELAY,
    DEFAULT_LOG_FILE,
    Settings,
)

logger = logging.getLogger(__name__)

USAGE = "Usage: fifteen d"

EXIT_USAGE = 1
EXIT_DIMENSION = 2
EXIT_LOG = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_dimension(raw: str) -> int:
    """Return *raw* as a board size, or exit with code 2.

    The whole argument must be an integer: ``"3x"`` is rejected rather
    than read as 3.
    """
    try:
        size = int(raw)
    except ValueError:
        size = 0
    if not DIM_MIN <= size <= DIM_MAX:
        logger.error("Rejected board dimension %r", raw)
        typer.echo(
            f"Board must be between {DIM_MIN} x {DIM_MIN} and "
            f"{DIM_MAX} x {DIM_MAX}, inclusive."
        )
        raise typer.Exit(EXIT_DIMENSION)
    return size


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


# -- CLI entry point ----------------------------------------------------------

class _FifteenCommand(TyperCommand):
    """Reports every command-line misuse as a usage error (exit 1).

    Click would exit with 2, which callers read as a bad dimension.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            logger.error("Bad command line: %s", exc.format_message())
            typer.echo(USAGE)
            raise typer.Exit(EXIT_USAGE) from exc


app = typer.Typer(add_completion=False)


@app.command(
    cls=_FifteenCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    dimension: Optional[str] = typer.Argument(
        None, metavar="d",
        help=f"Board side length ({DIM_MIN}-{DIM_MAX}).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    log_file: Path = typer.Option(
        DEFAULT_LOG_FILE, "--log-file",
        help="Where to write the game log (truncated on start).",
    ),
    delay: float = typer.Option(
        DEFAULT_DELAY, "--delay",
        min=0.0,
        help="Pause after each move, in seconds.",
    ),
    greet_delay: float = typer.Option(
        DEFAULT_GREET_DELAY, "--greet-delay",
        min=0.0,
        help="How long the welcome banner stays up, in seconds.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Write diagnostic logging to stderr.",
    ),
) -> None:
    """Game of Fifteen on a d×d board."""
    _configure_logging(verbose)

    if dimension is None or ctx.args:
        typer.echo(USAGE)
        raise typer.Exit(EXIT_USAGE)

    size = _parse_dimension(dimension)
    settings = Settings(log_path=log_file, delay=delay, greet_delay=greet_delay)

    from backend.engine.gamelog import GameLog

    try:
        log = GameLog.open(settings.log_path)
    except OSError as exc:
        logger.error("Could not open log file %s: %s", settings.log_path, exc)
        typer.echo(f"Could not open {settings.log_path}.", err=True)
        raise typer.Exit(EXIT_LOG)

    with log:
        mod = importlib.import_module(_RUNNERS[frontend])
        phase = mod.run(size=size, log=log, settings=settings)

    logger.debug("Game over: %s", phase)


if __name__ == "__main__":
    app()
