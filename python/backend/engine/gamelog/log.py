"""Append-only text log of board snapshots and requested moves."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import TextIO

from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameLog:
    """Writes one ``v0|v1|...`` line per board row and one line per move.

    The file is truncated on open and flushed after every write, so an
    interrupted run still leaves a readable trace.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    @classmethod
    def open(cls, filepath: Path) -> GameLog:
        """Open *filepath* for writing. Raises ``OSError`` on failure."""
        stream = open(filepath, "w", encoding="utf-8")
        logger.debug("Opened game log %s", filepath)
        return cls(stream)

    # -- context manager ------------------------------------------------------

    def __enter__(self) -> GameLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if not self._stream.closed:
            self._stream.close()

    # -- writers --------------------------------------------------------------

    def write_board(self, board: Board) -> None:
        for row in board.tiles:
            self._stream.write("|".join(str(v) for v in row) + "\n")
        self._stream.flush()

    def write_move(self, tile: int) -> None:
        self._stream.write(f"{tile}\n")
        self._stream.flush()
