"""Line-based tile reader shared by the CLI frontends.

Reads one integer per prompt. Lines that do not parse as an integer
re-prompt with ``Retry:``; end of input and Ctrl-C both map to the quit
sentinel so a closed stdin can never spin the game loop.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

QUIT = 0

PROMPT = "Tile to move: "
RETRY = "Retry: "


def parse_tile(raw: str) -> int | None:
    """Return *raw* as an int, or ``None`` if it is not one."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def read_tile(
    ask: Callable[[str], str] = input,
    prompt: str = PROMPT,
    retry: str = RETRY,
) -> int:
    """Prompt until the player enters an integer and return it.

    *ask* is any ``input``-like callable (``input``, ``Console.input``).
    """
    text = prompt
    while True:
        try:
            raw = ask(text)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed; treating as quit")
            return QUIT

        tile = parse_tile(raw)
        if tile is not None:
            return tile
        logger.debug("Rejected non-integer input %r", raw)
        text = retry
