"""Runtime settings collected from the command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_FILE = Path("log.txt")
DEFAULT_DELAY = 0.5
DEFAULT_GREET_DELAY = 2.0


@dataclass(frozen=True)
class Settings:
    log_path: Path = DEFAULT_LOG_FILE
    delay: float = DEFAULT_DELAY  # pause after each move
    greet_delay: float = DEFAULT_GREET_DELAY  # how long the banner stays up
