"""Runtime settings for the terminal front end."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ROLL_DELAY = 0.36  # seconds of suspense before a roll is committed
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_IMAGE_PATH = Path("snakes_board.png")

PLAYER_COLORS = ("#1976d2", "#43a047")
SNAKE_COLOR = "#ff9800"
LADDER_COLOR = "#43a047"


@dataclass
class Settings:
    roll_delay: float = DEFAULT_ROLL_DELAY
    seed: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Read ``PLAYROOM_*`` variables, falling back to the defaults.

        Raises ``ValueError`` for values that do not parse.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        delay = env.get("PLAYROOM_ROLL_DELAY")
        if delay:
            settings.roll_delay = float(delay)
            if settings.roll_delay < 0:
                raise ValueError(f"PLAYROOM_ROLL_DELAY must not be negative, got {delay}.")

        seed = env.get("PLAYROOM_SEED")
        if seed:
            settings.seed = int(seed)

        level = env.get("PLAYROOM_LOG_LEVEL")
        if level:
            settings.log_level = level.upper()

        return settings
