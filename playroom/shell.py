"""Sessions, the mutable side that drives the pure rule engines."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from playroom import snakes, tictactoe
from playroom.config import DEFAULT_ROLL_DELAY
from playroom.snakes import DIE_FACES, SnakeLadderState
from playroom.tictactoe import TicTacToeState

logger = logging.getLogger(__name__)


# ── Structured types ────────────────────────────────────────────────

@dataclass
class LogEntry:
    """Record of a single user action against a session."""

    game: str  # "tictactoe" | "snakes"
    action: str  # "move" | "roll" | "restart"
    args: dict
    state_before: Any
    state_after: Any
    accepted: bool
    message: str


# ── Observer ────────────────────────────────────────────────────────

class SessionObserver(Protocol):
    """Receives structured events as a session is played."""

    def on_action(self, entry: LogEntry) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects entries into a list."""

    entries: list[LogEntry] = field(default_factory=list)

    def on_action(self, entry: LogEntry) -> None:
        self.entries.append(entry)


# ── Die ─────────────────────────────────────────────────────────────

class Die:
    """Uniform six-sided die. Seed it for reproducible sessions."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.randint(1, DIE_FACES)


# ── Tic-Tac-Toe ─────────────────────────────────────────────────────

class TicTacToeSession:
    """Owns one Tic-Tac-Toe game and forwards clicks to the engine."""

    game = "tictactoe"

    def __init__(self, observer: SessionObserver | None = None):
        self.state: TicTacToeState = tictactoe.new_game()
        self.observer = observer or ListObserver()

    @property
    def status_text(self) -> str:
        return tictactoe.status_message(self.state)

    @property
    def is_over(self) -> bool:
        return self.state.status.is_terminal

    def click(self, cell_index: int) -> bool:
        """Play *cell_index* for the active mark. Returns whether it was accepted."""
        before = self.state
        after = tictactoe.apply_move(before, cell_index)
        accepted = after is not before

        if accepted:
            logger.debug("%s played cell %d", before.active_mark, cell_index)
        else:
            logger.info("Ignored click on cell %d (%s)", cell_index, self.status_text)

        self.state = after
        self._record("move", {"cell": cell_index}, before, accepted)
        return accepted

    def restart(self) -> None:
        before = self.state
        self.state = tictactoe.new_game()
        self._record("restart", {}, before, True)

    def _record(self, action: str, args: dict, before: TicTacToeState, accepted: bool) -> None:
        self.observer.on_action(LogEntry(
            game=self.game,
            action=action,
            args=args,
            state_before=before,
            state_after=self.state,
            accepted=accepted,
            message=self.status_text,
        ))


# ── Snake & Ladder ──────────────────────────────────────────────────

class SnakeLadderSession:
    """Owns one Snake & Ladder game.

    The die and the pause before a roll is committed both live here; the
    engine only ever sees the value that was rolled.
    """

    game = "snakes"

    def __init__(
        self,
        die: Callable[[], int] | None = None,
        roll_delay: float = DEFAULT_ROLL_DELAY,
        sleep: Callable[[float], None] = time.sleep,
        observer: SessionObserver | None = None,
    ):
        self.state: SnakeLadderState = snakes.new_game()
        self.die = die or Die()
        self.roll_delay = roll_delay
        self.sleep = sleep
        self.observer = observer or ListObserver()

    @property
    def status_text(self) -> str:
        return self.state.message

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    def roll(self) -> int | None:
        """Roll the die for the active player. Returns the value, or None if the game is over."""
        if self.state.is_over:
            logger.info("Ignored roll, player %d already won", self.state.winner + 1)
            self._record("roll", {}, self.state, False)
            return None

        value = self.die()
        if self.roll_delay > 0:
            self.sleep(self.roll_delay)

        before = self.state
        self.state = snakes.apply_roll(before, value)
        move = self.state.last_move
        logger.debug(
            "Player %d rolled %d: %d -> %d (path %s)",
            move.player + 1, value, move.start, move.final, move.path,
        )
        self._record("roll", {"value": value}, before, True)
        return value

    def restart(self) -> None:
        before = self.state
        self.state = snakes.new_game()
        self._record("restart", {}, before, True)

    def _record(self, action: str, args: dict, before: SnakeLadderState, accepted: bool) -> None:
        self.observer.on_action(LogEntry(
            game=self.game,
            action=action,
            args=args,
            state_before=before,
            state_after=self.state,
            accepted=accepted,
            message=self.status_text,
        ))
