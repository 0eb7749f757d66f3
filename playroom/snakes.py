"""Snake & Ladder rules: turn order, overshoot and win detection."""

from __future__ import annotations

from dataclasses import dataclass, replace

from playroom.board import FINAL_SQUARE, START_SQUARE, jump_destination, resolve_square

DIE_FACES = 6
START_MESSAGE = "Player 1's turn! Roll the dice 🎲"


@dataclass(frozen=True)
class RollResult:
    """What happened to the active player's pawn on one roll."""

    player: int
    roll: int
    start: int
    landing: int | None  # None = overshoot, pawn never left *start*
    final: int
    path: tuple[int, ...] = ()
    won: bool = False
    extra_turn: bool = False

    @property
    def overshoot(self) -> bool:
        return self.landing is None

    @property
    def hopped(self) -> bool:
        return len(self.path) > 1


@dataclass(frozen=True)
class SnakeLadderState:
    """Immutable snapshot of a two-player game."""

    positions: tuple[int, int] = (START_SQUARE, START_SQUARE)
    active_player: int = 0
    last_roll: int | None = None
    winner: int | None = None
    message: str = START_MESSAGE
    last_move: RollResult | None = None

    def __post_init__(self):
        positions = tuple(self.positions)
        if len(positions) != 2:
            raise ValueError(f"Two players required, got {len(positions)} positions.")
        for pos in positions:
            if isinstance(pos, bool) or not isinstance(pos, int):
                raise ValueError(f"Position must be an integer, got {pos!r}.")
            if not START_SQUARE <= pos <= FINAL_SQUARE:
                raise ValueError(f"Position {pos} is not on the board.")
            if jump_destination(pos) is not None:
                raise ValueError(f"A pawn cannot rest on square {pos}, it has a snake or ladder.")
        if self.active_player not in (0, 1):
            raise ValueError(f"Active player must be 0 or 1, got {self.active_player!r}.")
        object.__setattr__(self, "positions", positions)

        # A pawn on the final square finishes the game however the state was built
        if self.winner is None and FINAL_SQUARE in positions:
            winner = positions.index(FINAL_SQUARE)
            object.__setattr__(self, "winner", winner)
            if self.message == START_MESSAGE:
                object.__setattr__(self, "message", f"Player {winner + 1} wins! 🏆")
        elif self.winner is not None and positions[self.winner] != FINAL_SQUARE:
            raise ValueError(f"Player {self.winner + 1} is not on {FINAL_SQUARE}.")

    @property
    def is_over(self) -> bool:
        return self.winner is not None


def new_game() -> SnakeLadderState:
    return SnakeLadderState()


def _check_roll(roll: int) -> None:
    if isinstance(roll, bool) or not isinstance(roll, int):
        raise ValueError(f"Die value must be an integer, got {roll!r}.")
    if not 1 <= roll <= DIE_FACES:
        raise ValueError(f"Die value must be between 1 and {DIE_FACES}, got {roll}.")


def plan_roll(player: int, position: int, roll: int) -> RollResult:
    """Compute where *player* on *position* ends up after rolling *roll*.

    Pure. Says nothing about whose turn comes next beyond ``extra_turn``.
    """
    _check_roll(roll)
    target = position + roll

    # Exact landing on the final square is required
    if target > FINAL_SQUARE:
        return RollResult(
            player=player, roll=roll, start=position,
            landing=None, final=position, path=(position,),
        )

    final, path = resolve_square(target)
    won = final == FINAL_SQUARE
    return RollResult(
        player=player, roll=roll, start=position,
        landing=target, final=final, path=path,
        won=won, extra_turn=roll == DIE_FACES and not won,
    )


def roll_message(result: RollResult) -> str:
    """Pick the status line for an accepted roll."""
    me = result.player + 1
    other = 2 - result.player
    if result.won:
        return f"Player {me} wins! 🏆"
    if result.overshoot:
        return (
            f"Player {me} needs an exact roll to reach {FINAL_SQUARE}. "
            f"Player {other}'s turn! Roll the dice 🎲"
        )
    if result.extra_turn:
        return f"Player {me} rolled a 6! Go again."
    return f"Player {other}'s turn! Roll the dice 🎲"


def apply_roll(state: SnakeLadderState, roll: int) -> SnakeLadderState:
    """Apply one die roll for the active player.

    A finished game is returned unchanged. The active player keeps the turn
    only after a six that moved the pawn without winning.
    """
    _check_roll(roll)
    if state.is_over:
        return state

    player = state.active_player
    result = plan_roll(player, state.positions[player], roll)

    positions = list(state.positions)
    positions[player] = result.final

    # After a win the turn owner no longer matters; leave it on the winner
    next_player = player if result.won or result.extra_turn else 1 - player

    return replace(
        state,
        positions=tuple(positions),
        active_player=next_player,
        last_roll=roll,
        winner=player if result.won else None,
        message=roll_message(result),
        last_move=result,
    )
