"""Tic-Tac-Toe rules: move application and win/draw detection."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

X = "X"
O = "O"
MARKS = (X, O)
CELLS = 9

# Checked in this order: rows, columns, diagonals
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diagonals
)


@dataclass(frozen=True)
class GameStatus:
    kind: str  # "in_progress" | "win" | "draw"
    winner: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != "in_progress"


IN_PROGRESS = GameStatus("in_progress")
DRAW = GameStatus("draw")


def win(mark: str) -> GameStatus:
    return GameStatus("win", winner=mark)


@dataclass(frozen=True)
class TicTacToeState:
    """Board plus whose turn it is. ``status`` is always read off the board."""

    board: tuple = field(default_factory=lambda: (None,) * CELLS)  # None, "X" or "O"
    active_mark: str = X
    status: GameStatus = field(default=IN_PROGRESS, init=False)

    def __post_init__(self):
        board = tuple(self.board)
        if len(board) != CELLS:
            raise ValueError(f"A board has {CELLS} cells, got {len(board)}.")
        if self.active_mark not in MARKS:
            raise ValueError(f"Unknown mark {self.active_mark!r}.")
        object.__setattr__(self, "board", board)
        object.__setattr__(self, "status", evaluate(board))


def other_mark(mark: str) -> str:
    return O if mark == X else X


def new_game() -> TicTacToeState:
    return TicTacToeState()


def winning_line(board: Sequence[str | None]) -> tuple[int, int, int] | None:
    """First completed line on *board*, or ``None``."""
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def evaluate(board: Sequence[str | None]) -> GameStatus:
    line = winning_line(board)
    if line is not None:
        return win(board[line[0]])
    if all(cell is not None for cell in board):
        return DRAW
    return IN_PROGRESS


def state_from_board(board: Sequence[str | None]) -> TicTacToeState:
    """Build a state from a raw board, inferring whose turn it is.

    Raises ``ValueError`` if the board could not arise from X moving first.
    """
    cells = tuple(board)
    if len(cells) != CELLS:
        raise ValueError(f"A board has {CELLS} cells, got {len(cells)}.")
    for cell in cells:
        if cell is not None and cell not in MARKS:
            raise ValueError(f"Unknown mark {cell!r}.")

    xs, os_ = cells.count(X), cells.count(O)
    if xs not in (os_, os_ + 1):
        raise ValueError(f"Impossible mark counts: {xs} X and {os_} O.")

    active = X if xs == os_ else O
    return TicTacToeState(board=cells, active_mark=active)


def legal_moves(state: TicTacToeState) -> list[int]:
    if state.status.is_terminal:
        return []
    return [i for i, cell in enumerate(state.board) if cell is None]


def apply_move(state: TicTacToeState, cell_index: int) -> TicTacToeState:
    """Place the active mark on *cell_index*.

    Moves on an occupied cell or a finished game return *state* itself.
    An index outside 0–8 raises ``ValueError``.
    """
    if isinstance(cell_index, bool) or not isinstance(cell_index, int):
        raise ValueError(f"Cell index must be an integer, got {cell_index!r}.")
    if not 0 <= cell_index < CELLS:
        raise ValueError(f"Cell index must be between 0 and {CELLS - 1}, got {cell_index}.")

    if state.status.is_terminal or state.board[cell_index] is not None:
        return state

    board = list(state.board)
    board[cell_index] = state.active_mark
    board = tuple(board)
    return replace(
        state,
        board=board,
        active_mark=other_mark(state.active_mark),
    )


def status_message(state: TicTacToeState) -> str:
    if state.status.kind == "win":
        return f"Winner: {state.status.winner}"
    if state.status.kind == "draw":
        return "It's a draw!"
    return f"Next player: {state.active_mark}"
