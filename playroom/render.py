"""Plain-text views of both games for the terminal front end."""

from __future__ import annotations

from playroom.board import board_rows, is_ladder, is_snake
from playroom.snakes import SnakeLadderState
from playroom.tictactoe import TicTacToeState, winning_line

PLAYER_TOKENS = ("1", "2")


def render_tictactoe(state: TicTacToeState) -> str:
    """3×3 grid; empty cells show their index so players know what to type.

    Cells on the winning line are wrapped in brackets.
    """
    line = winning_line(state.board) or ()
    cells = []
    for i, cell in enumerate(state.board):
        text = cell if cell is not None else str(i)
        cells.append(f"[{text}]" if i in line else f" {text} ")

    rows = ["|".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---+---+---\n".join(rows)


def _square_cell(number: int, state: SnakeLadderState) -> str:
    if is_snake(number):
        marker = "S"
    elif is_ladder(number):
        marker = "L"
    else:
        marker = " "
    tokens = "".join(
        PLAYER_TOKENS[i] for i, pos in enumerate(state.positions) if pos == number
    )
    return f"{number:>3}{marker}{tokens:<2}"


def render_snakes(state: SnakeLadderState) -> str:
    """10×10 serpentine board, 100 top-left, 1 bottom-left.

    ``S`` marks a snake head, ``L`` a ladder foot, ``1``/``2`` the pawns.
    """
    lines = [" ".join(_square_cell(n, state) for n in row) for row in board_rows()]
    if state.last_roll is not None and not state.is_over:
        lines.append(f"Last Dice: {state.last_roll}")
    return "\n".join(lines)


def describe_move(state: SnakeLadderState) -> str | None:
    """One-line account of the last roll, e.g. ``Player 1: 1 → 2 → 38``."""
    move = state.last_move
    if move is None:
        return None
    if move.overshoot:
        return f"Player {move.player + 1} stays on {move.start} (rolled {move.roll})."
    hops = " → ".join(str(sq) for sq in [move.start, *move.path])
    return f"Player {move.player + 1} rolled {move.roll}: {hops}"
