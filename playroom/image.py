"""Draw the Snake & Ladder board to a PNG."""

from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from playroom.board import BOARD_SIZE, LADDERS, SNAKES, square_coordinates
from playroom.config import DEFAULT_IMAGE_PATH, LADDER_COLOR, PLAYER_COLORS, SNAKE_COLOR
from playroom.snakes import SnakeLadderState


def _center(square: int) -> tuple[float, float]:
    col, row = square_coordinates(square)
    return col + 0.5, row + 0.5


def save_board_image(
    state: SnakeLadderState,
    output_path: str | Path = DEFAULT_IMAGE_PATH,
    title: str = "Snake & Ladder",
) -> str:
    """Render the board, every snake and ladder, and both pawns.

    Returns the path to the saved PNG.
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    for square in range(1, BOARD_SIZE * BOARD_SIZE + 1):
        col, row = square_coordinates(square)
        if square in SNAKES:
            face = (1.0, 0.6, 0.0, 0.14)
        elif square in LADDERS:
            face = (0.26, 0.63, 0.28, 0.12)
        else:
            face = "white"
        ax.add_patch(Rectangle((col, row), 1, 1, facecolor=face, edgecolor="#d1d7db"))
        ax.text(col + 0.06, row + 0.94, str(square), fontsize=7, va="top", color="#707070")

    for table, color in ((LADDERS, LADDER_COLOR), (SNAKES, SNAKE_COLOR)):
        for start, end in table.items():
            x0, y0 = _center(start)
            x1, y1 = _center(end)
            ax.annotate(
                "", xy=(x1, y1), xytext=(x0, y0),
                arrowprops=dict(arrowstyle="-|>", color=color, lw=2, alpha=0.8),
            )

    # Offset the pawns so both stay visible on a shared square
    for player, square in enumerate(state.positions):
        x, y = _center(square)
        ax.scatter(
            x - 0.18 + 0.36 * player, y - 0.2,
            s=180, color=PLAYER_COLORS[player], edgecolors="white", linewidths=2, zorder=3,
        )

    ax.set_xlim(0, BOARD_SIZE)
    ax.set_ylim(0, BOARD_SIZE)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(f"{title}\n{state.message}", fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return str(output_path)
