"""CLI entry point: python -m playroom {tictactoe,snakes,board-image}."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from playroom import snakes
from playroom.config import DEFAULT_IMAGE_PATH, Settings
from playroom.render import describe_move, render_snakes, render_tictactoe
from playroom.shell import Die, SnakeLadderSession, TicTacToeSession

logger = logging.getLogger(__name__)

QUIT = {"q", "quit", "exit"}
RESTART = {"r", "restart"}


# ── tictactoe ────────────────────────────────────────────────────────

def play_tictactoe(
    session: TicTacToeSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Read cell indices until the player quits or input runs out."""
    while True:
        write(render_tictactoe(session.state))
        write(session.status_text)
        prompt = "r to restart, q to quit: " if session.is_over else "cell 0-8 (r restart, q quit): "
        try:
            line = read(prompt).strip().lower()
        except EOFError:
            return

        if line in QUIT:
            return
        if line in RESTART:
            session.restart()
            continue

        try:
            cell = int(line)
            accepted = session.click(cell)
        except ValueError:
            write(f"Not a cell: {line!r}. Type a number from 0 to 8.")
            continue
        if not accepted:
            write("That move is not allowed.")


# ── snakes ───────────────────────────────────────────────────────────

def play_snakes(
    session: SnakeLadderSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Roll on Enter until the player quits or input runs out."""
    write(session.status_text)
    while True:
        prompt = "r to restart, q to quit: " if session.is_over else "Enter to roll (r restart, q quit): "
        try:
            line = read(prompt).strip().lower()
        except EOFError:
            return

        if line in QUIT:
            return
        if line in RESTART:
            session.restart()
            write(session.status_text)
            continue
        if line:
            write(f"Unknown command: {line!r}.")
            continue
        if session.is_over:
            write("Game Over")
            continue

        session.roll()
        write(render_snakes(session.state))
        write(describe_move(session.state))
        write(session.status_text)


# ── board-image ──────────────────────────────────────────────────────

def cmd_board_image(args: argparse.Namespace, settings: Settings) -> None:
    """Play *rolls* random rolls, then draw the resulting board."""
    from playroom.image import save_board_image

    state = snakes.new_game()
    die = Die(settings.seed)
    for _ in range(args.rolls):
        if state.is_over:
            break
        state = snakes.apply_roll(state, die())

    out = save_board_image(state, output_path=args.output or DEFAULT_IMAGE_PATH)
    print(f"Board saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="playroom",
        description="Tic-Tac-Toe and Snake & Ladder for two players",
    )
    parser.add_argument("--log-level", help="Logging level (default WARNING)")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("tictactoe", aliases=["ttt"], help="Play Tic-Tac-Toe")

    p_snakes = sub.add_parser("snakes", aliases=["snl"], help="Play Snake & Ladder")
    p_snakes.add_argument("--seed", type=int, help="Seed for the die")
    p_snakes.add_argument("--delay", type=float, help="Pause before each roll, in seconds")

    p_image = sub.add_parser("board-image", help="Draw a Snake & Ladder board to PNG")
    p_image.add_argument("--rolls", type=int, default=0, help="Random rolls to play first")
    p_image.add_argument("--seed", type=int, help="Seed for the die")
    p_image.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"Bad environment setting: {exc}", file=sys.stderr)
        sys.exit(1)
    if args.log_level:
        settings.log_level = args.log_level.upper()
    if getattr(args, "seed", None) is not None:
        settings.seed = args.seed
    if getattr(args, "delay", None) is not None:
        settings.roll_delay = args.delay

    if not isinstance(logging.getLevelName(settings.log_level), int):
        print(f"Unknown log level: {settings.log_level}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Settings: %s", settings)

    if args.command in ("tictactoe", "ttt"):
        play_tictactoe(TicTacToeSession())
    elif args.command in ("snakes", "snl"):
        session = SnakeLadderSession(die=Die(settings.seed), roll_delay=settings.roll_delay)
        play_snakes(session)
    elif args.command == "board-image":
        cmd_board_image(args, settings)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
