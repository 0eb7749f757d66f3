"""Board layout and chase rules for Snake & Ladder."""

from __future__ import annotations

BOARD_SIZE = 10
START_SQUARE = 1
FINAL_SQUARE = BOARD_SIZE * BOARD_SIZE

# fmt: off
SNAKES: dict[int, int] = {
    99:  7,  92: 35,  74: 53,  62: 19,
    49: 11,  46: 25,  16:  6,
}

LADDERS: dict[int, int] = {
     2: 38,   7: 14,  22: 58,  28: 84,  36: 44,
    51: 67,  71: 91,  78: 98,  87: 94,
}
# fmt: on


class BoardLayoutError(ValueError):
    """Raised when a snake/ladder table breaks a layout rule."""


def is_snake(square: int) -> bool:
    return square in SNAKES


def is_ladder(square: int) -> bool:
    return square in LADDERS


def jump_destination(square: int) -> int | None:
    """Where a snake or ladder on *square* sends you, if anything."""
    if square in SNAKES:
        return SNAKES[square]
    return LADDERS.get(square)


def resolve_square(
    square: int,
    snakes: dict[int, int] = SNAKES,
    ladders: dict[int, int] = LADDERS,
) -> tuple[int, tuple[int, ...]]:
    """Follow snakes and ladders from *square* until it lands on a plain square.

    Returns the final square and the path visited, starting with *square*.
    Snakes are checked before ladders on every hop.
    """
    path = [square]
    while True:
        if square in snakes:
            square = snakes[square]
        elif square in ladders:
            square = ladders[square]
        else:
            return square, tuple(path)
        path.append(square)


def validate_layout(snakes: dict[int, int], ladders: dict[int, int]) -> None:
    """Check a snake/ladder table once, before any game uses it."""
    overlap = sorted(set(snakes) & set(ladders))
    if overlap:
        raise BoardLayoutError(f"Square {overlap[0]} has both a snake and a ladder.")

    for kind, table in (("snake", snakes), ("ladder", ladders)):
        for square, dest in table.items():
            for sq in (square, dest):
                if not START_SQUARE <= sq <= FINAL_SQUARE:
                    raise BoardLayoutError(
                        f"The {kind} at {square} uses square {sq}, outside 1–{FINAL_SQUARE}."
                    )
            if dest == square:
                raise BoardLayoutError(f"The {kind} at {square} maps to itself.")
            if kind == "snake" and dest > square:
                raise BoardLayoutError(f"The snake at {square} goes up to {dest}.")
            if kind == "ladder" and dest < square:
                raise BoardLayoutError(f"The ladder at {square} goes down to {dest}.")
            if square in (START_SQUARE, FINAL_SQUARE):
                raise BoardLayoutError(f"Square {square} cannot hold a {kind}.")

    jumps = {**snakes, **ladders}
    for square in jumps:
        seen = {square}
        sq = jumps[square]
        while sq in jumps:
            if sq in seen:
                raise BoardLayoutError(f"Snakes and ladders form a cycle through {sq}.")
            seen.add(sq)
            sq = jumps[sq]


def board_rows() -> list[list[int]]:
    """Square numbers row by row, top row first, in serpentine order.

    Square 1 is bottom-left; odd rows (counting from the bottom, 0-based)
    run right to left.
    """
    rows = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        numbers = [row * BOARD_SIZE + col + 1 for col in range(BOARD_SIZE)]
        if row % 2 == 1:
            numbers.reverse()
        rows.append(numbers)
    return rows


def square_coordinates(square: int) -> tuple[int, int]:
    """Return ``(column, row)`` of *square*, row 0 being the bottom row."""
    if not START_SQUARE <= square <= FINAL_SQUARE:
        raise ValueError(f"Square {square} is not on the board.")
    row, offset = divmod(square - 1, BOARD_SIZE)
    col = BOARD_SIZE - 1 - offset if row % 2 == 1 else offset
    return col, row


validate_layout(SNAKES, LADDERS)
