"""Square type and coordinate helpers.

Board layout (row 0 at the top, as the board is drawn):
    a8=(0, 0), b8=(1, 0), ..., h8=(7, 0)
    ...
    a1=(0, 7), b1=(1, 7), ..., h1=(7, 7)

Pawns advance toward row 0, which is therefore the promotion row.
"""

from __future__ import annotations

from typing import Final, NamedTuple

BOARD_SIZE: Final = 8
PROMOTION_ROW: Final = 0
BACK_ROW: Final = BOARD_SIZE - 1


class Square(NamedTuple):
    """Board coordinate: ``x`` is the file (a-h), ``y`` the row from the top."""

    x: int
    y: int

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(x: int, y: int) -> bool:
    """Check whether a coordinate pair lies on the 8x8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def file_char(sq: Square) -> str:
    """File letter, e.g. (4, 6) → 'e'."""
    return chr(ord("a") + sq.x)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (0, 0) → 'a8', (7, 7) → 'h1'."""
    return f"{file_char(sq)}{BOARD_SIZE - sq.y}"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(ord(name[0]) - ord("a"), BOARD_SIZE - int(name[1]))


ALL_SQUARES: Final = tuple(
    Square(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)
)
