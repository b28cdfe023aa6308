"""FEN board-field parsing and serialization."""

from __future__ import annotations

from doublestrike.core.board import Board
from doublestrike.core.piece import kind_char, kind_from_char
from doublestrike.core.types import BOARD_SIZE, Square


def board_to_fen(board: Board) -> str:
    """Serialise *board* to the FEN piece-placement field (top row first)."""
    rows: list[str] = []
    for y in range(BOARD_SIZE):
        empty = 0
        row = ""
        for x in range(BOARD_SIZE):
            kind = board.kind_at(Square(x, y))
            if kind is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += kind_char(kind)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def board_from_fen(text: str) -> Board:
    """Parse a FEN placement field into a :class:`Board` with fresh identities.

    A full FEN is accepted too; only its first field is read.
    """
    fields = text.split()
    if not fields:
        raise ValueError("Empty FEN")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {text!r}")

    board = Board()
    for y, rank_text in enumerate(ranks):
        x = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {text!r}")
                x += step
            else:
                if x >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {text!r}")
                board.place(kind_from_char(ch), Square(x, y))
                x += 1
            if x > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {text!r}")
        if x != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {text!r}")
    return board


def full_fen(
    board_field: str,
    *,
    side: str = "w",
    castling: str = "-",
    en_passant: str = "-",
    halfmove: int = 0,
    fullmove: int = 1,
) -> str:
    """Append the non-board FEN fields; the defaults suit every puzzle."""
    return f"{board_field} {side} {castling} {en_passant} {halfmove} {fullmove}"
