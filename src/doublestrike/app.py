"""Command-line entry point: print a freshly generated puzzle."""

from __future__ import annotations

import argparse
import logging
import sys

from doublestrike.core.board import Board
from doublestrike.core.enums import PieceKind
from doublestrike.core.piece import kind_from_char, kind_symbol
from doublestrike.core.types import BOARD_SIZE, Square
from doublestrike.generator import (
    MAX_PIECE_COUNT,
    MIN_PIECE_COUNT,
    DoubleStrikeError,
    GeneratorSettings,
    PuzzleGenerator,
)


def _final_kind(text: str) -> PieceKind:
    try:
        return kind_from_char(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doublestrike",
        description="Generate a capture-only chess puzzle.",
    )
    parser.add_argument(
        "-n",
        "--pieces",
        type=int,
        default=8,
        help=f"pieces on the starting board ({MIN_PIECE_COUNT}-{MAX_PIECE_COUNT})",
    )
    parser.add_argument(
        "-f",
        "--final",
        type=_final_kind,
        default=None,
        help="letter of the piece that must survive (K, Q, R, B, N or P)",
    )
    parser.add_argument("-s", "--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--attempts",
        type=int,
        default=GeneratorSettings().max_attempts,
        help="attempt budget before giving up",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def render_board(board: Board) -> str:
    """Unicode diagram of *board* with rank and file labels."""
    rows: list[str] = []
    for y in range(BOARD_SIZE):
        cells = []
        for x in range(BOARD_SIZE):
            kind = board.kind_at(Square(x, y))
            cells.append(kind_symbol(kind) if kind is not None else "·")
        rows.append(f"{BOARD_SIZE - y} {' '.join(cells)}")
    rows.append("  a b c d e f g h")
    return "\n".join(rows)


def main(argv: list[str] | None = None) -> int:
    """Generate one puzzle and print it; returns the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = GeneratorSettings(max_attempts=args.attempts)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    generator = PuzzleGenerator(settings, final_kind=args.final, seed=args.seed)
    try:
        puzzle = generator.generate(args.pieces)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except DoubleStrikeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(puzzle.fen)
    print()
    print(render_board(puzzle.board))
    print()
    for number, san in enumerate(puzzle.notation, start=1):
        print(f"{number:>2}. {san}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
