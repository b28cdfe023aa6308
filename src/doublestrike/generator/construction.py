"""Reverse construction of Double Strike puzzles.

A puzzle is built backward from its end state: one surviving piece is
placed, then pieces are repeatedly walked back along a legal capture line
and a freshly drawn piece is dropped on the square they left. Read
forward, each of those steps is a capture. Once the board holds the
requested number of pieces the recorded moves are reversed and replayed
by the validator.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import NamedTuple

from doublestrike.core.board import Board, PlacementError
from doublestrike.core.enums import MoveDirection, PieceKind
from doublestrike.core.move import SolutionMove
from doublestrike.core.rules import is_legal_move
from doublestrike.core.types import (
    ALL_SQUARES,
    BACK_ROW,
    BOARD_SIZE,
    PROMOTION_ROW,
    Square,
    is_on_board,
)
from doublestrike.generator.config import GeneratorSettings
from doublestrike.generator.models import AttemptOutcome, AttemptStatus, Puzzle
from doublestrike.generator.validator import MAX_MOVES_PER_PIECE, validate_solution
from doublestrike.generator.weights import PIECE_WEIGHTS, draw_piece_kind

_HALF = BOARD_SIZE // 2


class Uncapture(NamedTuple):
    """Where a mover came from and what it was before the capture."""

    square: Square
    kind: PieceKind
    promotion: bool = False


@dataclass(slots=True)
class ConstructionState:
    """Mutable state owned by exactly one attempt."""

    board: Board = field(default_factory=Board)
    move_counts: dict[int, int] = field(default_factory=dict)
    moves: list[SolutionMove] = field(default_factory=list)
    last_kind: PieceKind | None = None

    def draw_kind(self, rng: random.Random, *, allow_king: bool = False) -> PieceKind:
        kind = draw_piece_kind(
            rng, PIECE_WEIGHTS, self.last_kind, allow_king=allow_king
        )
        self.last_kind = kind
        return kind

    def place(self, kind: PieceKind, sq: Square) -> int:
        piece_id = self.board.place(kind, sq)
        self.move_counts[piece_id] = 0
        return piece_id

    def movers(self) -> list[tuple[Square, int]]:
        """Pieces that may still make another move."""
        return [
            (sq, piece.piece_id)
            for sq, piece in self.board.occupied()
            if self.move_counts.get(piece.piece_id, 0) < MAX_MOVES_PER_PIECE
        ]


def random_square(rng: random.Random, quadrant_bias: float = 0.3) -> Square:
    """Uniform square, or with *quadrant_bias* chance one from a random quadrant."""
    if rng.random() < quadrant_bias:
        quadrant = rng.randrange(4)
        x = rng.randrange(_HALF) + (quadrant % 2) * _HALF
        y = rng.randrange(_HALF) + (quadrant // 2) * _HALF
        return Square(x, y)
    return Square(rng.randrange(BOARD_SIZE), rng.randrange(BOARD_SIZE))


def _promotion_origins(board: Board, sq: Square) -> list[Square]:
    """Empty squares from which a pawn could have captured onto *sq*."""
    origins: list[Square] = []
    for dx in (-1, 1):
        x, y = sq.x + dx, sq.y + 1
        if is_on_board(x, y) and board.is_empty(Square(x, y)):
            origins.append(Square(x, y))
    return origins


def find_uncapture_square(
    board: Board, sq: Square, kind: PieceKind, rng: random.Random
) -> Uncapture | None:
    """Pick an empty square the piece on *sq* could have captured from.

    A promotable piece standing on the promotion row may instead have been
    a pawn that captured and promoted there; such origins win when present.
    """
    if sq.y == PROMOTION_ROW and kind.is_promotable:
        origins = _promotion_origins(board, sq)
        if origins:
            return Uncapture(rng.choice(origins), PieceKind.PAWN, promotion=True)

    candidates = [
        to
        for to in ALL_SQUARES
        if board.is_empty(to)
        and is_legal_move(board, sq, to, kind, MoveDirection.BACKWARD)
    ]
    if not candidates:
        return None
    return Uncapture(rng.choice(candidates), kind)


def _insert_fresh_piece(
    state: ConstructionState, rng: random.Random, settings: GeneratorSettings
) -> None:
    for _ in range(settings.max_insert_tries):
        sq = random_square(rng, settings.quadrant_bias)
        if state.board.is_empty(sq):
            state.place(state.draw_kind(rng), sq)
            return


def _uncapture_step(
    state: ConstructionState, rng: random.Random, sq: Square, piece_id: int
) -> bool:
    """Walk the piece on *sq* back one capture; False if it has nowhere to go."""
    board = state.board
    kind = board.kind_at(sq)
    assert kind is not None
    found = find_uncapture_square(board, sq, kind, rng)
    if found is None:
        return False

    board.relocate(sq, found.square, found.kind)
    state.move_counts[piece_id] = state.move_counts.get(piece_id, 0) + 1
    captured = state.draw_kind(rng)
    state.place(captured, sq)
    state.moves.append(
        SolutionMove(
            src=found.square,
            dst=sq,
            piece=kind,
            captured=captured,
            piece_id=piece_id,
            promotion=found.promotion,
        )
    )
    return True


def attempt_construction(
    target: int,
    settings: GeneratorSettings,
    rng: random.Random,
    final_kind: PieceKind | None = None,
) -> AttemptOutcome:
    """Run one construction attempt from a fresh, empty board."""
    state = ConstructionState()
    kind = final_kind if final_kind is not None else rng.choice(list(PieceKind))

    final_sq = random_square(rng, settings.quadrant_bias)
    if kind == PieceKind.PAWN and final_sq.y in (PROMOTION_ROW, BACK_ROW):
        return AttemptOutcome(
            AttemptStatus.INVALID_PLACEMENT, detail="final pawn on an edge row"
        )

    try:
        state.place(kind, final_sq)
        steps = 0
        while state.board.piece_count() < target and steps < settings.max_steps:
            steps += 1
            movers = state.movers()
            if not movers:
                _insert_fresh_piece(state, rng, settings)
                continue
            sq, piece_id = rng.choice(movers)
            _uncapture_step(state, rng, sq, piece_id)
    except PlacementError as exc:
        return AttemptOutcome(AttemptStatus.INVALID_PLACEMENT, detail=str(exc))

    if state.board.piece_count() != target:
        return AttemptOutcome(AttemptStatus.STEP_BUDGET_EXHAUSTED)

    solution = tuple(reversed(state.moves))
    result = validate_solution(state.board, solution)
    if not result:
        return AttemptOutcome(AttemptStatus.VALIDATION_FAILED, detail=result.reason)

    return AttemptOutcome(
        AttemptStatus.SUCCESS,
        puzzle=Puzzle(board=state.board, solution=solution, final_kind=kind),
    )
