"""Weighted random choice of piece kinds."""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Final

from doublestrike.core.enums import PieceKind

PIECE_WEIGHTS: Final[Mapping[PieceKind, float]] = {
    PieceKind.PAWN: 3,
    PieceKind.KNIGHT: 4,
    PieceKind.BISHOP: 4,
    PieceKind.ROOK: 2,
    PieceKind.QUEEN: 1,
    PieceKind.KING: 100,  # only drawn when explicitly allowed
}

REPEAT_PENALTY: Final = 0.1


def adjusted_weights(
    weights: Mapping[PieceKind, float] = PIECE_WEIGHTS,
    last_kind: PieceKind | None = None,
    *,
    allow_king: bool = False,
) -> dict[PieceKind, float]:
    """Effective weights for one draw, in *weights* order."""
    table: dict[PieceKind, float] = {}
    for kind, weight in weights.items():
        if kind == PieceKind.KING and not allow_king:
            continue
        table[kind] = weight * REPEAT_PENALTY if kind == last_kind else weight
    return table


def draw_piece_kind(
    rng: random.Random,
    weights: Mapping[PieceKind, float] = PIECE_WEIGHTS,
    last_kind: PieceKind | None = None,
    *,
    allow_king: bool = False,
) -> PieceKind:
    """Sample a piece kind, damping the weight of *last_kind*.

    The caller keeps track of the previous draw and passes it back in.
    """
    table = adjusted_weights(weights, last_kind, allow_king=allow_king)
    if not table:
        raise ValueError("No piece kinds available to draw from")
    kinds = list(table)
    return rng.choices(kinds, weights=[table[k] for k in kinds])[0]
