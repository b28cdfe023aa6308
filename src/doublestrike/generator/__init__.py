"""Puzzle generation APIs."""

from doublestrike.generator.config import (
    MAX_PIECE_COUNT,
    MIN_PIECE_COUNT,
    GeneratorSettings,
)
from doublestrike.generator.construction import (
    attempt_construction,
    find_uncapture_square,
    random_square,
)
from doublestrike.generator.errors import (
    DoubleStrikeError,
    GenerationCancelled,
    GenerationExhausted,
    NoPuzzleError,
    PieceCountOutOfRange,
)
from doublestrike.generator.models import AttemptOutcome, AttemptStatus, Puzzle
from doublestrike.generator.service import PuzzleGenerator
from doublestrike.generator.validator import (
    MAX_MOVES_PER_PIECE,
    ValidationResult,
    replay_solution,
    validate_solution,
)
from doublestrike.generator.weights import (
    PIECE_WEIGHTS,
    REPEAT_PENALTY,
    adjusted_weights,
    draw_piece_kind,
)

__all__ = [
    "MAX_MOVES_PER_PIECE",
    "MAX_PIECE_COUNT",
    "MIN_PIECE_COUNT",
    "PIECE_WEIGHTS",
    "REPEAT_PENALTY",
    "AttemptOutcome",
    "AttemptStatus",
    "DoubleStrikeError",
    "GenerationCancelled",
    "GenerationExhausted",
    "GeneratorSettings",
    "NoPuzzleError",
    "PieceCountOutOfRange",
    "Puzzle",
    "PuzzleGenerator",
    "ValidationResult",
    "adjusted_weights",
    "attempt_construction",
    "draw_piece_kind",
    "find_uncapture_square",
    "random_square",
    "replay_solution",
    "validate_solution",
]
