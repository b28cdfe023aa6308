"""Generator settings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

MIN_PIECE_COUNT = 3
MAX_PIECE_COUNT = 27


@dataclass(frozen=True, slots=True)
class GeneratorSettings:
    """Search bounds for puzzle generation.

    Args:
        min_pieces: Smallest accepted target piece count.
        max_pieces: Largest accepted target piece count.
        max_attempts: Whole-attempt restarts before giving up.
        max_steps: Un-capture steps tried within one attempt.
        max_insert_tries: Random squares tried when inserting a fresh piece.
        quadrant_bias: Chance that a random square is drawn from one quadrant.
    """

    min_pieces: int = MIN_PIECE_COUNT
    max_pieces: int = MAX_PIECE_COUNT
    max_attempts: int = 10_000
    max_steps: int = 100
    max_insert_tries: int = 20
    quadrant_bias: float = 0.3

    def __post_init__(self) -> None:
        if self.min_pieces < 2:
            raise ValueError(f"min_pieces must be at least 2, got {self.min_pieces}")
        if self.max_pieces < self.min_pieces:
            raise ValueError(
                f"max_pieces ({self.max_pieces}) is below min_pieces "
                f"({self.min_pieces})"
            )
        if self.max_pieces > 64:
            raise ValueError(f"max_pieces cannot exceed 64, got {self.max_pieces}")
        for name in ("max_attempts", "max_steps", "max_insert_tries"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")
        if not (0.0 <= self.quadrant_bias <= 1.0):
            raise ValueError(
                f"quadrant_bias must be within [0, 1], got {self.quadrant_bias}"
            )

    def accepts(self, piece_count: int) -> bool:
        return self.min_pieces <= piece_count <= self.max_pieces

    def with_overrides(self, **changes: Any) -> GeneratorSettings:
        """Copy with some fields replaced; validation runs again."""
        return replace(self, **changes)
