"""Exceptions surfaced by the puzzle generator."""

from __future__ import annotations


class DoubleStrikeError(Exception):
    """Base class for generator errors."""


class PieceCountOutOfRange(DoubleStrikeError, ValueError):
    """The requested piece count lies outside the configured bounds."""

    def __init__(self, requested: int, minimum: int, maximum: int) -> None:
        super().__init__(
            f"Piece count {requested} is outside the allowed range "
            f"{minimum}..{maximum}"
        )
        self.requested = requested
        self.minimum = minimum
        self.maximum = maximum


class GenerationExhausted(DoubleStrikeError, RuntimeError):
    """No valid puzzle was found within the attempt budget."""

    def __init__(self, target: int, attempts: int) -> None:
        super().__init__(
            f"Could not generate a valid {target}-piece puzzle "
            f"after {attempts} attempts"
        )
        self.target = target
        self.attempts = attempts


class GenerationCancelled(DoubleStrikeError):
    """Raised when a running generation was cancelled between attempts."""


class NoPuzzleError(DoubleStrikeError, RuntimeError):
    """Puzzle output was requested before a successful generation."""
