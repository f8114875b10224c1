"""
Moves component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from matecheck.domain.entities import MoveToken, PieceKind

# --- Errors ---


class InvalidMoveCountError(ValueError):
    """Raised when an emitter is asked for a negative number of moves."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"Remaining move count must be >= 0, got {remaining}")


# --- Input Models ---


@dataclass(frozen=True)
class MoveInput:
    """Input for emitting a piece's moves."""

    remaining: int


# --- Output Models ---


@dataclass(frozen=True)
class MoveOutput:
    """Output from a move emitter run."""

    piece: PieceKind
    tokens: tuple[MoveToken, ...]
    lines_written: int
