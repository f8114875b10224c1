"""
Move emitters - recursive token generation.

Functional Core - pure, no I/O.

Each emitter produces the tokens for one square and recurses with one square
fewer, stopping at zero. Recursion depth equals the move count, which the
rules keep small.
"""

from __future__ import annotations

from matecheck.domain.entities import DIAGONAL_STEP, MoveToken

from .models import InvalidMoveCountError

SEPARATOR_RULE = "=========="


def check_remaining(remaining: int) -> None:
    """Reject negative counts; the recursion would never reach its base case."""
    if remaining < 0:
        raise InvalidMoveCountError(remaining)


def _diagonal(remaining: int) -> tuple[MoveToken, ...]:
    if remaining == 0:
        return ()
    return DIAGONAL_STEP + _diagonal(remaining - 1)


def _rightward(remaining: int) -> tuple[MoveToken, ...]:
    if remaining == 0:
        return ()
    return (MoveToken.RIGHT,) + _rightward(remaining - 1)


def _leftward(remaining: int) -> tuple[MoveToken, ...]:
    if remaining == 0:
        return ()
    return (MoveToken.LEFT,) + _leftward(remaining - 1)


def diagonal_moves(remaining: int) -> tuple[MoveToken, ...]:
    """Bishop: right then up, once per square."""
    check_remaining(remaining)
    return _diagonal(remaining)


def rightward_moves(remaining: int) -> tuple[MoveToken, ...]:
    """Rook: right, once per square."""
    check_remaining(remaining)
    return _rightward(remaining)


def leftward_moves(remaining: int) -> tuple[MoveToken, ...]:
    """Queen: left, once per square."""
    check_remaining(remaining)
    return _leftward(remaining)


def format_separator(title: str) -> tuple[str, ...]:
    """Section header surrounded by blank lines."""
    return ("", f"{SEPARATOR_RULE} {title} {SEPARATOR_RULE}", "")
