"""
Moves component - Recursive move emitters and section separators.

Invariants:
- I1: N remaining squares emit exactly N steps, in order
- I2: Zero remaining squares emit nothing
- I3: Negative counts are rejected before any output
"""

from ._impl import (
    check_remaining,
    diagonal_moves,
    format_separator,
    leftward_moves,
    rightward_moves,
)
from .component import run_bishop, run_queen, run_rook, run_separator, write_lines
from .models import InvalidMoveCountError, MoveInput, MoveOutput

__all__ = [
    # Entry points
    "run_bishop",
    "run_rook",
    "run_queen",
    "run_separator",
    "write_lines",
    # Functional core
    "check_remaining",
    "diagonal_moves",
    "rightward_moves",
    "leftward_moves",
    "format_separator",
    # Models
    "MoveInput",
    "MoveOutput",
    "InvalidMoveCountError",
]
