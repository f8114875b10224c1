"""
Moves component - Recursive piece movement.

Shell Layer - writes the functional core's tokens to an output port.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from matecheck.domain.entities import MoveToken, PieceKind
from matecheck.ports.output import OutputPort

from ._impl import diagonal_moves, format_separator, leftward_moves, rightward_moves
from .models import MoveInput, MoveOutput

logger = logging.getLogger(__name__)


def write_lines(lines: Iterable[str], out: OutputPort) -> int:
    """Write lines in order; returns how many were written."""
    written = 0
    for line in lines:
        out.write_line(line)
        written += 1
    return written


def run_separator(title: str, out: OutputPort) -> int:
    """Print a section separator."""
    return write_lines(format_separator(title), out)


def _run(
    piece: PieceKind,
    emitter: Callable[[int], tuple[MoveToken, ...]],
    input_data: MoveInput,
    out: OutputPort,
) -> MoveOutput:
    # Tokens are computed before anything is written, so a bad count prints nothing
    tokens = emitter(input_data.remaining)
    written = write_lines((token.value for token in tokens), out)
    logger.debug(f"{piece.value}: {input_data.remaining} squares, {written} lines")
    return MoveOutput(piece=piece, tokens=tokens, lines_written=written)


def run_bishop(input_data: MoveInput, out: OutputPort) -> MoveOutput:
    """Move the bishop along the upper-right diagonal."""
    return _run(PieceKind.BISHOP, diagonal_moves, input_data, out)


def run_rook(input_data: MoveInput, out: OutputPort) -> MoveOutput:
    """Move the rook to the right."""
    return _run(PieceKind.ROOK, rightward_moves, input_data, out)


def run_queen(input_data: MoveInput, out: OutputPort) -> MoveOutput:
    """Move the queen to the left."""
    return _run(PieceKind.QUEEN, leftward_moves, input_data, out)
