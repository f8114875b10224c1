"""
Levels component - The three movement drills.

Shell Layer - writes each level to an output port.
"""

from __future__ import annotations

import logging

from matecheck.components.moves import (
    MoveInput,
    run_bishop,
    run_queen,
    run_rook,
    run_separator,
    write_lines,
)
from matecheck.domain.entities import PieceKind
from matecheck.ports.output import OutputPort
from matecheck.rules.models import MoveRules

from ._impl import adventurer_lines, beginner_lines, knight_moves, squares
from .models import (
    ADVENTURER_TITLE,
    BEGINNER_TITLE,
    CLOSING_TITLE,
    MASTER_TITLE,
    LevelOutput,
)

logger = logging.getLogger(__name__)


def run_beginner(moves: MoveRules, out: OutputPort) -> LevelOutput:
    """Basic repetition: for, while and do-while style loops."""
    written = write_lines(beginner_lines(moves), out)
    logger.debug(f"{BEGINNER_TITLE}: {written} lines")
    return LevelOutput(title=BEGINNER_TITLE, lines_written=written)


def run_adventurer(moves: MoveRules, out: OutputPort) -> LevelOutput:
    """Nested loops for the knight."""
    written = write_lines(adventurer_lines(moves), out)
    logger.debug(f"{ADVENTURER_TITLE}: {written} lines")
    return LevelOutput(title=ADVENTURER_TITLE, lines_written=written)


def run_master(moves: MoveRules, out: OutputPort) -> LevelOutput:
    """Recursive emitters, then the knight's continue/break loop."""
    bishop_count = moves.count_for(PieceKind.BISHOP)
    rook_count = moves.count_for(PieceKind.ROOK)
    queen_count = moves.count_for(PieceKind.QUEEN)
    written = run_separator(MASTER_TITLE, out)

    written += write_lines(
        (f"Bispo: {squares(bishop_count)} na diagonal direita para cima (recursivo)",), out
    )
    bishop = run_bishop(MoveInput(remaining=bishop_count), out)

    written += write_lines(("", f"Torre: {squares(rook_count)} para a direita (recursivo)"), out)
    rook = run_rook(MoveInput(remaining=rook_count), out)

    written += write_lines(
        ("", f"Rainha: {squares(queen_count)} para a esquerda (recursivo)"), out
    )
    queen = run_queen(MoveInput(remaining=queen_count), out)

    written += write_lines(
        ("", "Cavalo: 1 vez em L para cima a direita (loops com break/continue)"), out
    )
    written += write_lines((token.value for token in knight_moves(moves.knight)), out)

    pieces = (bishop, rook, queen)
    written += sum(piece.lines_written for piece in pieces)
    logger.debug(f"{MASTER_TITLE}: {written} lines")
    return LevelOutput(title=MASTER_TITLE, lines_written=written, pieces=pieces)


def run_levels(moves: MoveRules, out: OutputPort) -> tuple[LevelOutput, ...]:
    """All three levels in order, then the closing separator."""
    results = (
        run_beginner(moves, out),
        run_adventurer(moves, out),
        run_master(moves, out),
    )
    run_separator(CLOSING_TITLE, out)
    return results
