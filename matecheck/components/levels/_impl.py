"""
Level routines - loop-driven movement drills.

Functional Core - builds each level's lines without printing them.

- Beginner: one loop form per piece (counted, pre-checked, post-checked)
- Adventurer: knight via an outer counted loop around an inner pre-checked loop
- Master: knight via a two-counter loop with continue/break
"""

from __future__ import annotations

from matecheck.components.moves import format_separator
from matecheck.domain.entities import KnightLoopState, MoveToken, PieceKind
from matecheck.domain.state import KnightBounds, knight_state, transition
from matecheck.rules.models import MoveRules

from .models import ADVENTURER_TITLE, BEGINNER_TITLE


def squares(count: int) -> str:
    """'1 casa', '5 casas'."""
    return f"{count} casa" if count == 1 else f"{count} casas"


def beginner_lines(moves: MoveRules) -> tuple[str, ...]:
    bishop = moves.count_for(PieceKind.BISHOP)
    rook = moves.count_for(PieceKind.ROOK)
    queen = moves.count_for(PieceKind.QUEEN)
    lines = list(format_separator(BEGINNER_TITLE))

    # Bishop: counted loop, one diagonal step per iteration
    lines.append(f"Bispo: {squares(bishop)} na diagonal superior direita")
    for _ in range(bishop):
        lines.append(MoveToken.RIGHT.value)
        lines.append(MoveToken.UP.value)

    # Rook: condition checked before each step
    lines.append("")
    lines.append(f"Torre: {squares(rook)} para a direita")
    count = 0
    while count < rook:
        lines.append(MoveToken.RIGHT.value)
        count += 1

    # Queen: condition checked after each step, so at least one step
    lines.append("")
    lines.append(f"Rainha: {squares(queen)} para a esquerda")
    queen_count = 0
    while True:
        lines.append(MoveToken.LEFT.value)
        queen_count += 1
        if queen_count >= queen:
            break

    return tuple(lines)


def adventurer_lines(moves: MoveRules) -> tuple[str, ...]:
    knight = moves.knight
    lines = list(format_separator(ADVENTURER_TITLE))
    lines.append(
        f"Cavalo: Movimento em L ({squares(knight.vertical)} para baixo "
        f"e {squares(knight.horizontal)} para esquerda)"
    )

    for _ in range(knight.vertical):
        lines.append(MoveToken.DOWN.value)

        horizontal = 0
        while horizontal < knight.horizontal:
            lines.append(MoveToken.LEFT.value)
            horizontal += 1

    return tuple(lines)


def knight_moves(bounds: KnightBounds) -> tuple[MoveToken, ...]:
    """
    Knight L-move with two counters and no automatic increment.

    The vertical leg runs first. Finishing it skips straight back to the loop
    test; finishing the horizontal leg leaves the loop immediately.
    """
    tokens: list[MoveToken] = []
    # Only read by transition(), which raises if the counters step out of order
    state: KnightLoopState = "both_pending"
    vertical = 0
    horizontal = 0

    while vertical < bounds.vertical or horizontal < bounds.horizontal:
        if vertical < bounds.vertical:
            tokens.append(MoveToken.UP)
            vertical += 1
            state = transition(state, knight_state(vertical, horizontal, bounds))

            if vertical == bounds.vertical and horizontal < bounds.horizontal:
                continue

        if vertical == bounds.vertical and horizontal < bounds.horizontal:
            tokens.append(MoveToken.RIGHT)
            horizontal += 1
            state = transition(state, knight_state(vertical, horizontal, bounds))

            if horizontal == bounds.horizontal:
                break

    return tuple(tokens)
