"""
Levels component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from matecheck.components.moves import MoveOutput

BEGINNER_TITLE = "NIVEL NOVATO"
ADVENTURER_TITLE = "NIVEL AVENTUREIRO"
MASTER_TITLE = "NIVEL MESTRE"
CLOSING_TITLE = "FIM"


@dataclass(frozen=True)
class LevelOutput:
    """Output from a level run."""

    title: str
    lines_written: int
    # Recursive emitter runs, in call order (master level only)
    pieces: tuple[MoveOutput, ...] = ()
