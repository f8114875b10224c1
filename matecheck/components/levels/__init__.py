"""
Levels component - Beginner, adventurer and master movement drills.

Invariants:
- I1: Levels always run beginner, adventurer, master, then the closing separator
- I2: The knight's master loop finishes its vertical leg before moving horizontally
"""

from ._impl import adventurer_lines, beginner_lines, knight_moves, squares
from .component import run_adventurer, run_beginner, run_levels, run_master
from .models import (
    ADVENTURER_TITLE,
    BEGINNER_TITLE,
    CLOSING_TITLE,
    MASTER_TITLE,
    LevelOutput,
)

__all__ = [
    # Entry points
    "run_beginner",
    "run_adventurer",
    "run_master",
    "run_levels",
    # Functional core
    "beginner_lines",
    "adventurer_lines",
    "knight_moves",
    "squares",
    # Models
    "LevelOutput",
    "BEGINNER_TITLE",
    "ADVENTURER_TITLE",
    "MASTER_TITLE",
    "CLOSING_TITLE",
]
