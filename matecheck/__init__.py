"""
MateCheck - chess piece movement drills.

Prints move tokens for bishop, rook, queen and knight across three levels of
repetition constructs: basic loops, nested loops, and recursion.
"""

__version__ = "1.0.0"
