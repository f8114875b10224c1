from enum import Enum
from typing import Literal

# --- Enums / Literals ---


class MoveToken(str, Enum):
    """One step of a piece, as printed on the console."""

    RIGHT = "Direita"
    UP = "Cima"
    LEFT = "Esquerda"
    DOWN = "Baixo"


class PieceKind(str, Enum):
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KNIGHT = "knight"


KnightLoopState = Literal["both_pending", "vertical_done", "done"]

# Diagonal step = right followed by up
DIAGONAL_STEP: tuple[MoveToken, ...] = (MoveToken.RIGHT, MoveToken.UP)
