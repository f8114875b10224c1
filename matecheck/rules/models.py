from pydantic import BaseModel, Field

from matecheck.domain.entities import PieceKind


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class KnightRules(BaseModel):
    # The knight loop leaves through its horizontal branch, so both legs need a step
    vertical: int = Field(default=2, ge=1)
    horizontal: int = Field(default=1, ge=1)


class MoveRules(BaseModel):
    bishop: int = Field(default=5, ge=0)
    rook: int = Field(default=5, ge=0)
    queen: int = Field(default=8, ge=0)
    knight: KnightRules = Field(default_factory=KnightRules)

    def count_for(self, piece: PieceKind) -> int:
        """
        Number of squares a straight-line piece moves.

        The knight has two legs; read them from `knight` instead.
        """
        if piece == PieceKind.KNIGHT:
            raise ValueError("Knight moves have two legs; use rules.knight")
        counts = {
            PieceKind.BISHOP: self.bishop,
            PieceKind.ROOK: self.rook,
            PieceKind.QUEEN: self.queen,
        }
        return counts[piece]


class Rules(BaseModel):
    project: ProjectRules
    moves: MoveRules = Field(default_factory=MoveRules)
