"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


CODE_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_CODE: dict[PieceType, str] = {value: key for key, value in CODE_TO_PIECE.items()}


PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @property
    def points(self) -> int:
        # NOTE: The King's worth is undefined (capturing it never happens)
        return PIECE_POINTS.get(self.type, 0)

    @classmethod
    def from_code(cls, character: str) -> Self:
        """lower case: Black pieces, upper case: White pieces"""
        if character.lower() not in CODE_TO_PIECE:
            raise ValueError(f"Unknown piece code {character!r}")
        color = Color.WHITE if character.isupper() else Color.BLACK
        return cls(CODE_TO_PIECE[character.lower()], color)

    def to_code(self) -> str:
        code = PIECE_TO_CODE[self.type]
        return code.upper() if self.color == Color.WHITE else code

    def promoted(self, new_type: PieceType) -> "Piece":
        return Piece(new_type, self.color)
