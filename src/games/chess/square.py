"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

BOARD_DIMENSIONS = (8, 8)

ALGEBRAIC_SQUARE = re.compile(r"^[a-h][1-8]$")


def is_valid_square(sq: str) -> bool:
    """'a1' - 'h8'. Anything else is rejected before it reaches `Square.from_algebraic()`"""
    return bool(ALGEBRAIC_SQUARE.match(sq))


@dataclass(frozen=True)
class Square:
    """file 1-8 (a-h) and rank 1-8, white starts on ranks 1 and 2."""

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        file = ord(sq[0]) - ord("a") + 1
        rank = int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )

    def offset(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)

    @property
    def row(self) -> int:
        """Index into the 2-D board: row 0 holds rank 8, as the board is printed from black's side down."""
        return BOARD_DIMENSIONS[1] - self.rank

    @property
    def col(self) -> int:
        return self.file - 1

    def __str__(self) -> str:
        return self.to_algebraic()
