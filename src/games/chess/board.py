"""The Game board: an 8x8 grid of pieces (None for an empty square) and the bookkeeping that only depends on it."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import BoardIndexError
from src.games.chess.pieces import Color, Piece, PieceType
from src.games.chess.square import BOARD_DIMENSIONS, Square

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

Grid = list[list[Optional[Piece]]]


@dataclass
class Board:
    squares: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls([[None] * BOARD_DIMENSIONS[0] for _ in range(BOARD_DIMENSIONS[1])])

    @classmethod
    def standard(cls) -> Self:
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def from_fen(cls, placement: str) -> Self:
        """Construct a board from the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, read from the a-file to the h-file
        * a number denotes that many consecutive empty squares
        * capital letters are the white pieces on ranks 2 and 1
        """
        board = cls.empty()
        ranks = placement.split("/")
        if len(ranks) != BOARD_DIMENSIONS[1]:
            raise ValueError(f"Expected {BOARD_DIMENSIONS[1]} ranks in {placement!r}")

        for row, fen_one_rank in enumerate(ranks):
            col = 0
            for character in fen_one_rank:
                if character.isdigit():
                    col += int(character)
                    continue
                if col >= BOARD_DIMENSIONS[0]:
                    raise ValueError(f"Rank {fen_one_rank!r} is longer than the board")
                board.squares[row][col] = Piece.from_code(character)
                col += 1
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes, the 8th rank first."""
        return "/".join(self._row_to_fen(row) for row in self.squares)

    def to_codes(self) -> list[list[str]]:
        """'P' / 'p' style piece codes, empty string for an empty square (what the frontend draws)"""
        return [[piece.to_code() if piece else "" for piece in row] for row in self.squares]

    def piece(self, square: Square) -> Optional[Piece]:
        if not square.is_within_bounds():
            raise BoardIndexError(f"Square {square.file, square.rank} is not on the board.")
        return self.squares[square.row][square.col]

    def place(self, square: Square, piece: Optional[Piece]) -> None:
        if not square.is_within_bounds():
            raise BoardIndexError(f"Square {square.file, square.rank} is not on the board.")
        self.squares[square.row][square.col] = piece

    def all_squares(self) -> list[Square]:
        return [
            Square(file, rank)
            for rank in range(BOARD_DIMENSIONS[1], 0, -1)
            for file in range(1, BOARD_DIMENSIONS[0] + 1)
        ]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square in self.all_squares()
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    def locate_king(self, color: Color) -> Optional[Square]:
        king = Piece(PieceType.KING, color)
        return next(
            (square for square in self.all_squares() if self.piece(square) == king), None
        )

    def is_path_clear(self, from_square: Square, to_square: Square) -> bool:
        """Are all squares strictly between the two squares empty? (for straight or diagonal lines only)"""
        df = _sign(to_square.file - from_square.file)
        dr = _sign(to_square.rank - from_square.rank)
        square = from_square.offset(df, dr)
        while square != to_square:
            if self.piece(square) is not None:
                return False
            square = square.offset(df, dr)
        return True

    def copy(self) -> "Board":
        """Pieces are immutable, so copying the rows is enough for an independent board."""
        return Board([list(row) for row in self.squares])

    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        totals = {color: 0 for color in Color}
        for row in self.squares:
            for piece in row:
                if piece is not None:
                    totals[piece.color] += piece.points
        return totals

    def _row_to_fen(self, row: list[Optional[Piece]]) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_code())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
