"""Unit tests for /src/games/chess/board.py"""

import pytest

from src.core.exceptions import BoardIndexError
from src.games.chess.board import STARTING_POSITION, Board
from src.games.chess.pieces import Color, Piece, PieceType
from src.games.chess.square import Square

EMPTY_FEN = "/".join(["8"] * 8)


def test_standard_board() -> None:
    board = Board.standard()
    assert board.piece(Square.from_algebraic("e1")) == Piece(PieceType.KING, Color.WHITE)
    assert board.piece(Square.from_algebraic("d8")) == Piece(PieceType.QUEEN, Color.BLACK)
    assert board.piece(Square.from_algebraic("a2")) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.piece(Square.from_algebraic("e4")) is None
    assert board.to_fen() == STARTING_POSITION


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION,
        EMPTY_FEN,
        "6k1/5ppp/8/8/8/8/8/3Q2K1",
        "r3k2r/8/8/3pP3/8/8/8/R3K2R",
    ],
)
def test_fen_round_trip(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


@pytest.mark.parametrize("fen", ["8/8/8", "9/8/8/8/8/8/8/8/8", "ppppppppp/8/8/8/8/8/8/8"])
def test_malformed_fen(fen: str) -> None:
    with pytest.raises(ValueError):
        Board.from_fen(fen)


def test_to_codes() -> None:
    codes = Board.standard().to_codes()
    assert codes[0] == ["r", "n", "b", "q", "k", "b", "n", "r"]
    assert codes[4] == [""] * 8
    assert codes[7][4] == "K"


def test_off_board_access() -> None:
    board = Board.empty()
    with pytest.raises(BoardIndexError):
        board.piece(Square(0, 1))
    with pytest.raises(BoardIndexError):
        board.place(Square(1, 9), Piece(PieceType.PAWN, Color.WHITE))


def test_locate_king_and_color() -> None:
    board = Board.from_fen("6k1/5ppp/8/8/8/8/8/3Q2K1")
    assert board.locate_king(Color.WHITE) == Square.from_algebraic("g1")
    assert board.locate_king(Color.BLACK) == Square.from_algebraic("g8")
    assert len(board.locate_color(Color.BLACK)) == 4
    assert Board.empty().locate_king(Color.WHITE) is None


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("a1", "a8", False),
        ("a2", "a7", True),
        ("c1", "h6", False),
        ("d3", "h7", True),
    ],
)
def test_is_path_clear(start: str, end: str, expected: bool) -> None:
    board = Board.standard()
    assert board.is_path_clear(Square.from_algebraic(start), Square.from_algebraic(end)) is expected


def test_copy_is_independent() -> None:
    board = Board.standard()
    clone = board.copy()
    clone.place(Square.from_algebraic("e2"), None)
    assert board.piece(Square.from_algebraic("e2")) is not None


def test_count_material() -> None:
    assert Board.standard().count_material() == {Color.WHITE: 39, Color.BLACK: 39}
    assert Board.from_fen("6k1/5ppp/8/8/8/8/8/3Q2K1").count_material() == {
        Color.WHITE: 9,
        Color.BLACK: 3,
    }
