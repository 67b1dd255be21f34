"""Unit tests for /src/games/chess/engine.py"""

import pytest

from src.core.shared_types import Status
from src.games.chess.board import Board
from src.games.chess.engine import ChessEngine
from src.games.chess.pieces import Color, Piece, PieceType
from src.games.chess.square import Square

BACK_RANK_FEN = "6k1/5ppp/8/8/8/8/8/3Q2K1"
PINNED_ROOK_FEN = "k3r3/8/8/8/8/8/4R3/4K3"
ALMOST_STALEMATE_FEN = "7k/8/5Q2/8/8/8/8/K7"


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


@pytest.fixture
def engine() -> ChessEngine:
    return ChessEngine()


def play(engine: ChessEngine, *moves: str) -> None:
    """Play a sequence of moves written as 'e2e4'. Each of them has to be accepted."""
    for move in moves:
        assert engine.make_move(sq(move[:2]), sq(move[2:])), move


def test_twenty_moves_from_the_start(engine: ChessEngine) -> None:
    assert len(engine.legal_moves()) == 20
    assert len(engine.legal_moves(Color.BLACK)) == 20


def test_turns_alternate(engine: ChessEngine) -> None:
    play(engine, "e2e4")
    assert engine.current_player == Color.BLACK
    assert engine.last_move is not None
    assert engine.last_move.to_uci() == "e2e4"

    # white cannot move twice
    assert not engine.make_move(sq("d2"), sq("d4"))
    play(engine, "e7e5")
    assert engine.current_player == Color.WHITE


def test_rejected_move_changes_nothing(engine: ChessEngine) -> None:
    fen = engine.board.to_fen()
    assert not engine.make_move(sq("e2"), sq("e5"))
    assert not engine.make_move(sq("e4"), sq("e5"))
    assert engine.board.to_fen() == fen
    assert engine.move_history == []
    assert engine.current_player == Color.WHITE


def test_pinned_piece_cannot_expose_the_king() -> None:
    engine = ChessEngine(board=Board.from_fen(PINNED_ROOK_FEN))
    assert engine.is_valid_move(sq("e2"), sq("d2"))
    assert not engine.is_legal_move(sq("e2"), sq("d2"))
    assert not engine.make_move(sq("e2"), sq("d2"))
    # moving along the pin line is fine
    assert engine.make_move(sq("e2"), sq("e8"))


def test_must_answer_check() -> None:
    engine = ChessEngine(board=Board.from_fen("4k3/8/8/8/8/8/8/r3K3"))
    assert engine.is_in_check(Color.WHITE)
    assert not engine.make_move(sq("e1"), sq("d1"))
    assert not engine.make_move(sq("e1"), sq("f1"))
    assert engine.make_move(sq("e1"), sq("e2"))


def test_back_rank_checkmate() -> None:
    engine = ChessEngine(board=Board.from_fen(BACK_RANK_FEN))
    assert engine.make_move(sq("d1"), sq("d8"))
    assert engine.status == Status.CHECKMATE
    assert engine.winner == Color.WHITE
    assert engine.is_over
    assert engine.is_checkmate(Color.BLACK)
    # no more moves once the game is decided
    assert not engine.make_move(sq("g8"), sq("h8"))


def test_stalemate() -> None:
    engine = ChessEngine(board=Board.from_fen(ALMOST_STALEMATE_FEN))
    assert engine.make_move(sq("f6"), sq("g6"))
    assert engine.status == Status.STALEMATE
    assert engine.winner is None
    assert engine.is_stalemate(Color.BLACK)
    assert not engine.is_checkmate(Color.BLACK)


def test_en_passant_through_the_engine(engine: ChessEngine) -> None:
    play(engine, "e2e4", "a7a6", "e4e5", "d7d5", "e5d6")
    assert engine.board.piece(sq("d5")) is None
    assert engine.board.piece(sq("d6")) == Piece(PieceType.PAWN, Color.WHITE)
    assert engine.last_move is not None and engine.last_move.is_en_passant


def test_en_passant_expires_after_one_move(engine: ChessEngine) -> None:
    play(engine, "e2e4", "a7a6", "e4e5", "d7d5", "h2h3", "h7h6")
    assert not engine.make_move(sq("e5"), sq("d6"))


def test_promotion_through_the_engine() -> None:
    engine = ChessEngine(board=Board.from_fen("7k/P7/8/8/8/8/8/K7"))
    assert engine.make_move(sq("a7"), sq("a8"))
    assert engine.board.piece(sq("a8")) == Piece(PieceType.QUEEN, Color.WHITE)
