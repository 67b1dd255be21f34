"""Unit tests for /src/games/chess/session.py"""

import random
from typing import Sequence
from unittest.mock import patch

import pytest

from src.core.exceptions import InvalidActionError
from src.core.shared_types import Difficulty, OutcomeKind, Status
from src.games.actions import MovePiece, SelectCell
from src.games.chess.board import Board
from src.games.chess.engine import ChessEngine
from src.games.chess.moves import Move
from src.games.chess.session import ChessSession
from src.games.chess.square import Square


def session_from_fen(fen: str, difficulty: Difficulty = Difficulty.EASY) -> ChessSession:
    session = ChessSession(difficulty, random.Random(0))
    session.engine = ChessEngine(board=Board.from_fen(fen))
    return session


@pytest.fixture
def session(rng: random.Random) -> ChessSession:
    return ChessSession(Difficulty.MEDIUM, rng)


def test_bot_answers_with_a_black_move(session: ChessSession) -> None:
    outcome = session.apply_action(MovePiece("e2", "e4"))
    assert outcome.kind == OutcomeKind.ACCEPTED
    assert len(session.engine.move_history) == 2
    assert session.engine.move_history[1].piece.color.name == "BLACK"
    assert session.snapshot()["current_player"] == "white"


@pytest.mark.parametrize("start, end", [("e9", "e4"), ("e2", "z4"), ("", "e4"), ("E2", "E4")])
def test_malformed_squares_are_invalid(session: ChessSession, start: str, end: str) -> None:
    outcome = session.move(start, end)
    assert outcome.kind == OutcomeKind.INVALID
    assert session.engine.move_history == []


def test_illegal_move(session: ChessSession) -> None:
    outcome = session.move("e2", "e5")
    assert outcome.kind == OutcomeKind.ILLEGAL
    assert not outcome.terminal
    assert session.engine.move_history == []


def test_capture_earns_piece_value() -> None:
    session = session_from_fen("k7/8/8/8/8/8/3q4/3RK3")
    outcome = session.move("d1", "d2")
    assert outcome.kind == OutcomeKind.ACCEPTED
    assert outcome.delta_score == 9
    assert session.score == 9
    assert session.summary()["captured"] == ["q"]
    assert session.summary()["material"] == {"white": 5, "black": 0}


def test_checkmating_the_bot_wins() -> None:
    session = session_from_fen("6k1/5ppp/8/8/8/8/8/3Q2K1", Difficulty.HARD)
    outcome = session.move("d1", "d8")
    assert outcome.terminal
    assert outcome.winner == "white"
    assert outcome.delta_score == 150
    assert session.status == Status.WON
    assert session.summary()["moves"] == ["d1d8"]


def test_stalemate_is_a_draw() -> None:
    session = session_from_fen("7k/8/5Q2/8/8/8/8/K7")
    outcome = session.move("f6", "g6")
    assert outcome.terminal
    assert session.status == Status.DRAW
    assert session.score == 0


def test_bot_checkmate_loses() -> None:
    def pick_rook_to_a1(moves: Sequence[Move], rng: random.Random) -> Move:
        return next(move for move in moves if move.to_square == Square.from_algebraic("a1"))

    session = session_from_fen("k7/8/8/8/2P5/8/r4PPP/6K1")
    with patch("src.games.chess.session.random_item", side_effect=pick_rook_to_a1):
        outcome = session.move("c4", "c5")
    assert outcome.terminal
    assert outcome.winner == "black"
    assert session.status == Status.LOST
    assert session.apply_action(MovePiece("g1", "h1")).kind == OutcomeKind.INVALID


def test_timeout(session: ChessSession) -> None:
    assert session.tick(300).kind == OutcomeKind.TIMEOUT
    assert session.status == Status.TIMED_OUT


def test_wrong_action_type(session: ChessSession) -> None:
    with pytest.raises(InvalidActionError):
        session.apply_action(SelectCell(0))
