"""Unit tests for src/games/tictactoe.py"""

import random
from typing import Iterator

import pytest

from src.core.exceptions import BoardIndexError, GameStateError, InvalidActionError
from src.core.shared_types import Difficulty, OutcomeKind, PlayMode, Status
from src.games.actions import AnswerQuestion, SelectCell
from src.games.tictactoe import (
    BOARD_CELLS,
    BOT,
    DRAW,
    TOTAL_ROUNDS,
    USER,
    Board,
    TicTacToeSession,
    WinnerInfo,
    available_moves,
    calculate_game_score,
    check_winner,
    choose_move,
    empty_board,
    is_valid_move,
    opponent,
)


def board_from(layout: str) -> Board:
    """'XO.......' -> board (a dot is an empty cell)"""
    return [None if char == "." else char for char in layout]


# --- RULES ---
@pytest.mark.parametrize(
    "layout, winner, line",
    [
        ("XXX......", "X", (0, 1, 2)),
        ("...OOO...", "O", (3, 4, 5)),
        ("X..X..X..", "X", (0, 3, 6)),
        ("..O.O.O..", "O", (2, 4, 6)),
        ("O...O...O", "O", (0, 4, 8)),
    ],
)
def test_check_winner_lines(layout: str, winner: str, line: tuple[int, ...]) -> None:
    info = check_winner(board_from(layout))
    assert info is not None
    assert info.winner == winner
    assert info.line == line


def test_full_board_without_line_is_draw() -> None:
    info = check_winner(board_from("XOXXOOOXX"))
    assert info is not None
    assert info.is_draw
    assert info.winner == DRAW


def test_open_game_has_no_winner() -> None:
    assert check_winner(board_from("XO.......")) is None


def test_available_and_valid_moves() -> None:
    board = board_from("XO..X...O")
    assert available_moves(board) == [2, 3, 5, 6, 7]
    assert is_valid_move(board, 2)
    assert not is_valid_move(board, 0)
    assert not is_valid_move(board, 9)
    assert not is_valid_move(board, -1)


# --- BOT ---
def test_easy_picks_a_free_cell(rng: random.Random) -> None:
    board = board_from("XOXOX.O..")
    for _ in range(20):
        assert choose_move(board, BOT, Difficulty.EASY, rng) in (5, 7, 8)


def test_medium_takes_the_win_before_blocking(rng: random.Random) -> None:
    board = board_from("XX.OO....")
    assert choose_move(board, BOT, Difficulty.MEDIUM, rng) == 5


def test_medium_blocks(rng: random.Random) -> None:
    board = board_from("XX..O....")
    assert choose_move(board, BOT, Difficulty.MEDIUM, rng) == 2


def test_medium_prefers_center_then_corner(rng: random.Random) -> None:
    assert choose_move(board_from("X........"), BOT, Difficulty.MEDIUM, rng) == 4
    assert choose_move(board_from("....X...."), BOT, Difficulty.MEDIUM, rng) in (0, 2, 6, 8)


@pytest.mark.parametrize("difficulty", [Difficulty.HARD, Difficulty.EXTREME])
def test_minimax_wins_immediately(difficulty: Difficulty, rng: random.Random) -> None:
    board = board_from("OO.XX.X..")
    assert choose_move(board, BOT, difficulty, rng) == 2


@pytest.mark.parametrize("difficulty", [Difficulty.HARD, Difficulty.EXTREME])
def test_minimax_blocks(difficulty: Difficulty, rng: random.Random) -> None:
    board = board_from("XX..O....")
    assert choose_move(board, BOT, difficulty, rng) == 2


def test_minimax_is_reproducible() -> None:
    board = board_from("X...O...X")
    moves = {choose_move(board, BOT, Difficulty.HARD, random.Random(seed)) for seed in range(5)}
    assert len(moves) == 1


def test_choose_move_on_full_board() -> None:
    with pytest.raises(GameStateError):
        choose_move(board_from("XOXXOOOXX"), BOT, Difficulty.EASY, random.Random(0))


def test_hard_ai_vs_ai_always_draws() -> None:
    """Perfect play on both sides ends in a draw, whatever cell X opens with."""
    for opening in range(BOARD_CELLS):
        board = empty_board()
        board[opening] = USER
        player = BOT
        while check_winner(board) is None:
            board[choose_move(board, player, Difficulty.HARD, random.Random(opening))] = player
            player = opponent(player)
        info = check_winner(board)
        assert info is not None and info.is_draw


def _every_user_line(board: Board, difficulty: Difficulty) -> Iterator[WinnerInfo]:
    """Play out every choice X can make against the bot, yielding how each line ends."""
    for move in available_moves(board):
        after = list(board)
        after[move] = USER
        info = check_winner(after)
        if info is None:
            after[choose_move(after, BOT, difficulty, random.Random(0))] = BOT
            info = check_winner(after)
        if info is not None:
            yield info
        else:
            yield from _every_user_line(after, difficulty)


@pytest.mark.parametrize("difficulty", [Difficulty.HARD, Difficulty.EXTREME])
def test_minimax_bot_is_never_beaten(difficulty: Difficulty) -> None:
    endings = list(_every_user_line(empty_board(), difficulty))
    assert len(endings) > 100
    assert all(info.winner != USER for info in endings)


# --- SCORING ---
@pytest.mark.parametrize(
    "winner, difficulty, moves, expected",
    [
        ("X", Difficulty.EASY, 3, 135),
        ("X", Difficulty.MEDIUM, 3, 162),
        ("X", Difficulty.HARD, 5, 188),
        ("X", Difficulty.EXTREME, 12, 200),
        (DRAW, Difficulty.EXTREME, 5, 25),
        ("O", Difficulty.EASY, 4, 10),
    ],
)
def test_calculate_game_score(winner: str, difficulty: Difficulty, moves: int, expected: int) -> None:
    assert calculate_game_score(winner, "X", difficulty, moves) == expected


# --- SESSION ---
def test_bot_answers_every_move(rng: random.Random) -> None:
    session = TicTacToeSession(Difficulty.MEDIUM, rng)
    outcome = session.apply_action(SelectCell(0))
    assert outcome.kind == OutcomeKind.ACCEPTED
    assert session.board.count(USER) == 1
    assert session.board.count(BOT) == 1
    # medium bot takes the center
    assert session.board[4] == BOT


def test_taken_cell_is_rejected(rng: random.Random) -> None:
    session = TicTacToeSession(Difficulty.MEDIUM, rng)
    session.play(0)
    before = list(session.board)
    assert session.play(4).kind == OutcomeKind.INVALID
    assert session.board == before


def test_hard_bot_never_loses_a_round(rng: random.Random) -> None:
    session = TicTacToeSession(Difficulty.HARD, rng)
    while not session.is_terminal:
        free = available_moves(session.board)
        session.play(free[0])
    assert len(session.rounds) == TOTAL_ROUNDS[Difficulty.HARD] == 7
    assert session.round_wins[USER] == 0
    assert session.status in (Status.DRAW, Status.LOST)
    assert session.score == sum(result.score for result in session.rounds)
    assert all(result.score in (25, 10) for result in session.rounds)


def test_user_win_is_scored(rng: random.Random) -> None:
    """Easy bot on a scripted board: give the user a line to finish."""
    session = TicTacToeSession(Difficulty.EASY, rng, total_rounds=1)
    session.board = board_from("XX.OO....")
    session.user_moves = 2
    outcome = session.play(2)
    assert outcome.terminal
    assert outcome.winner == USER
    assert session.status == Status.WON
    assert session.score == 100 + 50 - 15
    assert session.snapshot()["winning_line"] == [0, 1, 2]


def test_out_of_range_and_wrong_action(rng: random.Random) -> None:
    session = TicTacToeSession(Difficulty.EASY, rng)
    with pytest.raises(BoardIndexError):
        session.play(9)
    with pytest.raises(InvalidActionError):
        session.apply_action(AnswerQuestion("X"))


# --- SERIES ---
@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_series_ends_after_the_last_round(difficulty: Difficulty, rng: random.Random) -> None:
    session = TicTacToeSession(difficulty, rng)
    assert session.snapshot()["total_rounds"] == TOTAL_ROUNDS[difficulty]
    while not session.is_terminal:
        session.play(available_moves(session.board)[0])

    assert len(session.rounds) == TOTAL_ROUNDS[difficulty]
    assert [result.number for result in session.rounds] == list(range(1, TOTAL_ROUNDS[difficulty] + 1))
    wins = session.round_wins
    if wins[USER] > wins[BOT]:
        assert session.status == Status.WON
    elif wins[USER] < wins[BOT]:
        assert session.status == Status.LOST
    else:
        assert session.status == Status.DRAW
    assert session.summary()["round_winners"] == [result.winner for result in session.rounds]


def test_decided_round_starts_a_fresh_board(rng: random.Random) -> None:
    session = TicTacToeSession(Difficulty.EASY, rng)
    session.board = board_from("XX.OO....")
    session.user_moves = 2
    outcome = session.play(2)

    assert not outcome.terminal
    assert outcome.delta_score == 135
    assert outcome.message == "Round 1: You won"
    assert session.status == Status.IN_PROGRESS
    assert session.round_number == 2
    assert session.board == empty_board()
    assert session.user_moves == 0
    assert session.rounds[0].line == (0, 1, 2)
    assert session.snapshot()["round_wins"] == {USER: 1, BOT: 0}


def test_series_needs_a_round(rng: random.Random) -> None:
    with pytest.raises(GameStateError):
        TicTacToeSession(Difficulty.EASY, rng, total_rounds=0)


# --- TWO PLAYERS ---
def test_two_players_take_turns(rng: random.Random) -> None:
    session = TicTacToeSession.two_player(Difficulty.MEDIUM, rng)
    assert session.mode == PlayMode.TWO_PLAYER

    assert session.play(4).message == "O to move"
    assert session.board.count(BOT) == 0
    assert session.current_player == BOT
    session.play(0)
    assert session.board[0] == BOT
    assert session.current_player == USER
    assert session.snapshot()["current_player"] == USER
    assert session.play(0).kind == OutcomeKind.INVALID
    assert session.current_player == USER


def test_two_player_series_can_be_tied(rng: random.Random) -> None:
    session = TicTacToeSession(Difficulty.EASY, rng, mode=PlayMode.TWO_PLAYER, total_rounds=2)
    # round 1: X completes the top row
    for index in (0, 3, 1, 4):
        session.apply_action(SelectCell(index))
    assert session.apply_action(SelectCell(2)).message == "Round 1: X won"

    # round 2: O completes the middle row
    for index in (0, 3, 1, 4, 8):
        assert not session.apply_action(SelectCell(index)).terminal
    outcome = session.apply_action(SelectCell(5))

    assert outcome.terminal
    assert outcome.winner is None
    assert session.status == Status.DRAW
    assert session.round_wins == {USER: 1, BOT: 1}
    assert session.score == 135 + 10
    assert session.summary()["mode"] == "two_player"
