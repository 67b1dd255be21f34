"""
Tic-Tac-Toe rules and bot.

The board is a flat list of 9 cells, indexed row by row:
    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
A cell holds 'X', 'O' or None.
"""

import logging
import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from src.core.exceptions import BoardIndexError, GameStateError, InvalidActionError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, PlayMode, Status
from src.games.actions import Action, SelectCell
from src.games.randomness import random_item
from src.games.session import BaseSession, Outcome

logger = logging.getLogger("arcade.tictactoe")

Cell = Optional[str]
Board = list[Cell]

BOARD_CELLS = 9
DRAW = "draw"
USER = "X"
BOT = "O"

WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),  # diagonals
)  # fmt: skip

CENTER = 4
CORNERS = (0, 2, 6, 8)

# Minimax cutoff. The whole game tree is only 9 plies deep, so 9 solves it exactly.
SEARCH_DEPTH: dict[Difficulty, int] = {
    Difficulty.HARD: 8,
    Difficulty.EXTREME: 9,
}

# Rounds in a series
TOTAL_ROUNDS: dict[Difficulty, int] = {
    Difficulty.EASY: 3,
    Difficulty.MEDIUM: 5,
    Difficulty.HARD: 7,
    Difficulty.EXTREME: 10,
}

SCORE_MULTIPLIER: dict[Difficulty, float] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 1.2,
    Difficulty.HARD: 1.5,
    Difficulty.EXTREME: 2,
}


@dataclass(frozen=True)
class WinnerInfo:
    """`winner` is 'X', 'O' or 'draw'. `line` is empty for a draw."""

    winner: str
    line: tuple[int, ...] = ()

    @property
    def is_draw(self) -> bool:
        return self.winner == DRAW


def empty_board() -> Board:
    return [None] * BOARD_CELLS


def opponent(player: str) -> str:
    return BOT if player == USER else USER


def check_winner(board: Board) -> Optional[WinnerInfo]:
    """None while the game is still open."""
    for a, b, c in WINNING_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return WinnerInfo(winner=board[a], line=(a, b, c))
    if all(cell is not None for cell in board):
        return WinnerInfo(winner=DRAW)
    return None


def available_moves(board: Board) -> list[int]:
    return [index for index, cell in enumerate(board) if cell is None]


def is_valid_move(board: Board, index: int) -> bool:
    return 0 <= index < BOARD_CELLS and board[index] is None


def _winning_move(board: Board, player: str) -> Optional[int]:
    """First cell that completes a line for `player`, if any."""
    for move in available_moves(board):
        test_board = list(board)
        test_board[move] = player
        info = check_winner(test_board)
        if info is not None and info.winner == player:
            return move
    return None


# --- STRATEGIES ---
def _random_move(board: Board, player: str, rng: random.Random) -> int:
    return random_item(available_moves(board), rng)


def _heuristic_move(board: Board, player: str, rng: random.Random) -> int:
    """Win, else block, else center, else a random free corner, else anything."""
    win = _winning_move(board, player)
    if win is not None:
        return win
    block = _winning_move(board, opponent(player))
    if block is not None:
        return block
    if board[CENTER] is None:
        return CENTER
    free_corners = [corner for corner in CORNERS if board[corner] is None]
    if free_corners:
        return random_item(free_corners, rng)
    return _random_move(board, player, rng)


def _minimax(
    board: Board,
    depth: int,
    max_depth: int,
    is_maximizing: bool,
    player: str,
    alpha: float,
    beta: float,
) -> int:
    """
    Score of `board` from the point of view of `player`
    ----

    Wins are worth `10 - depth` and losses `depth - 10`, so a quick win beats a slow one and a slow loss beats a
    quick one. Reaching the depth cutoff counts as a draw.
    """
    info = check_winner(board)
    if info is not None:
        if info.winner == player:
            return 10 - depth
        if info.winner == opponent(player):
            return depth - 10
        return 0
    if depth >= max_depth:
        return 0

    mover = player if is_maximizing else opponent(player)
    best = -100 if is_maximizing else 100
    for move in available_moves(board):
        board[move] = mover
        score = _minimax(board, depth + 1, max_depth, not is_maximizing, player, alpha, beta)
        board[move] = None
        if is_maximizing:
            best = max(best, score)
            alpha = max(alpha, score)
        else:
            best = min(best, score)
            beta = min(beta, score)
        if beta <= alpha:
            break
    return best


@lru_cache(maxsize=4096)
def _best_move(board: tuple[Cell, ...], player: str, max_depth: int) -> int:
    """First cell (in index order) with the best minimax score. Pure, so the result is cached per position."""
    scratch = list(board)
    best_score = -100
    best_move = -1
    for move in available_moves(scratch):
        scratch[move] = player
        score = _minimax(scratch, 1, max_depth, False, player, -100, 100)
        scratch[move] = None
        if score > best_score:
            best_score = score
            best_move = move
    return best_move


def _minimax_move(board: Board, player: str, max_depth: int) -> int:
    return _best_move(tuple(board), player, max_depth)


def choose_move(board: Board, player: str, difficulty: Difficulty, rng: random.Random) -> int:
    """
    Index of the cell `player` should take next
    ----

    * easy: uniformly random free cell
    * medium: rule based (win, block, center, corner, random)
    * hard / extreme: minimax with alpha-beta pruning, reproducible for a given board
    """
    if not available_moves(board):
        raise GameStateError("No move available on a full board.")

    if difficulty == Difficulty.EASY:
        return _random_move(board, player, rng)
    if difficulty == Difficulty.MEDIUM:
        return _heuristic_move(board, player, rng)
    return _minimax_move(board, player, SEARCH_DEPTH[difficulty])


# --- SCORING ---
def calculate_game_score(winner: str, player: str, difficulty: Difficulty, moves: int) -> int:
    """Points for one finished game. A quick win earns up to 50 extra points before the difficulty multiplier."""
    if winner == player:
        move_bonus = max(0, 50 - moves * 5)
        return round((100 + move_bonus) * SCORE_MULTIPLIER[difficulty])
    if winner == DRAW:
        return 25
    return 10


@dataclass(frozen=True)
class RoundResult:
    number: int
    winner: str
    line: tuple[int, ...]
    score: int


class TicTacToeSession(BaseSession):
    """
    A series of rounds
    ----

    X always opens a round. Against the bot the user plays X and the bot answers every move right away; in two-player
    mode X and O take turns on the same board. A decided round is recorded and a fresh board is set up, until
    `total_rounds` have been played. Whoever won more rounds wins the series.

    The score collects the points X earned in every round.
    """

    game_type = GameType.TIC_TAC_TOE

    def __init__(
        self,
        difficulty: Difficulty,
        rng: random.Random,
        mode: PlayMode = PlayMode.SINGLE_PLAYER,
        total_rounds: Optional[int] = None,
    ) -> None:
        if total_rounds is None:
            total_rounds = TOTAL_ROUNDS[difficulty]
        if total_rounds < 1:
            raise GameStateError(f"A series needs at least one round: {total_rounds=}")
        super().__init__(difficulty, time_limit=None)
        self.rng = rng
        self.mode = mode
        self.total_rounds = total_rounds
        self.round_number = 1
        self.rounds: list[RoundResult] = []
        self.board = empty_board()
        self.current_player = USER
        self.user_moves = 0
        self.winning_line: tuple[int, ...] = ()

    @classmethod
    def two_player(cls, difficulty: Difficulty, rng: random.Random) -> "TicTacToeSession":
        return cls(difficulty, rng, mode=PlayMode.TWO_PLAYER)

    @property
    def round_wins(self) -> dict[str, int]:
        return {mark: sum(1 for result in self.rounds if result.winner == mark) for mark in (USER, BOT)}

    def play(self, index: int) -> Outcome:
        if not 0 <= index < BOARD_CELLS:
            raise BoardIndexError(f"Cell index {index} outside of the 3x3 board.")
        if not is_valid_move(self.board, index):
            return self._reject(OutcomeKind.INVALID, f"Cell {index} is already taken.")

        player = self.current_player
        self.board[index] = player
        if player == USER:
            self.user_moves += 1
        info = check_winner(self.board)
        if info is not None:
            return self._end_round(info)

        if self.mode == PlayMode.TWO_PLAYER:
            self.current_player = opponent(player)
            return Outcome(OutcomeKind.ACCEPTED, message=f"{self.current_player} to move")

        bot_move = choose_move(self.board, BOT, self.difficulty, self.rng)
        self.board[bot_move] = BOT
        logger.debug(f"Bot ({self.difficulty}) answered {index} with {bot_move}")
        info = check_winner(self.board)
        if info is not None:
            return self._end_round(info)
        return Outcome(OutcomeKind.ACCEPTED, message=f"Bot played {bot_move}")

    def summary(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "rounds": self.total_rounds,
            "round_wins": self.round_wins,
            "round_winners": [result.winner for result in self.rounds],
            "moves": self.user_moves,
            "board": list(self.board),
        }

    # -- BaseSession hooks --
    def _apply(self, action: Action) -> Outcome:
        if isinstance(action, SelectCell):
            return self.play(action.index)
        raise InvalidActionError(f"{type(action).__name__} is not a tic-tac-toe action.")

    def _state(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "board": list(self.board),
            "current_player": self.current_player,
            "winning_line": list(self.winning_line),
            "moves": self.user_moves,
            "round": self.round_number,
            "total_rounds": self.total_rounds,
            "round_wins": self.round_wins,
            "round_winners": [result.winner for result in self.rounds],
        }

    # -- HELPERS --
    def _player_name(self, mark: str) -> str:
        if self.mode == PlayMode.TWO_PLAYER:
            return mark
        return "You" if mark == USER else "Bot"

    def _end_round(self, info: WinnerInfo) -> Outcome:
        points = calculate_game_score(info.winner, USER, self.difficulty, self.user_moves)
        self.winning_line = info.line
        self.rounds.append(RoundResult(self.round_number, info.winner, info.line, points))
        logger.debug(f"Round {self.round_number}/{self.total_rounds} of {self.mode}: {info.winner}")
        if self.round_number >= self.total_rounds:
            return self._conclude(points)

        delta = self._award(points)
        message = f"Round {self.round_number}: draw"
        if not info.is_draw:
            message = f"Round {self.round_number}: {self._player_name(info.winner)} won"
        self.round_number += 1
        self.board = empty_board()
        self.current_player = USER
        self.user_moves = 0
        self.winning_line = ()
        return Outcome(OutcomeKind.ACCEPTED, delta, message=message)

    def _conclude(self, points: int) -> Outcome:
        wins = self.round_wins
        if wins[USER] == wins[BOT]:
            return self._finish(Status.DRAW, OutcomeKind.ACCEPTED, points, message="Series drawn")
        winner = USER if wins[USER] > wins[BOT] else BOT
        status = Status.WON if winner == USER else Status.LOST
        message = f"{self._player_name(winner)} won the series {wins[winner]}-{wins[opponent(winner)]}"
        return self._finish(status, OutcomeKind.ACCEPTED, points, winner=winner, message=message)
