"""Which session class plays which game."""

import random
from typing import Callable

from src.core.exceptions import GameError
from src.core.shared_types import Difficulty, GameType, PlayMode
from src.games.chess.session import ChessSession
from src.games.crossword import CrosswordSession
from src.games.matching import MatchingSession
from src.games.number_sequence import NumberSequenceSession
from src.games.quiz import QuizSession
from src.games.session import BaseSession
from src.games.sudoku import SudokuSession
from src.games.tictactoe import TicTacToeSession

SessionFactory = Callable[[Difficulty, random.Random], BaseSession]

# --- STRATEGY PATTERN: ONE FACTORY PER GAME ---
SESSION_FACTORIES: dict[GameType, SessionFactory] = {
    GameType.NUMBER_GRID: MatchingSession.number_grid,
    GameType.COLOR_GRID: MatchingSession.color_grid,
    GameType.TIC_TAC_TOE: TicTacToeSession,
    GameType.SUDOKU: SudokuSession,
    GameType.CHESS: ChessSession,
    GameType.QUIZ: QuizSession,
    GameType.CROSSWORD: CrosswordSession,
    GameType.NUMBER_SEQUENCE: NumberSequenceSession,
}


# Games that two people can play from the same seat
TWO_PLAYER_FACTORIES: dict[GameType, SessionFactory] = {
    GameType.TIC_TAC_TOE: TicTacToeSession.two_player,
}


def create_session(
    game_type: GameType,
    difficulty: Difficulty,
    rng: random.Random,
    mode: PlayMode = PlayMode.SINGLE_PLAYER,
) -> BaseSession:
    factories = TWO_PLAYER_FACTORIES if mode == PlayMode.TWO_PLAYER else SESSION_FACTORIES
    if game_type not in factories:
        raise GameError(f"No {mode} session registered for game type {game_type!r}")
    return factories[game_type](difficulty, rng)
