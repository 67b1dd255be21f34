"""
Type definitions used across layers
"""

from enum import StrEnum

from src.core.exceptions import InvalidDifficultyError


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXTREME = "extreme"


class GameType(StrEnum):
    NUMBER_GRID = "number_grid"
    COLOR_GRID = "color_grid"
    TIC_TAC_TOE = "tic_tac_toe"
    SUDOKU = "sudoku"
    CHESS = "chess"
    QUIZ = "quiz"
    CROSSWORD = "crossword"
    NUMBER_SEQUENCE = "number_sequence"


class PlayMode(StrEnum):
    """Who sits on the other side of the board in games that have one."""

    SINGLE_PLAYER = "single_player"
    TWO_PLAYER = "two_player"


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed out"
    ABANDONED = "abandoned"
    WON = "won"
    LOST = "lost"
    DRAW = "draw"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


class OutcomeKind(StrEnum):
    """What a single action (or clock tick) did to a session."""

    PENDING = "pending"
    MATCHED = "matched"
    MISMATCHED = "mismatched"
    ACCEPTED = "accepted"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    INVALID = "invalid"
    ILLEGAL = "illegal"
    TIMEOUT = "timeout"


def parse_difficulty(value: str) -> Difficulty:
    """A malformed difficulty key is a caller bug, not user input."""
    try:
        return Difficulty(value.strip().lower())
    except ValueError as exc:
        raise InvalidDifficultyError(
            f"Unknown difficulty {value!r}. Pick one from {','.join(d.value for d in Difficulty)}"
        ) from exc
