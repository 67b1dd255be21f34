"""
Discrete user inputs forwarded by the session service to a game session.

Each game accepts only its own action types. Sending, say, a chess move to a Sudoku session is a caller bug.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectCell:
    """Click on a cell by flat index (matching grids, tic-tac-toe)."""

    index: int


@dataclass(frozen=True)
class ClearSelection:
    """Hide a mismatched pair again (the UI sends this after its short reveal delay)."""


@dataclass(frozen=True)
class PlaceDigit:
    row: int
    col: int
    value: int


@dataclass(frozen=True)
class MovePiece:
    """Squares in algebraic notation, ex. 'e2' -> 'e4'"""

    from_square: str
    to_square: str


@dataclass(frozen=True)
class AnswerQuestion:
    answer: str


@dataclass(frozen=True)
class EnterLetter:
    row: int
    col: int
    letter: str


@dataclass(frozen=True)
class SubmitSequence:
    """Digits typed back after a number sequence was shown, ex. '40719'"""

    digits: str


Action = SelectCell | ClearSelection | PlaceDigit | MovePiece | AnswerQuestion | EnterLetter | SubmitSequence
