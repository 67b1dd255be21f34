"""
Custom exceptions.

Expected user mistakes (clicking a matched cell, an illegal chess move) never raise: the engines report them as rejected outcomes.
The exceptions below signal that the *caller* did something the engines cannot recover from.
"""


class GameError(Exception):
    """Top-level exception of the application. Catch this one at the boundary."""


class InvalidDifficultyError(GameError):
    """Difficulty key is not one of easy / medium / hard / extreme."""


class BoardIndexError(GameError, IndexError):
    """Row / column / cell index outside of the fixed board dimensions."""


class InvalidActionError(GameError):
    """The action type does not belong to the game it was sent to."""


class GameStateError(GameError):
    """Operation not possible in the current state of the game (ex. asking the AI to move on a full board)."""


class CrosswordTemplateError(GameError):
    """Crossword template answers run off the grid or disagree on a shared cell."""


class SessionNotFoundError(GameError):
    """No active game session with the requested ID."""


class RepositoryError(GameError):
    """Something went wrong storing or fetching a game result."""


class InvalidRequestError(GameError):
    """Request payload could not be interpreted."""
