"""A round of chess against the bot: the user plays white, the bot answers with a random legal black move."""

import random
from typing import Any

from src.core.exceptions import InvalidActionError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, Status
from src.games.actions import Action, MovePiece
from src.games.chess.engine import ChessEngine
from src.games.chess.moves import Move
from src.games.chess.pieces import Color
from src.games.chess.square import Square, is_valid_square
from src.games.randomness import random_item
from src.games.session import BaseSession, Outcome

USER_COLOR = Color.WHITE
BOT_COLOR = Color.BLACK

TIME_LIMITS: dict[Difficulty, int] = {
    Difficulty.EASY: 600,
    Difficulty.MEDIUM: 300,
    Difficulty.HARD: 180,
    Difficulty.EXTREME: 120,
}

WIN_BONUS: dict[Difficulty, int] = {
    Difficulty.EASY: 50,
    Difficulty.MEDIUM: 100,
    Difficulty.HARD: 150,
    Difficulty.EXTREME: 200,
}


class ChessSession(BaseSession):
    """
    Chess against the bot
    ----

    * every capture by the user earns the value of the captured piece (pawn 1, knight / bishop 3, rook 5, queen 9)
    * checkmating the bot adds the win bonus of the difficulty
    """

    game_type = GameType.CHESS

    def __init__(self, difficulty: Difficulty, rng: random.Random) -> None:
        super().__init__(difficulty, TIME_LIMITS[difficulty])
        self.rng = rng
        self.engine = ChessEngine()
        self.captured_by_user: list[str] = []

    def move(self, from_square: str, to_square: str) -> Outcome:
        if not (is_valid_square(from_square) and is_valid_square(to_square)):
            return self._reject(
                OutcomeKind.INVALID, f"Squares must be given as 'a1' - 'h8': {from_square!r}, {to_square!r}"
            )
        start = Square.from_algebraic(from_square)
        end = Square.from_algebraic(to_square)
        if not self.engine.make_move(start, end):
            return self._reject(OutcomeKind.ILLEGAL, f"Move not allowed: {from_square}{to_square}")

        user_move = self.engine.move_history[-1]
        delta = self._award(self._capture_points(user_move))
        if self.engine.is_over:
            return self._conclude(delta)

        bot_move = self._bot_move()
        if self.engine.is_over:
            return self._conclude(delta)
        return Outcome(OutcomeKind.ACCEPTED, delta, message=f"Bot played {bot_move.to_uci()}")

    def summary(self) -> dict[str, Any]:
        return {
            "moves": [move.to_uci() for move in self.engine.move_history],
            "captured": list(self.captured_by_user),
            "material": {color.name.lower(): points for color, points in self.engine.board.count_material().items()},
        }

    # -- BaseSession hooks --
    def _apply(self, action: Action) -> Outcome:
        if isinstance(action, MovePiece):
            return self.move(action.from_square, action.to_square)
        raise InvalidActionError(f"{type(action).__name__} is not a chess action.")

    def _state(self) -> dict[str, Any]:
        return {
            "board": self.engine.board.to_codes(),
            "current_player": self.engine.current_player.name.lower(),
            "in_check": self.engine.is_in_check(self.engine.current_player),
            "moves": [move.to_uci() for move in self.engine.move_history],
            "captured": list(self.captured_by_user),
        }

    # -- HELPERS --
    def _capture_points(self, move: Move) -> int:
        if move.captured is None:
            return 0
        self.captured_by_user.append(move.captured.to_code())
        return move.captured.points

    def _bot_move(self) -> Move:
        move = random_item(self.engine.legal_moves(BOT_COLOR), self.rng)
        self.engine.make_move(move.from_square, move.to_square)
        return move

    def _conclude(self, delta: int) -> Outcome:
        """The engine reports checkmate / stalemate. Translate that into the result of the round."""
        if self.engine.status == Status.STALEMATE:
            finish = self._finish(Status.DRAW, OutcomeKind.ACCEPTED, message="Stalemate")
        elif self.engine.winner == USER_COLOR:
            finish = self._finish(
                Status.WON, OutcomeKind.ACCEPTED, WIN_BONUS[self.difficulty], winner="white", message="Checkmate!"
            )
        else:
            finish = self._finish(Status.LOST, OutcomeKind.ACCEPTED, winner="black", message="Checkmated by the bot")
        return Outcome(
            finish.kind, delta + finish.delta_score, terminal=True, winner=finish.winner, message=finish.message
        )
