"""
Shared plumbing of a single round of any game.

A session is created when a game starts, mutated by each user action / AI reply / clock tick, and discarded once the
round is over. Persisting the result is the responsibility of the service layer, not of the session.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from src.core.shared_types import Difficulty, GameType, OutcomeKind, Status
from src.games.actions import Action


@dataclass(frozen=True)
class Outcome:
    """Result of one action or tick, reported back to the service."""

    kind: OutcomeKind
    delta_score: int = 0
    terminal: bool = False
    winner: Optional[str] = None
    message: str = ""


@dataclass
class Countdown:
    """
    Round clock driven from outside (the service forwards `tick(seconds)`).
    A time limit of None means the game is untimed: the clock only records elapsed time.
    """

    time_limit: Optional[int]
    elapsed: int = field(default=0, init=False)

    @property
    def time_remaining(self) -> Optional[int]:
        if self.time_limit is None:
            return None
        return max(0, self.time_limit - self.elapsed)

    @property
    def expired(self) -> bool:
        return self.time_limit is not None and self.elapsed >= self.time_limit

    def advance(self, seconds: int) -> bool:
        """Move the clock forward. Returns True once the time budget has run out."""
        if seconds < 0:
            raise ValueError(f"Clock cannot run backwards: {seconds=}")
        self.elapsed += seconds
        return self.expired


class BaseSession:
    """
    Common state machine of a round
    ----

    Subclasses implement `_apply()` (one user action) and `_state()` (game specific part of the snapshot).
    Everything that is the same for every game lives here:
    * rejecting input once the round is over
    * the clock and running out of time
    * clamping the score at zero
    """

    game_type: GameType

    def __init__(self, difficulty: Difficulty, time_limit: Optional[int]) -> None:
        self.difficulty = difficulty
        self.clock = Countdown(time_limit)
        self.score = 0
        self.status = Status.IN_PROGRESS
        self.winner: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def apply_action(self, action: Action) -> Outcome:
        if self.is_terminal:
            return self._reject(OutcomeKind.INVALID, f"Game is over. status: {self.status}")
        return self._apply(action)

    def tick(self, seconds: int) -> Outcome:
        if self.is_terminal:
            return self._reject(OutcomeKind.INVALID, f"Game is over. status: {self.status}")
        if self.clock.advance(seconds):
            return self._finish(Status.TIMED_OUT, OutcomeKind.TIMEOUT)
        return Outcome(OutcomeKind.ACCEPTED)

    def end_game(self) -> Outcome:
        """The player quit before the round was decided. Running out of time goes through `tick()`."""
        if self.is_terminal:
            return self._reject(OutcomeKind.INVALID, f"Game is over. status: {self.status}")
        return self._finish(Status.ABANDONED, OutcomeKind.ACCEPTED, message="Player quit")

    def snapshot(self) -> dict[str, Any]:
        """Everything a frontend needs to render the round."""
        return {
            "game_type": self.game_type.value,
            "difficulty": self.difficulty.value,
            "status": self.status.value,
            "score": self.score,
            "winner": self.winner,
            "time_remaining": self.clock.time_remaining,
            "elapsed": self.clock.elapsed,
            **self._state(),
        }

    def summary(self) -> dict[str, Any]:
        """Metadata stored with the result once the round is over."""
        return {}

    # -- HOOKS FOR SUBCLASSES --
    def _apply(self, action: Action) -> Outcome:
        raise NotImplementedError

    def _state(self) -> dict[str, Any]:
        return {}

    # -- HELPERS --
    def _award(self, delta: int) -> int:
        """Add (or subtract) points. Score never drops below zero; returns the change that was actually applied."""
        previous = self.score
        self.score = max(0, self.score + delta)
        return self.score - previous

    def _finish(
        self,
        status: Status,
        kind: OutcomeKind,
        delta: int = 0,
        winner: Optional[str] = None,
        message: str = "",
    ) -> Outcome:
        self.status = status
        self.winner = winner
        applied = self._award(delta)
        return Outcome(kind, applied, terminal=True, winner=winner, message=message)

    def _reject(self, kind: OutcomeKind, message: str) -> Outcome:
        return Outcome(kind, 0, terminal=self.is_terminal, winner=self.winner, message=message)
