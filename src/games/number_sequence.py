"""
Number Sequence: a recall game.

Each round flashes a sequence of digits that the player types back from memory. The sequence grows by one digit per
round, from `start_length` up to `end_length`, while the reveal gets shorter. A wrong answer costs a mistake and breaks
the streak; one mistake more than the difficulty allows ends the game.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Optional

from src.core.exceptions import InvalidActionError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, Status
from src.games.actions import Action, SubmitSequence
from src.games.randomness import chance, random_int
from src.games.session import BaseSession, Outcome

logger = logging.getLogger("arcade.number_sequence")

DISTRACTOR = "⚡"
REVEAL_DECAY_MS = 80
MAX_STREAK_BONUS = 50
STREAK_BONUS = 5


@dataclass(frozen=True)
class SequenceConfig:
    start_length: int
    end_length: int
    base_reveal_ms: int
    min_reveal_ms: int
    distractor_chance: float
    mistakes_allowed: int
    keypad: str = "1234567890"

    @property
    def total_rounds(self) -> int:
        return self.end_length - self.start_length + 1


SEQUENCE_CONFIG: dict[Difficulty, SequenceConfig] = {
    Difficulty.EASY: SequenceConfig(
        start_length=3,
        end_length=8,
        base_reveal_ms=1300,
        min_reveal_ms=750,
        distractor_chance=0.08,
        mistakes_allowed=2,
    ),
    Difficulty.MEDIUM: SequenceConfig(
        start_length=3,
        end_length=10,
        base_reveal_ms=1200,
        min_reveal_ms=650,
        distractor_chance=0.15,
        mistakes_allowed=1,
    ),
    Difficulty.HARD: SequenceConfig(
        start_length=4,
        end_length=12,
        base_reveal_ms=1050,
        min_reveal_ms=550,
        distractor_chance=0.25,
        mistakes_allowed=1,
    ),
    Difficulty.EXTREME: SequenceConfig(
        start_length=4,
        end_length=14,
        base_reveal_ms=950,
        min_reveal_ms=450,
        distractor_chance=0.35,
        mistakes_allowed=0,
    ),
}


@dataclass(frozen=True)
class Frame:
    """One digit of the reveal. `flash` is a purely visual blip shown on top of it."""

    value: int
    flash: Optional[str] = None


def get_runtime_config(difficulty: Difficulty) -> SequenceConfig:
    return SEQUENCE_CONFIG[difficulty]


def sequence_length(round_number: int, config: SequenceConfig) -> int:
    """Round 1 has `start_length` digits, every following round one more, capped at `end_length`."""
    return min(config.end_length, config.start_length + max(0, round_number - 1))


def generate_number_sequence(round_number: int, config: SequenceConfig, rng: random.Random) -> list[int]:
    return [random_int(0, 9, rng) for _ in range(sequence_length(round_number, config))]


def inject_distractors(sequence: list[int], config: SequenceConfig, rng: random.Random) -> list[Frame]:
    """Half of the frames picked by `distractor_chance` get a flash. The digits themselves never change."""
    frames: list[Frame] = []
    for value in sequence:
        flash = None
        if chance(config.distractor_chance, rng) and chance(0.5, rng):
            flash = DISTRACTOR
        frames.append(Frame(value, flash))
    return frames


def reveal_time_for_round(round_number: int, config: SequenceConfig) -> int:
    """Milliseconds the sequence stays visible: 80 ms less every round, never below the floor."""
    return max(config.min_reveal_ms, config.base_reveal_ms - (round_number - 1) * REVEAL_DECAY_MS)


def score_for(correct_length: int, total_length: int, streak: int) -> int:
    """
    Points of one submitted answer
    ----

    The share of leading digits typed correctly is worth up to 100 points (rounded half up), and each earlier
    correct answer in a row adds 5 more, up to 50.
    ex. 3 of 4 digits on a streak of 2: 75 + 10 = 85
    """
    ratio = correct_length / total_length if total_length else 0
    return math.floor(ratio * 100 + 0.5) + min(MAX_STREAK_BONUS, streak * STREAK_BONUS)


def correct_prefix(expected: str, given: str) -> int:
    """How many digits match before the first wrong one."""
    count = 0
    for wanted, typed in zip(expected, given):
        if wanted != typed:
            break
        count += 1
    return count


class NumberSequenceSession(BaseSession):
    """
    Round after round of sequence recall
    ----

    Every submitted answer of the right length earns `score_for()` points, even a wrong one. A correct answer moves to
    the next (longer) sequence; a wrong one keeps the same sequence for another try. Answering the last round
    correctly completes the game; running out of mistakes fails it.
    """

    game_type = GameType.NUMBER_SEQUENCE

    def __init__(self, difficulty: Difficulty, rng: random.Random) -> None:
        super().__init__(difficulty, time_limit=None)
        self.rng = rng
        self.config = get_runtime_config(difficulty)
        self.round_number = 1
        self.mistakes = 0
        self.streak = 0
        self.best_streak = 0
        self.failed_round: Optional[int] = None
        self.sequence: list[int] = []
        self.frames: list[Frame] = []
        self._new_sequence()

    @property
    def is_final_round(self) -> bool:
        return self.round_number >= self.config.total_rounds

    @property
    def expected(self) -> str:
        return "".join(str(value) for value in self.sequence)

    def submit(self, digits: str) -> Outcome:
        if any(digit not in self.config.keypad for digit in digits):
            return self._reject(OutcomeKind.INVALID, f"Only digits can be typed: {digits!r}")
        if len(digits) != len(self.sequence):
            return self._reject(
                OutcomeKind.INVALID, f"Type all {len(self.sequence)} digits, got {len(digits)}."
            )

        points = score_for(correct_prefix(self.expected, digits), len(self.sequence), self.streak)
        if digits == self.expected:
            return self._correct(points)
        return self._wrong(points)

    def summary(self) -> dict[str, Any]:
        summary: dict[str, Any] = {
            "rounds": self.round_number,
            "best_streak": self.best_streak,
            "mistakes": self.mistakes,
        }
        if self.failed_round is not None:
            summary["round_failed"] = self.failed_round
        return summary

    # -- BaseSession hooks --
    def _apply(self, action: Action) -> Outcome:
        if isinstance(action, SubmitSequence):
            return self.submit(action.digits)
        raise InvalidActionError(f"{type(action).__name__} is not a number sequence action.")

    def _state(self) -> dict[str, Any]:
        return {
            "round": self.round_number,
            "total_rounds": self.config.total_rounds,
            "frames": [{"value": frame.value, "flash": frame.flash} for frame in self.frames],
            "reveal_ms": reveal_time_for_round(self.round_number, self.config),
            "mistakes": self.mistakes,
            "mistakes_allowed": self.config.mistakes_allowed,
            "streak": self.streak,
        }

    # -- HELPERS --
    def _new_sequence(self) -> None:
        self.sequence = generate_number_sequence(self.round_number, self.config, self.rng)
        self.frames = inject_distractors(self.sequence, self.config, self.rng)

    def _correct(self, points: int) -> Outcome:
        self.streak += 1
        self.best_streak = max(self.best_streak, self.streak)
        if self.is_final_round:
            logger.info(f"Number sequence completed on {self.difficulty} with best streak {self.best_streak}")
            return self._finish(Status.COMPLETED, OutcomeKind.CORRECT, points, message="All rounds recalled!")

        delta = self._award(points)
        self.round_number += 1
        self._new_sequence()
        return Outcome(OutcomeKind.CORRECT, delta, message=f"Round {self.round_number}: {len(self.sequence)} digits")

    def _wrong(self, points: int) -> Outcome:
        self.mistakes += 1
        self.streak = 0
        if self.mistakes > self.config.mistakes_allowed:
            self.failed_round = self.round_number
            return self._finish(
                Status.FAILED, OutcomeKind.INCORRECT, points, message=f"The sequence was {self.expected}"
            )
        delta = self._award(points)
        remaining = self.config.mistakes_allowed - self.mistakes
        return Outcome(OutcomeKind.INCORRECT, delta, message=f"Wrong sequence, {remaining} mistakes left")
