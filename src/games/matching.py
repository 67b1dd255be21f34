"""
Matching-pair engine shared by the Number Grid and Color Grid games.

The grid holds every value exactly twice (a pair). When the number of cells is odd, the leftover cell gets a filler
value that appears nowhere else, so it can never form an unintended triple (or a match).
"""

import logging
import math
import random
from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from src.core.exceptions import BoardIndexError, InvalidActionError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, Status
from src.games.actions import Action, ClearSelection, SelectCell
from src.games.randomness import shuffle
from src.games.session import BaseSession, Outcome

logger = logging.getLogger("arcade.matching")

CellValue = int | str
Grid = list[list[CellValue]]


class MatchingVariant(StrEnum):
    NUMBER = "number"
    COLOR = "color"


@dataclass(frozen=True)
class MatchingConfig:
    grid_size: int
    time_limit: int
    points_multiplier: float

    @property
    def base_points(self) -> int:
        return round(100 * self.points_multiplier)


MATCHING_CONFIG: dict[Difficulty, MatchingConfig] = {
    Difficulty.EASY: MatchingConfig(grid_size=4, time_limit=120, points_multiplier=1),
    Difficulty.MEDIUM: MatchingConfig(grid_size=5, time_limit=150, points_multiplier=1.2),
    Difficulty.HARD: MatchingConfig(grid_size=6, time_limit=180, points_multiplier=1.5),
    Difficulty.EXTREME: MatchingConfig(grid_size=8, time_limit=300, points_multiplier=2),
}

# Only applied when a session is created with `penalize_mismatches=True`
MISMATCH_PENALTY: dict[Difficulty, int] = {
    Difficulty.EASY: 3,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 5,
    Difficulty.EXTREME: 5,
}


# --- SCORING ---
def base_points(difficulty: Difficulty) -> int:
    return MATCHING_CONFIG[difficulty].base_points


def time_bonus(time_remaining: int, time_limit: int) -> int:
    """Up to 50 extra points, proportional to the fraction of the clock left."""
    if time_limit <= 0:
        return 0
    return math.floor(max(0, time_remaining) / time_limit * 50)


# --- VALUE GENERATION ---
def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """hue in degrees, saturation / lightness in percent. Returns '#RRGGBB'."""
    h = hue / 360
    s = saturation / 100
    l = lightness / 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:

        def hue_to_rgb(p: float, q: float, t: float) -> float:
            if t < 0:
                t += 1
            if t > 1:
                t -= 1
            if t < 1 / 6:
                return p + (q - p) * 6 * t
            if t < 1 / 2:
                return q
            if t < 2 / 3:
                return p + (q - p) * (2 / 3 - t) * 6
            return p

        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_rgb(p, q, h + 1 / 3)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1 / 3)

    return "#" + "".join(f"{round(channel * 255):02X}" for channel in (r, g, b))


def random_color(hue: float, rng: random.Random) -> str:
    saturation = 70 + rng.random() * 25
    lightness = 45 + rng.random() * 25
    return hsl_to_hex(hue, saturation, lightness)


def generate_colors(count: int, rng: random.Random) -> list[str]:
    """Colors on evenly spaced hues. Re-rolls saturation/lightness if two end up as the same hex code."""
    colors: list[str] = []
    hue_step = 360 / count if count else 0
    for i in range(count):
        hue = (i * hue_step) % 360
        color = random_color(hue, rng)
        while color in colors:
            color = random_color(hue, rng)
        colors.append(color)
    return colors


def _filler_values(
    variant: MatchingVariant, taken: set[CellValue], count: int, rng: random.Random
) -> list[CellValue]:
    """Values guaranteed to appear nowhere else on the grid."""
    fillers: list[CellValue] = []
    candidate = 0
    while len(fillers) < count:
        if variant == MatchingVariant.NUMBER:
            candidate += 1
            value: CellValue = candidate
        else:
            value = random_color(rng.random() * 360, rng)
        if value in taken:
            continue
        taken.add(value)
        fillers.append(value)
    return fillers


def generate_values(
    difficulty: Difficulty, variant: MatchingVariant, rng: random.Random
) -> list[CellValue]:
    """Flat, shuffled list of cell values (pairs + fillers)."""
    config = MATCHING_CONFIG[difficulty]
    total_cells = config.grid_size * config.grid_size
    num_pairs = total_cells // 2

    pair_values: list[CellValue] = (
        list(range(1, num_pairs + 1))
        if variant == MatchingVariant.NUMBER
        else list(generate_colors(num_pairs, rng))
    )
    values: list[CellValue] = [value for value in pair_values for _ in range(2)]
    values.extend(
        _filler_values(variant, set(pair_values), total_cells - len(values), rng)
    )
    return shuffle(values, rng)


def generate_grid(
    difficulty: Difficulty, variant: MatchingVariant, rng: random.Random
) -> Grid:
    """N x N grid, N set by the difficulty."""
    size = MATCHING_CONFIG[difficulty].grid_size
    values = generate_values(difficulty, variant, rng)
    return [values[row * size : (row + 1) * size] for row in range(size)]


class MatchingSession(BaseSession):
    """
    One round of a matching-pair game
    ----

    * Select one cell: it is revealed and pending.
    * Select a second cell: equal values are matched (permanently revealed) and score points, different values are a
      mismatch and stay pending until `clear_selection()` is called.
    * While two cells are pending, any further selection is rejected.
    """

    def __init__(
        self,
        difficulty: Difficulty,
        variant: MatchingVariant,
        rng: random.Random,
        penalize_mismatches: bool = False,
    ) -> None:
        config = MATCHING_CONFIG[difficulty]
        super().__init__(difficulty, config.time_limit)
        self.variant = variant
        self.game_type = (
            GameType.NUMBER_GRID
            if variant == MatchingVariant.NUMBER
            else GameType.COLOR_GRID
        )
        self.grid = generate_grid(difficulty, variant, rng)
        self.size = config.grid_size
        self.cells: list[CellValue] = [value for row in self.grid for value in row]
        self.matched: set[int] = set()
        self.pending: list[int] = []
        self.mismatch_penalty = MISMATCH_PENALTY[difficulty] if penalize_mismatches else 0
        self.moves = 0
        self.streak = 0
        self.best_streak = 0
        self.pairable_cells = sum(
            count - count % 2 for count in Counter(self.cells).values()
        )

    @classmethod
    def number_grid(cls, difficulty: Difficulty, rng: random.Random) -> "MatchingSession":
        return cls(difficulty, MatchingVariant.NUMBER, rng)

    @classmethod
    def color_grid(cls, difficulty: Difficulty, rng: random.Random) -> "MatchingSession":
        return cls(difficulty, MatchingVariant.COLOR, rng)

    @property
    def accuracy(self) -> float:
        """Matched pairs per pair of selections made."""
        if self.moves == 0:
            return 1.0
        return (len(self.matched) / 2) / (self.moves / 2)

    def select(self, index: int) -> Outcome:
        if not 0 <= index < len(self.cells):
            raise BoardIndexError(
                f"Cell index {index} outside of the {self.size}x{self.size} grid."
            )
        if self.is_terminal:
            return self._reject(OutcomeKind.INVALID, f"Game is over. status: {self.status}")
        if index in self.matched:
            return self._reject(OutcomeKind.INVALID, f"Cell {index} is already matched.")
        if index in self.pending:
            return self._reject(OutcomeKind.INVALID, f"Cell {index} is already selected.")
        if len(self.pending) >= 2:
            return self._reject(
                OutcomeKind.INVALID, "Two cells are still revealed. Clear the selection first."
            )

        self.pending.append(index)
        self.moves += 1
        if len(self.pending) == 1:
            return Outcome(OutcomeKind.PENDING)

        first, second = self.pending
        if self.cells[first] == self.cells[second]:
            return self._resolve_match(first, second)
        return self._resolve_mismatch()

    def clear_selection(self) -> Outcome:
        """Hide the pending cells again. Matched cells are never pending, so this only affects mismatches."""
        self.pending.clear()
        return Outcome(OutcomeKind.ACCEPTED, terminal=self.is_terminal, winner=self.winner)

    def summary(self) -> dict[str, Any]:
        return {
            "variant": self.variant.value,
            "matches": len(self.matched) // 2,
            "total_pairs": self.pairable_cells // 2,
            "moves": self.moves,
            "best_streak": self.best_streak,
            "accuracy": round(self.accuracy * 100),
        }

    # -- BaseSession hooks --
    def _apply(self, action: Action) -> Outcome:
        if isinstance(action, SelectCell):
            return self.select(action.index)
        if isinstance(action, ClearSelection):
            return self.clear_selection()
        raise InvalidActionError(f"{type(action).__name__} is not a matching-grid action.")

    def _state(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "cells": [
                self.cells[i] if (i in self.matched or i in self.pending) else None
                for i in range(len(self.cells))
            ],
            "matched": sorted(self.matched),
            "pending": list(self.pending),
            "streak": self.streak,
            "moves": self.moves,
        }

    # -- HELPERS --
    def _resolve_match(self, first: int, second: int) -> Outcome:
        self.matched.update((first, second))
        self.pending.clear()
        self.streak += 1
        self.best_streak = max(self.best_streak, self.streak)

        config = MATCHING_CONFIG[self.difficulty]
        remaining = self.clock.time_remaining or 0
        delta = self._award(config.base_points + time_bonus(remaining, config.time_limit))

        if len(self.matched) >= self.pairable_cells:
            logger.info(
                f"{self.game_type} round completed: score={self.score}, moves={self.moves}"
            )
            self.status = Status.COMPLETED
            return Outcome(OutcomeKind.MATCHED, delta, terminal=True)
        return Outcome(OutcomeKind.MATCHED, delta)

    def _resolve_mismatch(self) -> Outcome:
        self.streak = 0
        delta = self._award(-self.mismatch_penalty)
        return Outcome(OutcomeKind.MISMATCHED, delta)
