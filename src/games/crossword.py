"""
Crossword: build the solution from a template, check the user's grid and score the result.

Grids are lists of rows of single characters. '#' marks a blocked cell, '' an empty cell of the user grid.
"""

import logging
import random
from typing import Any

from src.core.exceptions import BoardIndexError, CrosswordTemplateError, InvalidActionError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, Status
from src.games.actions import Action, EnterLetter
from src.games.crossword_data import CROSSWORD_TEMPLATES, Clue, CrosswordTemplate
from src.games.randomness import random_item
from src.games.session import BaseSession, Outcome

logger = logging.getLogger("arcade.crossword")

BLOCKED = "#"
EMPTY = ""

CharGrid = list[list[str]]

BASE_SCORES: dict[Difficulty, int] = {
    Difficulty.EASY: 100,
    Difficulty.MEDIUM: 200,
    Difficulty.HARD: 300,
    Difficulty.EXTREME: 500,
}

TIME_LIMITS: dict[Difficulty, int] = {
    Difficulty.EASY: 600,
    Difficulty.MEDIUM: 450,
    Difficulty.HARD: 300,
    Difficulty.EXTREME: 240,
}

MISTAKE_PENALTY = 10


def _place_answer(grid: CharGrid, clue: Clue, d_row: int, d_col: int) -> None:
    for i, letter in enumerate(clue.answer.upper()):
        row = clue.row + i * d_row
        col = clue.col + i * d_col
        if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
            raise CrosswordTemplateError(
                f"Answer {clue.answer!r} of clue {clue.number} runs off the grid at ({row}, {col})."
            )
        existing = grid[row][col]
        if existing != BLOCKED and existing != letter:
            raise CrosswordTemplateError(
                f"Clue {clue.number} puts {letter!r} on ({row}, {col}), which already holds {existing!r}."
            )
        grid[row][col] = letter


def build_solution_grid(template: CrosswordTemplate) -> CharGrid:
    """
    Fill in all answers
    ----

    Across answers run to the right, down answers run downwards. Answers must stay on the grid and agree on every
    shared cell, otherwise the template is broken.
    """
    grid = [[BLOCKED] * template.size for _ in range(template.size)]
    for clue in template.across:
        _place_answer(grid, clue, 0, 1)
    for clue in template.down:
        _place_answer(grid, clue, 1, 0)
    return grid


def empty_user_grid(solution: CharGrid) -> CharGrid:
    return [[BLOCKED if cell == BLOCKED else EMPTY for cell in row] for row in solution]


def is_crossword_complete(user_grid: CharGrid, solution: CharGrid) -> bool:
    """True iff every open cell holds exactly the letter of the solution."""
    for user_row, solution_row in zip(user_grid, solution, strict=True):
        for user_cell, solution_cell in zip(user_row, solution_row, strict=True):
            if solution_cell != BLOCKED and user_cell != solution_cell:
                return False
    return True


def is_valid_crossword_input(char: str) -> bool:
    return len(char) == 1 and char.isascii() and char.isalpha()


def calculate_crossword_score(difficulty: Difficulty, time_taken: int, mistakes: int) -> int:
    time_bonus = max(0, 300 - time_taken)
    return max(0, BASE_SCORES[difficulty] + time_bonus - MISTAKE_PENALTY * mistakes)


class CrosswordSession(BaseSession):
    """
    Fill in the letters
    ----

    A wrong letter is still written (the user can correct it) but counts as a mistake. The whole score is awarded at
    once, when the grid is complete.
    """

    game_type = GameType.CROSSWORD

    def __init__(self, difficulty: Difficulty, rng: random.Random) -> None:
        super().__init__(difficulty, TIME_LIMITS[difficulty])
        self.template = random_item(CROSSWORD_TEMPLATES, rng)
        self.solution = build_solution_grid(self.template)
        self.grid = empty_user_grid(self.solution)
        self.mistakes = 0

    def enter(self, row: int, col: int, letter: str) -> Outcome:
        if not (0 <= row < self.template.size and 0 <= col < self.template.size):
            raise BoardIndexError(f"Cell ({row}, {col}) outside of the {self.template.size}x{self.template.size} grid.")
        if self.solution[row][col] == BLOCKED:
            return self._reject(OutcomeKind.INVALID, f"Cell ({row}, {col}) is blocked.")
        if not is_valid_crossword_input(letter):
            return self._reject(OutcomeKind.INVALID, f"{letter!r} is not a single letter.")

        letter = letter.upper()
        self.grid[row][col] = letter
        if letter != self.solution[row][col]:
            self.mistakes += 1
            return Outcome(OutcomeKind.INCORRECT)

        if is_crossword_complete(self.grid, self.solution):
            points = calculate_crossword_score(self.difficulty, self.clock.elapsed, self.mistakes)
            logger.info(
                f"Crossword {self.template.title!r} solved in {self.clock.elapsed}s with {self.mistakes} mistakes"
            )
            return self._finish(Status.COMPLETED, OutcomeKind.CORRECT, points, message="Crossword solved!")
        return Outcome(OutcomeKind.CORRECT)

    def summary(self) -> dict[str, Any]:
        return {"template": self.template.id, "mistakes": self.mistakes}

    # -- BaseSession hooks --
    def _apply(self, action: Action) -> Outcome:
        if isinstance(action, EnterLetter):
            return self.enter(action.row, action.col, action.letter)
        raise InvalidActionError(f"{type(action).__name__} is not a crossword action.")

    def _state(self) -> dict[str, Any]:
        return {
            "title": self.template.title,
            "grid": [list(row) for row in self.grid],
            "across": [(clue.number, clue.clue) for clue in self.template.across],
            "down": [(clue.number, clue.clue) for clue in self.template.down],
            "mistakes": self.mistakes,
        }
