"""
Sudoku generator, solution counter and validator.

A grid is a 9x9 list of lists, 0 marks an empty cell.
"""

import logging
import random
from copy import deepcopy
from typing import Any, Optional

from src.core.exceptions import BoardIndexError, InvalidActionError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, Status
from src.games.actions import Action, PlaceDigit
from src.games.randomness import shuffle
from src.games.session import BaseSession, Outcome

logger = logging.getLogger("arcade.sudoku")

Grid = list[list[int]]

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))

CELLS_TO_REMOVE: dict[Difficulty, int] = {
    Difficulty.EASY: 35,
    Difficulty.MEDIUM: 45,
    Difficulty.HARD: 52,
    Difficulty.EXTREME: 58,
}

TIME_LIMITS: dict[Difficulty, int] = {
    Difficulty.EASY: 600,
    Difficulty.MEDIUM: 450,
    Difficulty.HARD: 300,
    Difficulty.EXTREME: 180,
}

BASE_POINTS: dict[Difficulty, int] = {
    Difficulty.EASY: 10,
    Difficulty.MEDIUM: 20,
    Difficulty.HARD: 30,
    Difficulty.EXTREME: 50,
}

MAX_MISTAKES = 3


def empty_grid() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def cells_to_remove(difficulty: Difficulty) -> int:
    return CELLS_TO_REMOVE[difficulty]


def _check_bounds(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise BoardIndexError(f"Cell ({row}, {col}) outside of the 9x9 grid.")


# --- VALIDATION ---
def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Can `num` go into (row, col) without repeating a digit in its row, column or 3x3 box?
    The cell itself is ignored, so a filled cell can be checked against the rest of the grid.
    """
    _check_bounds(row, col)
    for x in range(SIZE):
        if x != col and grid[row][x] == num:
            return False
    for y in range(SIZE):
        if y != row and grid[y][col] == num:
            return False

    box_row = (row // BOX) * BOX
    box_col = (col // BOX) * BOX
    for y in range(box_row, box_row + BOX):
        for x in range(box_col, box_col + BOX):
            if (y, x) != (row, col) and grid[y][x] == num:
                return False
    return True


def is_valid_sudoku_move(grid: Grid, row: int, col: int, num: int) -> bool:
    """A move is only possible on an empty cell, with a digit that does not clash."""
    _check_bounds(row, col)
    if num not in DIGITS or grid[row][col] != EMPTY:
        return False
    return is_valid_placement(grid, row, col, num)


def is_solved(grid: Grid) -> bool:
    return all(
        grid[row][col] != EMPTY and is_valid_placement(grid, row, col, grid[row][col])
        for row in range(SIZE)
        for col in range(SIZE)
    )


# --- SOLVING ---
def _find_empty(grid: Grid) -> Optional[tuple[int, int]]:
    for row in range(SIZE):
        for col in range(SIZE):
            if grid[row][col] == EMPTY:
                return row, col
    return None


def _candidates(grid: Grid, row: int, col: int) -> list[int]:
    return [num for num in DIGITS if is_valid_placement(grid, row, col, num)]


def _most_constrained_cell(grid: Grid) -> Optional[tuple[int, int, list[int]]]:
    """Empty cell with the fewest candidates (speeds up counting a lot compared to scanning in order)."""
    best: Optional[tuple[int, int, list[int]]] = None
    for row in range(SIZE):
        for col in range(SIZE):
            if grid[row][col] != EMPTY:
                continue
            options = _candidates(grid, row, col)
            if best is None or len(options) < len(best[2]):
                best = (row, col, options)
                if not options:
                    return best
    return best


def _fill(grid: Grid, rng: random.Random) -> bool:
    """Randomized backtracking: try the digits in shuffled order, undo on a dead end."""
    cell = _find_empty(grid)
    if cell is None:
        return True
    row, col = cell
    for num in shuffle(DIGITS, rng):
        if is_valid_placement(grid, row, col, num):
            grid[row][col] = num
            if _fill(grid, rng):
                return True
            grid[row][col] = EMPTY
    return False


def generate_solved(rng: random.Random) -> Grid:
    grid = empty_grid()
    _fill(grid, rng)
    return grid


def _count(grid: Grid, limit: int) -> int:
    cell = _most_constrained_cell(grid)
    if cell is None:
        return 1
    row, col, options = cell
    count = 0
    for num in options:
        grid[row][col] = num
        count += _count(grid, limit - count)
        grid[row][col] = EMPTY
        if count >= limit:
            break
    return count


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Number of solutions, counting stops at `limit`. The input grid is not touched."""
    return _count(deepcopy(grid), limit)


# --- PUZZLE ---
def carve_puzzle(solved: Grid, difficulty: Difficulty, rng: random.Random) -> Grid:
    """
    Blank cells of a solved grid while the puzzle keeps exactly one solution
    ----

    Cells are visited in random order and each one is tried once: blanking more cells can only add solutions, so a
    cell that could not be removed earlier will never become removable later. If the target is not reached after
    every cell has been tried, the (easier) puzzle is returned as is.
    """
    target = cells_to_remove(difficulty)
    puzzle = deepcopy(solved)
    positions = shuffle([(row, col) for row in range(SIZE) for col in range(SIZE)], rng)

    removed = 0
    for row, col in positions:
        if removed >= target:
            break
        backup = puzzle[row][col]
        puzzle[row][col] = EMPTY
        if count_solutions(puzzle) == 1:
            removed += 1
        else:
            puzzle[row][col] = backup

    if removed < target:
        logger.warning(
            f"Could only remove {removed}/{target} cells for a {difficulty} puzzle. Returning an easier puzzle."
        )
    return puzzle


def create_sudoku_puzzle(difficulty: Difficulty, rng: random.Random) -> dict[str, Any]:
    solution = generate_solved(rng)
    puzzle = carve_puzzle(solution, difficulty, rng)
    return {"grid": puzzle, "solution": solution, "difficulty": difficulty}


def calculate_digit_points(difficulty: Difficulty, time_remaining: int) -> int:
    return BASE_POINTS[difficulty] + max(0, time_remaining // 30)


class SudokuSession(BaseSession):
    """
    Fill in the blanks against the clock
    ----

    * A correct digit is written into the grid and earns points.
    * A wrong digit is not written, it counts as a mistake. The third mistake fails the round.
    * Completing the grid earns the per-digit points once more as a completion bonus.
    """

    game_type = GameType.SUDOKU

    def __init__(self, difficulty: Difficulty, rng: random.Random) -> None:
        super().__init__(difficulty, TIME_LIMITS[difficulty])
        puzzle = create_sudoku_puzzle(difficulty, rng)
        self.solution: Grid = puzzle["solution"]
        self.puzzle: Grid = puzzle["grid"]
        self.grid: Grid = deepcopy(self.puzzle)
        self.mistakes = 0

    def place(self, row: int, col: int, value: int) -> Outcome:
        _check_bounds(row, col)
        if value not in DIGITS:
            return self._reject(OutcomeKind.INVALID, f"{value} is not a digit between 1 and 9.")
        if self.grid[row][col] != EMPTY:
            return self._reject(OutcomeKind.INVALID, f"Cell ({row}, {col}) is already filled.")

        if self.solution[row][col] != value:
            self.mistakes += 1
            if self.mistakes >= MAX_MISTAKES:
                logger.info(f"Sudoku failed after {self.mistakes} mistakes")
                return self._finish(Status.FAILED, OutcomeKind.INCORRECT, message="Too many mistakes")
            return Outcome(
                OutcomeKind.INCORRECT, message=f"Mistake {self.mistakes}/{MAX_MISTAKES}"
            )

        self.grid[row][col] = value
        points = calculate_digit_points(self.difficulty, self.clock.time_remaining or 0)
        delta = self._award(points)
        if self.grid == self.solution:
            finish = self._finish(Status.COMPLETED, OutcomeKind.CORRECT, points, message="Puzzle solved!")
            return Outcome(
                OutcomeKind.CORRECT, delta + finish.delta_score, terminal=True, message=finish.message
            )
        return Outcome(OutcomeKind.CORRECT, delta)

    def summary(self) -> dict[str, Any]:
        return {
            "mistakes": self.mistakes,
            "blanks": sum(row.count(EMPTY) for row in self.puzzle),
            "filled": sum(row.count(EMPTY) for row in self.puzzle) - sum(row.count(EMPTY) for row in self.grid),
        }

    # -- BaseSession hooks --
    def _apply(self, action: Action) -> Outcome:
        if isinstance(action, PlaceDigit):
            return self.place(action.row, action.col, action.value)
        raise InvalidActionError(f"{type(action).__name__} is not a sudoku action.")

    def _state(self) -> dict[str, Any]:
        return {
            "grid": deepcopy(self.grid),
            "givens": [[cell != EMPTY for cell in row] for row in self.puzzle],
            "mistakes": self.mistakes,
        }
