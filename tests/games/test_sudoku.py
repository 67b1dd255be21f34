"""Unit tests for src/games/sudoku.py"""

import logging
import random
from copy import deepcopy

import pytest

from src.core.exceptions import BoardIndexError, InvalidActionError
from src.core.shared_types import Difficulty, OutcomeKind, Status
from src.games.actions import PlaceDigit, SelectCell
from src.games.sudoku import (
    EMPTY,
    CELLS_TO_REMOVE,
    SudokuSession,
    calculate_digit_points,
    carve_puzzle,
    count_solutions,
    create_sudoku_puzzle,
    generate_solved,
    is_solved,
    is_valid_placement,
    is_valid_sudoku_move,
)


@pytest.fixture
def solved(rng: random.Random) -> list[list[int]]:
    return generate_solved(rng)


def _blanks(grid: list[list[int]]) -> list[tuple[int, int]]:
    return [(row, col) for row in range(9) for col in range(9) if grid[row][col] == EMPTY]


def _wrong_digit(solution: list[list[int]], row: int, col: int) -> int:
    return next(num for num in range(1, 10) if num != solution[row][col])


# --- VALIDATION ---
def test_generated_grid_is_solved(solved: list[list[int]]) -> None:
    assert is_solved(solved)
    for row in solved:
        assert sorted(row) == list(range(1, 10))


def test_placement_ignores_the_cell_itself(solved: list[list[int]]) -> None:
    assert is_valid_placement(solved, 4, 4, solved[4][4])
    assert not is_valid_placement(solved, 4, 4, solved[4][5])


def test_placement_checks_the_box() -> None:
    grid = [[EMPTY] * 9 for _ in range(9)]
    grid[0][0] = 5
    assert not is_valid_placement(grid, 2, 2, 5)
    assert is_valid_placement(grid, 3, 3, 5)


def test_move_needs_an_empty_cell_and_a_digit(solved: list[list[int]]) -> None:
    grid = deepcopy(solved)
    value = grid[0][0]
    assert not is_valid_sudoku_move(grid, 0, 0, value)
    grid[0][0] = EMPTY
    assert is_valid_sudoku_move(grid, 0, 0, value)
    assert not is_valid_sudoku_move(grid, 0, 0, 0)
    assert not is_valid_sudoku_move(grid, 0, 0, 10)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 9), (9, 9)])
def test_out_of_range_cell(solved: list[list[int]], row: int, col: int) -> None:
    with pytest.raises(BoardIndexError):
        is_valid_placement(solved, row, col, 1)


def test_broken_grid_is_not_solved(solved: list[list[int]]) -> None:
    grid = deepcopy(solved)
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
    assert not is_solved(grid)
    grid = deepcopy(solved)
    grid[8][8] = EMPTY
    assert not is_solved(grid)


# --- SOLVING ---
def test_count_solutions_stops_at_limit(solved: list[list[int]]) -> None:
    assert count_solutions(solved) == 1
    empty = [[EMPTY] * 9 for _ in range(9)]
    assert count_solutions(empty) == 2
    assert count_solutions(empty, limit=5) == 5
    assert empty == [[EMPTY] * 9 for _ in range(9)]


# --- PUZZLE ---
@pytest.mark.parametrize("difficulty", [Difficulty.EASY, Difficulty.HARD])
def test_puzzle_has_a_unique_solution(difficulty: Difficulty, rng: random.Random) -> None:
    puzzle = create_sudoku_puzzle(difficulty, rng)
    grid, solution = puzzle["grid"], puzzle["solution"]
    assert puzzle["difficulty"] == difficulty
    assert 0 < len(_blanks(grid)) <= CELLS_TO_REMOVE[difficulty]
    assert count_solutions(grid) == 1
    for row in range(9):
        for col in range(9):
            assert grid[row][col] in (EMPTY, solution[row][col])


def test_same_seed_same_puzzle() -> None:
    first = create_sudoku_puzzle(Difficulty.MEDIUM, random.Random(99))
    second = create_sudoku_puzzle(Difficulty.MEDIUM, random.Random(99))
    assert first == second


def test_unreachable_target_returns_easier_puzzle(
    solved: list[list[int]], rng: random.Random, caplog: pytest.LogCaptureFixture
) -> None:
    with pytest.MonkeyPatch.context() as mp:
        mp.setitem(CELLS_TO_REMOVE, Difficulty.EXTREME, 81)
        with caplog.at_level(logging.WARNING, logger="arcade.sudoku"):
            puzzle = carve_puzzle(solved, Difficulty.EXTREME, rng)
    assert 0 < len(_blanks(puzzle)) < 81
    assert count_solutions(puzzle) == 1
    assert "Could only remove" in caplog.text


@pytest.mark.parametrize(
    "difficulty, remaining, expected",
    [(Difficulty.EASY, 600, 30), (Difficulty.MEDIUM, 59, 21), (Difficulty.EXTREME, 0, 50)],
)
def test_calculate_digit_points(difficulty: Difficulty, remaining: int, expected: int) -> None:
    assert calculate_digit_points(difficulty, remaining) == expected


# --- SESSION ---
@pytest.fixture
def session(rng: random.Random) -> SudokuSession:
    return SudokuSession(Difficulty.EASY, rng)


def test_correct_digit_is_written_and_scored(session: SudokuSession) -> None:
    row, col = _blanks(session.grid)[0]
    outcome = session.apply_action(PlaceDigit(row, col, session.solution[row][col]))
    assert outcome.kind == OutcomeKind.CORRECT
    assert outcome.delta_score == 10 + 600 // 30
    assert session.grid[row][col] == session.solution[row][col]


def test_filled_cell_and_non_digit_are_rejected(session: SudokuSession) -> None:
    given = next((r, c) for r in range(9) for c in range(9) if session.puzzle[r][c] != EMPTY)
    assert session.place(*given, 1).kind == OutcomeKind.INVALID
    row, col = _blanks(session.grid)[0]
    assert session.place(row, col, 0).kind == OutcomeKind.INVALID
    assert session.place(row, col, 10).kind == OutcomeKind.INVALID
    assert session.mistakes == 0


def test_three_mistakes_fail_the_round(session: SudokuSession) -> None:
    row, col = _blanks(session.grid)[0]
    wrong = _wrong_digit(session.solution, row, col)

    for mistake in (1, 2):
        outcome = session.place(row, col, wrong)
        assert outcome.kind == OutcomeKind.INCORRECT
        assert not outcome.terminal
        assert session.mistakes == mistake
        assert session.grid[row][col] == EMPTY

    outcome = session.place(row, col, wrong)
    assert outcome.terminal
    assert session.status == Status.FAILED
    late = session.apply_action(PlaceDigit(row, col, session.solution[row][col]))
    assert late.kind == OutcomeKind.INVALID


def test_completion_bonus(session: SudokuSession) -> None:
    blanks = _blanks(session.grid)
    points = calculate_digit_points(Difficulty.EASY, 600)
    outcome = None
    for row, col in blanks:
        outcome = session.place(row, col, session.solution[row][col])

    assert outcome is not None
    assert outcome.terminal
    assert outcome.delta_score == 2 * points
    assert session.status == Status.COMPLETED
    assert session.score == (len(blanks) + 1) * points
    assert session.summary() == {"mistakes": 0, "blanks": len(blanks), "filled": len(blanks)}


def test_timeout(session: SudokuSession) -> None:
    outcome = session.tick(600)
    assert outcome.kind == OutcomeKind.TIMEOUT
    assert session.status == Status.TIMED_OUT


def test_snapshot_marks_givens(session: SudokuSession) -> None:
    snapshot = session.snapshot()
    assert snapshot["time_remaining"] == 600
    givens = snapshot["givens"]
    assert sum(row.count(False) for row in givens) == CELLS_TO_REMOVE[Difficulty.EASY]


def test_wrong_action_type(session: SudokuSession) -> None:
    with pytest.raises(InvalidActionError):
        session.apply_action(SelectCell(0))
