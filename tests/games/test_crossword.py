"""Unit tests for src/games/crossword.py"""

import random

import pytest

from src.core.exceptions import BoardIndexError, CrosswordTemplateError, InvalidActionError
from src.core.shared_types import Difficulty, OutcomeKind, Status
from src.games.actions import EnterLetter, PlaceDigit
from src.games.crossword import (
    BLOCKED,
    EMPTY,
    CrosswordSession,
    build_solution_grid,
    calculate_crossword_score,
    empty_user_grid,
    is_crossword_complete,
    is_valid_crossword_input,
)
from src.games.crossword_data import CROSSWORD_TEMPLATES, Clue, CrosswordTemplate


def _open_cells(solution: list[list[str]]) -> list[tuple[int, int]]:
    return [
        (row, col)
        for row, cells in enumerate(solution)
        for col, cell in enumerate(cells)
        if cell != BLOCKED
    ]


def _template(across: tuple[Clue, ...], down: tuple[Clue, ...]) -> CrosswordTemplate:
    return CrosswordTemplate(id=99, title="Test", size=4, across=across, down=down)


# --- TEMPLATES ---
@pytest.mark.parametrize("template", CROSSWORD_TEMPLATES, ids=lambda t: t.title)
def test_templates_build(template: CrosswordTemplate) -> None:
    solution = build_solution_grid(template)
    assert len(solution) == template.size
    assert all(len(row) == template.size for row in solution)
    for clue in template.across:
        assert "".join(solution[clue.row][clue.col : clue.col + len(clue.answer)]) == clue.answer
    for clue in template.down:
        letters = [solution[clue.row + i][clue.col] for i in range(len(clue.answer))]
        assert "".join(letters) == clue.answer


def test_crossing_answers_share_a_letter() -> None:
    template = _template(
        across=(Clue(1, "", "CAT", 0, 0),),
        down=(Clue(1, "", "COW", 0, 0),),
    )
    solution = build_solution_grid(template)
    assert solution[0] == ["C", "A", "T", BLOCKED]
    assert [row[0] for row in solution] == ["C", "O", "W", BLOCKED]
    assert solution[3][3] == BLOCKED


def test_conflicting_answers_are_rejected() -> None:
    template = _template(
        across=(Clue(1, "", "CAT", 0, 0),),
        down=(Clue(2, "", "TOP", 0, 1),),
    )
    with pytest.raises(CrosswordTemplateError):
        build_solution_grid(template)


def test_answer_running_off_the_grid() -> None:
    template = _template(across=(Clue(1, "", "HORSE", 1, 0),), down=())
    with pytest.raises(CrosswordTemplateError):
        build_solution_grid(template)


# --- CHECKING ---
def test_completion_needs_every_letter() -> None:
    solution = build_solution_grid(CROSSWORD_TEMPLATES[0])
    user_grid = empty_user_grid(solution)
    assert not is_crossword_complete(user_grid, solution)

    cells = _open_cells(solution)
    for row, col in cells:
        user_grid[row][col] = solution[row][col]
    assert is_crossword_complete(user_grid, solution)

    row, col = cells[-1]
    user_grid[row][col] = EMPTY
    assert not is_crossword_complete(user_grid, solution)


@pytest.mark.parametrize(
    "char, expected",
    [("A", True), ("z", True), ("", False), ("AB", False), ("1", False), ("é", False), (" ", False)],
)
def test_is_valid_crossword_input(char: str, expected: bool) -> None:
    assert is_valid_crossword_input(char) is expected


@pytest.mark.parametrize(
    "difficulty, time_taken, mistakes, expected",
    [
        (Difficulty.EASY, 0, 0, 400),
        (Difficulty.MEDIUM, 100, 2, 380),
        (Difficulty.EXTREME, 400, 0, 500),
        (Difficulty.EASY, 300, 20, 0),
    ],
)
def test_calculate_crossword_score(
    difficulty: Difficulty, time_taken: int, mistakes: int, expected: int
) -> None:
    assert calculate_crossword_score(difficulty, time_taken, mistakes) == expected


# --- SESSION ---
@pytest.fixture
def session(rng: random.Random) -> CrosswordSession:
    return CrosswordSession(Difficulty.MEDIUM, rng)


def test_solving_the_grid(session: CrosswordSession) -> None:
    cells = _open_cells(session.solution)
    row, col = cells[0]
    wrong = "Q" if session.solution[row][col] != "Q" else "X"
    assert session.enter(row, col, wrong).kind == OutcomeKind.INCORRECT
    assert session.grid[row][col] == wrong

    session.tick(50)
    outcome = None
    for row, col in cells:
        outcome = session.apply_action(EnterLetter(row, col, session.solution[row][col].lower()))

    assert outcome is not None
    assert outcome.terminal
    assert session.status == Status.COMPLETED
    assert session.score == 200 + 250 - 10
    assert session.summary() == {"template": session.template.id, "mistakes": 1}


def test_blocked_cell_and_bad_input(session: CrosswordSession) -> None:
    blocked = next(
        (row, col)
        for row, cells in enumerate(session.solution)
        for col, cell in enumerate(cells)
        if cell == BLOCKED
    )
    assert session.enter(*blocked, "A").kind == OutcomeKind.INVALID
    row, col = _open_cells(session.solution)[0]
    assert session.enter(row, col, "7").kind == OutcomeKind.INVALID
    assert session.grid[row][col] == EMPTY
    assert session.mistakes == 0


def test_out_of_range_cell(session: CrosswordSession) -> None:
    with pytest.raises(BoardIndexError):
        session.enter(session.template.size, 0, "A")


def test_wrong_action_type(session: CrosswordSession) -> None:
    with pytest.raises(InvalidActionError):
        session.apply_action(PlaceDigit(0, 0, 1))
