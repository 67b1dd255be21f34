"""
Quiz: multiple choice questions drawn from the static pools, scored on correct answers plus a time bonus.
"""

import logging
import random
from typing import Any, Optional

from src.core.exceptions import GameStateError, InvalidActionError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, Status
from src.games.actions import Action, AnswerQuestion
from src.games.quiz_data import QUIZ_QUESTIONS, Question
from src.games.randomness import shuffle
from src.games.session import BaseSession, Outcome

logger = logging.getLogger("arcade.quiz")

TIME_BUDGET = 300

QUESTION_COUNTS: dict[Difficulty, int] = {
    Difficulty.EASY: 10,
    Difficulty.MEDIUM: 12,
    Difficulty.HARD: 15,
    Difficulty.EXTREME: 18,
}

BASE_POINTS: dict[Difficulty, int] = {
    Difficulty.EASY: 10,
    Difficulty.MEDIUM: 20,
    Difficulty.HARD: 30,
    Difficulty.EXTREME: 50,
}


def get_quiz_questions(
    difficulty: Difficulty, count: int, rng: random.Random
) -> list[Question]:
    """`count` questions of the pool in random order (fewer if the pool is smaller)."""
    return shuffle(QUIZ_QUESTIONS[difficulty], rng)[:count]


def check_answer(question: Question, selected_answer: str) -> bool:
    return question.answer == selected_answer


def validate_question(question: Question) -> bool:
    """A usable question has at least two distinct options, and the answer is one of them."""
    return len(set(question.options)) >= 2 and question.answer in question.options


def quiz_categories() -> list[str]:
    """Every category over all difficulties, in order of first appearance."""
    categories: dict[str, None] = {}
    for questions in QUIZ_QUESTIONS.values():
        for question in questions:
            categories.setdefault(question.category, None)
    return list(categories)


def questions_by_category(category: str, difficulty: Difficulty) -> list[Question]:
    return [question for question in QUIZ_QUESTIONS[difficulty] if question.category == category]


def quiz_time_bonus(time_taken: int, budget: int = TIME_BUDGET) -> int:
    return max(0, (budget - time_taken) // 10)


def calculate_quiz_score(
    correct_answers: int, difficulty: Difficulty, time_taken: int, budget: int = TIME_BUDGET
) -> int:
    """ex. 5 correct on medium in 250 of 300 seconds: 5 * 20 + (300 - 250) // 10 = 105"""
    return correct_answers * BASE_POINTS[difficulty] + quiz_time_bonus(time_taken, budget)


class QuizSession(BaseSession):
    """
    One question at a time
    ----

    Every correct answer earns the base points of the difficulty straight away. The time bonus is added when the last
    question is answered, so the final score always equals `calculate_quiz_score()`.
    """

    game_type = GameType.QUIZ

    def __init__(
        self,
        difficulty: Difficulty,
        rng: random.Random,
        count: Optional[int] = None,
    ) -> None:
        if count is None:
            count = QUESTION_COUNTS[difficulty]
        if count < 1:
            raise GameStateError(f"A quiz round needs at least one question: {count=}")
        super().__init__(difficulty, TIME_BUDGET)
        self.questions = get_quiz_questions(difficulty, count, rng)
        self.index = 0
        self.correct = 0
        self.answers: list[str] = []

    @property
    def current_question(self) -> Optional[Question]:
        if self.index >= len(self.questions):
            return None
        return self.questions[self.index]

    def answer(self, selected: str) -> Outcome:
        question = self.current_question
        if question is None:
            return self._reject(OutcomeKind.INVALID, "No question left to answer.")
        if selected not in question.options:
            return self._reject(OutcomeKind.INVALID, f"{selected!r} is not one of the options.")

        self.answers.append(selected)
        self.index += 1
        is_correct = check_answer(question, selected)
        kind = OutcomeKind.CORRECT if is_correct else OutcomeKind.INCORRECT
        delta = 0
        if is_correct:
            self.correct += 1
            delta = self._award(BASE_POINTS[self.difficulty])

        if self.current_question is None:
            bonus = quiz_time_bonus(self.clock.elapsed)
            logger.info(
                f"Quiz finished: {self.correct}/{len(self.questions)} correct in {self.clock.elapsed}s"
            )
            finish = self._finish(Status.COMPLETED, kind, bonus, message=question.explanation)
            return Outcome(kind, delta + finish.delta_score, terminal=True, message=finish.message)
        return Outcome(kind, delta, message=question.explanation)

    def summary(self) -> dict[str, Any]:
        total = len(self.questions)
        return {
            "correct": self.correct,
            "total": total,
            "accuracy": round(self.correct / total * 100) if total else 0,
        }

    # -- BaseSession hooks --
    def _apply(self, action: Action) -> Outcome:
        if isinstance(action, AnswerQuestion):
            return self.answer(action.answer)
        raise InvalidActionError(f"{type(action).__name__} is not a quiz action.")

    def _state(self) -> dict[str, Any]:
        question = self.current_question
        return {
            "question_number": self.index + 1 if question else None,
            "total_questions": len(self.questions),
            "question": question.question if question else None,
            "options": list(question.options) if question else [],
            "category": question.category if question else None,
            "correct": self.correct,
        }
