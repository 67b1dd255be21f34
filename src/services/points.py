"""Conversion of a finished round into reward points (the currency users redeem)."""

from src.core.shared_types import Difficulty, Status

BASE_REWARD: dict[Difficulty, int] = {
    Difficulty.EASY: 25,
    Difficulty.MEDIUM: 50,
    Difficulty.HARD: 75,
    Difficulty.EXTREME: 100,
}

# Only a round that was actually beaten pays out
REWARDED_STATUSES = {Status.COMPLETED, Status.WON}

POINTS_PER_LEVEL = 100


def calculate_points(difficulty: Difficulty, score: int = 0, duration: int = 0) -> int:
    """
    Reward points of a round
    ----

    * base points of the difficulty
    * high score bonus: score // 100, for a score above 1000
    * speed bonus: 5 points per full 10 seconds under a minute
    """
    points = BASE_REWARD[difficulty]
    if score > 1000:
        points += score // 100
    if 0 < duration < 60:
        points += ((60 - duration) // 10) * 5
    return points


def reward_for_round(status: Status, difficulty: Difficulty, score: int, duration: int) -> int:
    if status not in REWARDED_STATUSES or score <= 0:
        return 0
    return calculate_points(difficulty, score, duration)


def calculate_level(points: int) -> int:
    return points // POINTS_PER_LEVEL + 1
