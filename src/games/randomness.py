"""
Random helpers shared by every generator.

All of them take the random source explicitly, so a test can pass a seeded `random.Random` and get reproducible grids.
"""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def shuffle(items: Sequence[T], rng: random.Random) -> list[T]:
    """Fisher-Yates shuffle on a copy. The input is left untouched."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def random_int(low: int, high: int, rng: random.Random) -> int:
    """Both bounds included."""
    return rng.randint(low, high)


def random_item(items: Sequence[T], rng: random.Random) -> T:
    if not items:
        raise ValueError("Cannot pick a random item from an empty sequence.")
    return items[random_int(0, len(items) - 1, rng)]


def chance(probability: float, rng: random.Random) -> bool:
    """True with the given probability (0 never, 1 always)."""
    return rng.random() < probability
