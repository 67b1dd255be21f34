"""Crossword templates. Every cell not covered by an answer is blocked ('#')."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Clue:
    number: int
    clue: str
    answer: str
    row: int
    col: int


@dataclass(frozen=True)
class CrosswordTemplate:
    id: int
    title: str
    size: int
    across: tuple[Clue, ...]
    down: tuple[Clue, ...]


CROSSWORD_TEMPLATES: list[CrosswordTemplate] = [
    CrosswordTemplate(
        id=1,
        title="World Capitals",
        size=8,
        across=(
            Clue(1, "City of Love", "PARIS", 0, 0),
            Clue(3, "Greek capital", "ATHENS", 2, 0),
            Clue(4, "Peruvian capital", "LIMA", 4, 3),
            Clue(5, "Norwegian capital", "OSLO", 7, 4),
        ),
        down=(
            Clue(1, "Czech capital", "PRAGUE", 0, 0),
            Clue(2, "Chilean capital", "SANTIAGO", 0, 4),
        ),
    ),
    CrosswordTemplate(
        id=2,
        title="Around Europe",
        size=8,
        across=(
            Clue(1, "Eternal City", "ROME", 0, 0),
            Clue(3, "Danish port city", "AARHUS", 3, 0),
            Clue(5, "City on the French Riviera", "NICE", 6, 4),
        ),
        down=(
            Clue(1, "Latvian capital", "RIGA", 0, 0),
            Clue(2, "Spanish capital", "MADRID", 0, 2),
            Clue(4, "Bulgarian capital", "SOFIA", 3, 5),
        ),
    ),
]
