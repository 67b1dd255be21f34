"""
Boundary layer data model(s).

The session service hands a finished round to the persistence layer using the model defined here.
(Decouples the data model specific to the DB layer from the information the service actually has)
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class GameResultModel:
    """Transport-safe representation of a finished round, used between Service and DB layers."""

    player_name: str
    game_type: str
    difficulty: str
    score: int
    points_earned: int
    status: str
    duration: int
    meta: dict[str, Any] = field(default_factory=dict)
