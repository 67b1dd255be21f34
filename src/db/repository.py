"""Protocol repository (SQLAlchemy implementation in `sql_repository.py`, tests may swap in anything with these methods)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameResultModel


class GameResultRepository(Protocol):
    """Persistence layer orchestration"""

    def save_result(self, result: GameResultModel) -> tuple[GameResultModel, UUID]:
        """Store a finished round and return the stored data + newly created result ID."""
        ...

    def get_result(self, result_id: UUID) -> GameResultModel | None:
        """Get result by ID, if record exists."""
        ...

    def results_for_player(self, player_name: str) -> list[GameResultModel]:
        """All results of a player, oldest first."""
        ...

    def delete_result(self, result_id: UUID) -> GameResultModel | None:
        """Remove a result's record."""
        ...
