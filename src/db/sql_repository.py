"""Implementation of GameResultRepository using SQLAlchemy"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameResultModel
from src.db.schema import DBGameResult

logger = logging.getLogger("arcade.db")


class SQLGameResultRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def save_result(self, result: GameResultModel) -> tuple[GameResultModel, UUID]:
        """Store a finished round and return the stored data + newly created result ID."""
        new_id = uuid4()
        result_db = DBGameResult(
            id=new_id,
            player_name=result.player_name,
            game_type=result.game_type,
            difficulty=result.difficulty,
            score=result.score,
            points_earned=result.points_earned,
            status=result.status,
            duration=result.duration,
            meta=result.meta,
        )
        try:
            self.db.add(result_db)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not store result of {result.player_name!r}") from exc
        self.db.refresh(result_db)
        logger.debug(f"Stored result {new_id} ({result.game_type}, {result.points_earned} points)")
        return self._to_model(result_db), new_id

    def get_result(self, result_id: UUID) -> GameResultModel | None:
        """Get result by ID, if record exists."""
        result_db = self._fetch_result(result_id)
        if result_db:
            return self._to_model(result_db)
        return None

    def results_for_player(self, player_name: str) -> list[GameResultModel]:
        query = (
            select(DBGameResult)
            .where(DBGameResult.player_name == player_name)
            .order_by(DBGameResult.created_at)
        )
        return [self._to_model(result_db) for result_db in self.db.scalars(query)]

    def delete_result(self, result_id: UUID) -> GameResultModel | None:
        """Remove a result's record."""
        result_db = self._fetch_result(result_id)
        if not result_db:
            return None
        result_model = self._to_model(result_db)
        self.db.delete(result_db)
        self.db.commit()
        return result_model

    def _fetch_result(self, result_id: UUID) -> DBGameResult | None:
        query = select(DBGameResult).where(DBGameResult.id == result_id)
        return self.db.scalar(query)

    def _to_model(self, result_db: DBGameResult) -> GameResultModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameResultModel(
            player_name=result_db.player_name,
            game_type=result_db.game_type,
            difficulty=result_db.difficulty,
            score=result_db.score,
            points_earned=result_db.points_earned,
            status=result_db.status,
            duration=result_db.duration,
            meta=dict(result_db.meta or {}),
        )
