"""
Orchestration between the outer world and the game engines (and the persistence layer).

The service owns every running round. It forwards actions and clock ticks to the session of the round, and once a
round is over it converts the score into reward points, stores the result and forgets the round.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

from src.api.models import (
    ActionRequest,
    EndGameRequest,
    GameResultResponse,
    GetSessionRequest,
    OutcomeResponse,
    PlayerResultsRequest,
    PlayerResultsResponse,
    SessionResponse,
    StartGameRequest,
    TickRequest,
)
from src.core.exceptions import SessionNotFoundError
from src.core.models import GameResultModel
from src.db.repository import GameResultRepository
from src.games.randomness import make_rng
from src.games.registry import create_session
from src.games.session import BaseSession, Outcome
from src.services.points import calculate_level, reward_for_round

logger = logging.getLogger("arcade.service")


@dataclass
class ActiveSession:
    player_name: str
    session: BaseSession


class GameSessionService:
    """Orchestration of layers for all games."""

    def __init__(self, repository: GameResultRepository, rng: Optional[random.Random] = None) -> None:
        self.repo = repository
        self.rng = rng
        self._sessions: dict[UUID, ActiveSession] = {}

    # -- Entry points ---
    def start_game(self, request: StartGameRequest) -> SessionResponse:
        """Create the session of a new round, using the request seed (or the service random source) for its randomness."""
        rng = make_rng(request.seed) if request.seed is not None else (self.rng or make_rng())
        session = create_session(request.game_type, request.difficulty, rng, request.mode)
        session_id = uuid4()
        self._sessions[session_id] = ActiveSession(request.player_name, session)
        logger.info(
            f"{request.player_name} started {request.game_type} ({request.difficulty}) as {session_id}"
        )
        return self._session_response(session_id)

    def apply_action(self, request: ActionRequest) -> OutcomeResponse:
        active = self._fetch_session(request.session_id)
        outcome = active.session.apply_action(request.action.to_action())
        return self._handle_outcome(request.session_id, active, outcome)

    def tick(self, request: TickRequest) -> OutcomeResponse:
        active = self._fetch_session(request.session_id)
        outcome = active.session.tick(request.seconds)
        return self._handle_outcome(request.session_id, active, outcome)

    def get_session_state(self, request: GetSessionRequest) -> SessionResponse:
        return self._session_response(request.session_id)

    def end_game(self, request: EndGameRequest) -> OutcomeResponse:
        """The player quit (or the frontend timer ran out): close the round as it stands."""
        active = self._fetch_session(request.session_id)
        outcome = active.session.end_game()
        return self._handle_outcome(request.session_id, active, outcome)

    def player_results(self, request: PlayerResultsRequest) -> PlayerResultsResponse:
        results = self.repo.results_for_player(request.player_name)
        total_points = sum(result.points_earned for result in results)
        return PlayerResultsResponse(
            player_name=request.player_name,
            results=[self._result_response(result) for result in results],
            total_points=total_points,
            level=calculate_level(total_points),
        )

    # -- Internal helpers --
    def _fetch_session(self, session_id: UUID) -> ActiveSession:
        """Attempt to find the running round and raise error if it fails."""
        active = self._sessions.get(session_id)
        if active is None:
            raise SessionNotFoundError(f"Session with {session_id=} not found.")
        return active

    def _session_response(self, session_id: UUID) -> SessionResponse:
        active = self._fetch_session(session_id)
        return SessionResponse(
            session_id=session_id,
            player_name=active.player_name,
            state=active.session.snapshot(),
        )

    def _handle_outcome(self, session_id: UUID, active: ActiveSession, outcome: Outcome) -> OutcomeResponse:
        result: Optional[GameResultResponse] = None
        if outcome.terminal and active.session.is_terminal and session_id in self._sessions:
            result = self._store_result(session_id, active)
        return OutcomeResponse(
            session_id=session_id,
            kind=outcome.kind,
            delta_score=outcome.delta_score,
            terminal=outcome.terminal,
            winner=outcome.winner,
            message=outcome.message,
            score=active.session.score,
            result=result,
        )

    def _store_result(self, session_id: UUID, active: ActiveSession) -> GameResultResponse:
        """Round is over: compute the reward points, persist the result and discard the session."""
        session = active.session
        duration = session.clock.elapsed
        points = reward_for_round(session.status, session.difficulty, session.score, duration)
        result = GameResultModel(
            player_name=active.player_name,
            game_type=session.game_type.value,
            difficulty=session.difficulty.value,
            score=session.score,
            points_earned=points,
            status=session.status.value,
            duration=duration,
            meta=session.summary(),
        )
        stored, result_id = self.repo.save_result(result)
        del self._sessions[session_id]
        logger.info(
            f"{active.player_name} finished {session.game_type} with status {session.status}: "
            f"score={session.score}, points={points}"
        )
        return self._result_response(stored, result_id)

    def _result_response(self, result: GameResultModel, result_id: Optional[UUID] = None) -> GameResultResponse:
        return GameResultResponse(
            result_id=result_id,
            player_name=result.player_name,
            game_type=result.game_type,
            difficulty=result.difficulty,
            score=result.score,
            points_earned=result.points_earned,
            status=result.status,
            duration=result.duration,
            meta=result.meta,
        )
