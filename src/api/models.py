"""Requests and Response models"""

from typing import Annotated, Any, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Difficulty, GameType, OutcomeKind, PlayMode, parse_difficulty
from src.games.actions import (
    Action,
    AnswerQuestion,
    ClearSelection,
    EnterLetter,
    MovePiece,
    PlaceDigit,
    SelectCell,
    SubmitSequence,
)

PlayerName = str


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    player_name: PlayerName
    game_type: GameType
    difficulty: Difficulty
    seed: Optional[int] = None
    mode: PlayMode = PlayMode.SINGLE_PLAYER

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value.strip()

    @field_validator("difficulty", mode="before")
    @classmethod
    def validate_difficulty(cls, value: Any) -> Difficulty:
        if isinstance(value, Difficulty):
            return value
        return parse_difficulty(str(value))


# --- ACTION PAYLOADS (discriminated on `kind`) ---
class SelectCellPayload(BaseModel):
    kind: Literal["select_cell"] = "select_cell"
    index: int

    def to_action(self) -> Action:
        return SelectCell(self.index)


class ClearSelectionPayload(BaseModel):
    kind: Literal["clear_selection"] = "clear_selection"

    def to_action(self) -> Action:
        return ClearSelection()


class PlaceDigitPayload(BaseModel):
    kind: Literal["place_digit"] = "place_digit"
    row: int
    col: int
    value: int

    def to_action(self) -> Action:
        return PlaceDigit(self.row, self.col, self.value)


class MovePayload(BaseModel):
    kind: Literal["move"] = "move"
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False
            first_character = value[0]
            second_character = value[1]
            return first_character.isalpha() and second_character.isnumeric()

        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value.lower()

    def to_action(self) -> Action:
        return MovePiece(self.from_square, self.to_square)


class AnswerPayload(BaseModel):
    kind: Literal["answer"] = "answer"
    answer: str

    def to_action(self) -> Action:
        return AnswerQuestion(self.answer)


class EnterLetterPayload(BaseModel):
    kind: Literal["enter_letter"] = "enter_letter"
    row: int
    col: int
    letter: str

    def to_action(self) -> Action:
        return EnterLetter(self.row, self.col, self.letter)


class SubmitSequencePayload(BaseModel):
    kind: Literal["submit_sequence"] = "submit_sequence"
    digits: str

    def to_action(self) -> Action:
        return SubmitSequence(self.digits.strip())


ActionPayload = Annotated[
    Union[
        SelectCellPayload,
        ClearSelectionPayload,
        PlaceDigitPayload,
        MovePayload,
        AnswerPayload,
        EnterLetterPayload,
        SubmitSequencePayload,
    ],
    Field(discriminator="kind"),
]


class ActionRequest(BaseModel):
    session_id: UUID
    action: ActionPayload


class TickRequest(BaseModel):
    session_id: UUID
    seconds: int

    @field_validator("seconds")
    @classmethod
    def validate_seconds(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Clock cannot run backwards: {value} seconds.")
        return value


class GetSessionRequest(BaseModel):
    session_id: UUID


class EndGameRequest(BaseModel):
    session_id: UUID


class PlayerResultsRequest(BaseModel):
    player_name: PlayerName


# --- RESPONSE MODELS ---
class GameResultResponse(BaseModel):
    result_id: Optional[UUID] = None
    player_name: PlayerName
    game_type: GameType
    difficulty: Difficulty
    score: int
    points_earned: int
    status: str
    duration: int
    meta: dict[str, Any] = {}


class SessionResponse(BaseModel):
    session_id: UUID
    player_name: PlayerName
    state: dict[str, Any]


class OutcomeResponse(BaseModel):
    session_id: UUID
    kind: OutcomeKind
    delta_score: int
    terminal: bool
    winner: Optional[str] = None
    message: str = ""
    score: int
    result: Optional[GameResultResponse] = None


class PlayerResultsResponse(BaseModel):
    player_name: PlayerName
    results: list[GameResultResponse]
    total_points: int
    level: int
