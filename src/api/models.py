"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

# A square is sent as [row, column]
SquarePair = list[int]
PieceChar = str


def _validate_square(value: SquarePair) -> SquarePair:
    if len(value) != 2:
        raise InvalidRequestError(
            f"A square is written as [row, column]. Cannot interpret {value!r}."
        )
    row, col = value
    if not (0 <= row < BOARD_DIMENSIONS[0] and 0 <= col < BOARD_DIMENSIONS[1]):
        raise InvalidRequestError(f"Square {value!r} is not on the board.")
    return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    pass


class GetGameRequest(BaseModel):
    game_id: UUID


class ClickRequest(BaseModel):
    game_id: UUID
    square: SquarePair

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: SquarePair) -> SquarePair:
        return _validate_square(value)


class SelectRequest(ClickRequest):
    pass


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquarePair
    to_square: SquarePair

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: SquarePair) -> SquarePair:
        return _validate_square(value)


class UndoRequest(BaseModel):
    game_id: UUID


class RestartRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: list[list[Optional[PieceChar]]]
    active_player: Color
    selection: Optional[SquarePair]
    status: Status
    winner: Optional[Color]
    can_undo: bool
    history_length: int
    version: int
    accepted: bool = True
