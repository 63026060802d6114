"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.checkers.notation import FILES, RANKS, is_valid_state
from src.checkers.square import BOARD_SIZE
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Owner, Phase, Rank, Status

SquareName = str


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False
    return value[0] in FILES and value[1] in RANKS


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_state: Optional[str] = None

    @field_validator("starting_state")
    @classmethod
    def validate_starting_state(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        if not is_valid_state(value.strip()):
            raise InvalidRequestError(
                f"Cannot interpret starting_state: {value!r} as a valid checkers state."
            )
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class ClickRequest(BaseModel):
    game_id: UUID
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Coordinate {value} is off the board. Must be between 0 and {BOARD_SIZE - 1}."
            )
        return value


class LegalMovesRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class RestartGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    owner: Owner
    rank: Rank


class GameResponse(BaseModel):
    game_id: UUID
    board: list[list[Optional[PieceView]]]
    turn: Owner
    phase: Phase
    selection: Optional[SquareName]
    forced_continuation: Optional[SquareName]
    captured_by_red: list[PieceView]
    captured_by_black: list[PieceView]
    status: Status
    winner: Optional[Owner]
    state: str


class ClickResponse(BaseModel):
    game: GameResponse
    outcome: str
    rejection_reason: Optional[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    square: SquareName
    destinations: list[SquareName]
