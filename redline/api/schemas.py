"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Every response is wrapped in an Envelope:
    {success: bool, message?: str, data?: any, error?: str, error_code?: str}

Error Codes:
- SESSION_NOT_FOUND: Race session does not exist or has ended
- VALIDATION_ERROR: Race could not be set up from the request
- ROUND_IN_PROGRESS: A round was started before the last one finished
- Engine rule codes (INVALID_INDEX, NOT_PLAYABLE, INSUFFICIENT_ENGINE, ...)
  are passed through unchanged
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class RaceStatus(str, Enum):
    """Race status values."""
    WAITING_ROUND = "waiting_round"
    WAITING_TURN = "waiting_turn"
    FINISHED = "finished"


class ErrorCode(str, Enum):
    """Structured error codes owned by the API layer."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Envelope
# =============================================================================

class Envelope(BaseModel):
    """Standard response wrapper."""
    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "Envelope":
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str, error_code: Optional[str] = None) -> "Envelope":
        return cls(success=False, error=error, error_code=error_code)


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    name: str
    speed: int = 0
    icons: dict[str, int] = Field(default_factory=dict)
    playable: bool = True
    discardable: bool = True
    basic: bool = False

    model_config = {"from_attributes": True}


class CarInfo(BaseModel):
    """Car state for display."""
    color: str
    speed: int = 0
    gear: int = Field(1, ge=1, le=5)
    engine: int = Field(0, ge=0)
    lap: int = Field(0, ge=0)
    position: Optional[int] = Field(None, description="Board index of the car's space")
    passed_corners: list[int] = Field(default_factory=list)


class PlayerInfo(BaseModel):
    """Player information for display."""
    name: str
    car: CarInfo
    hand: list[CardInfo] = Field(default_factory=list)
    deck_size: int = 0
    discard_size: int = 0
    icons: dict[str, int] = Field(default_factory=dict)
    is_current_turn: bool = False
    finished: bool = False


class MoveInfo(BaseModel):
    """How far a car travelled on its turn."""
    from_index: int
    to_index: int
    spaces_moved: int = 0
    laps_completed: int = 0
    corners_passed: list[int] = Field(default_factory=list)
    blocked: bool = False


# =============================================================================
# Requests
# =============================================================================

class CreateRaceRequest(BaseModel):
    """Request to create a race."""
    player_names: list[str] = Field(..., min_length=1, max_length=7)
    number_of_laps: int = Field(1, ge=1)
    track_id: str = "oval"
    seed: Optional[int] = None
    engine: int = Field(6, ge=0)
    hand_size: int = Field(7, ge=1)


class TurnRequest(BaseModel):
    """A full turn for the current racer."""
    player_name: str
    gear: Optional[int] = Field(None, description="Target gear; omit to stay in gear")
    play: list[int] = Field(default_factory=list, description="Hand indices to play")
    discard: list[int] = Field(
        default_factory=list,
        description="Hand indices to discard, after played cards have left the hand",
    )


# =============================================================================
# Responses
# =============================================================================

class RaceStateResponse(BaseModel):
    """Complete race state for display."""
    race_id: str
    status: RaceStatus
    track_id: Optional[str] = None
    round_number: int = 0
    number_of_laps: int = 1
    track_length: int = 0
    current_player: Optional[str] = None
    turn_order: list[str] = Field(default_factory=list)
    players: list[PlayerInfo] = Field(default_factory=list)
    api_version: str = "v1"


class TurnResponse(BaseModel):
    """Result of starting a round or taking a turn."""
    race_id: str
    status: RaceStatus
    player_name: Optional[str] = None
    speed: Optional[int] = None
    move: Optional[MoveInfo] = None
    icons: dict[str, int] = Field(default_factory=dict)
    next_player: Optional[str] = None
    turn_order: list[str] = Field(default_factory=list)
    changes: list[str] = Field(default_factory=list)
    api_version: str = "v1"


class TrackInfo(BaseModel):
    """A circuit layout."""
    track_id: str
    name: str
    length: int
    corner_positions: list[int] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
