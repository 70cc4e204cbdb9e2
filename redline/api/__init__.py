"""
API Module - HTTP interface to the race engine.

Clients:
1. Create a race
2. Start rounds
3. Submit turns for the racer who is up
4. Read race state between turns

All state is session-scoped and in memory.
"""

from .schemas import (
    Envelope,
    ErrorCode,
    RaceStatus,
    CreateRaceRequest,
    TurnRequest,
    RaceStateResponse,
    TurnResponse,
    PlayerInfo,
    CarInfo,
    CardInfo,
)
from .service import RaceService
from .app import create_app

__all__ = [
    "Envelope",
    "ErrorCode",
    "RaceStatus",
    "CreateRaceRequest",
    "TurnRequest",
    "RaceStateResponse",
    "TurnResponse",
    "PlayerInfo",
    "CarInfo",
    "CardInfo",
    "RaceService",
    "create_app",
]
