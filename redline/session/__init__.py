"""
Session Module - Manages in-memory race sessions.

A session represents one race:
- Created from a track, a player list and a seed
- Holds the current race state
- Drives rounds and turns through its GameLoop
- Destroyed when the race ends

Sessions are never persisted.
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnPlan, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnPlan",
    "TurnResult",
]
