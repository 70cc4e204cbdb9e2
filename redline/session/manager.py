"""
Session Manager - Creates and manages race sessions.

LIFECYCLE:
1. A race is created from a track, player list and seed
2. Rounds and turns are driven through the session's GameLoop
3. The session ends when the race finishes or is abandoned

PERSISTENCE RULES:
- Sessions live in memory only
- Each session owns its race outright; nothing is shared between
  sessions, and callers serialize access to a given session
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import logging
import time
import uuid

from ..engine_core.state import RaceState, RacePhase
from ..games.classic.setup import create_race, DEFAULT_ENGINE, DEFAULT_HAND_SIZE
from .game_loop import GameLoop


log = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a race session."""
    ACTIVE = "active"
    FINISHED = "finished"
    ABANDONED = "abandoned"


@dataclass
class Session:
    """An in-memory race session."""
    session_id: str
    game_state: RaceState
    created_at: float

    state: SessionState = SessionState.ACTIVE
    loop: GameLoop | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.loop is None:
            self.loop = GameLoop(self)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE and self.game_state.phase != RacePhase.FINISHED


class SessionManager:
    """
    Manages race sessions.

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        player_names: list[str],
        number_of_laps: int = 1,
        track_id: str = "oval",
        seed: int | None = None,
        engine: int = DEFAULT_ENGINE,
        hand_size: int = DEFAULT_HAND_SIZE,
    ) -> Session:
        """
        Create a new race session.

        Raises ValueError or KeyError if the race cannot be set up.
        """
        session_id = str(uuid.uuid4())
        race = create_race(
            player_names,
            number_of_laps=number_of_laps,
            track_id=track_id,
            seed=seed,
            engine=engine,
            hand_size=hand_size,
            race_id=session_id,
        )
        session = Session(session_id=session_id, game_state=race, created_at=time.time())
        self._sessions[session_id] = session
        log.info("Session %s created: %s on %s", session_id, ", ".join(player_names), track_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """Remove a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        if reason == "completed":
            session.state = SessionState.FINISHED
        else:
            session.state = SessionState.ABANDONED
        log.info("Session %s ended (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """End finished sessions older than max_age. Returns how many were removed."""
        current_time = time.time()
        to_remove = [
            sid for sid, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds and not session.is_active()
        ]
        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return len(to_remove)
