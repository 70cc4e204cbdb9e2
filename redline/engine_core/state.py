"""
Race State - Everything one race owns.

A race is a fully isolated object graph: board, cars, players and
their cards. Nothing is shared between races, so a snapshot (clone)
can be taken before a turn and restored if the turn fails.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from enum import Enum
from typing import Any
import random

from .car import Car
from .player import Player
from .track import Board


class RacePhase(Enum):
    """High-level race phases."""
    SETUP = "setup"
    RACING = "racing"
    FINISHED = "finished"


@dataclass
class RaceState:
    """
    Complete race state at a point in time.

    current_player_name is the racer whose turn it is, or None
    between rounds.
    """
    race_id: str
    board: Board
    players: list[Player] = field(default_factory=list)

    phase: RacePhase = RacePhase.SETUP
    round_number: int = 0
    current_player_name: str | None = None
    hand_size: int = 7

    # Owned by this race only
    rng: random.Random = field(default_factory=random.Random)
    random_seed: int | None = None

    # Human-readable history of what happened
    action_log: list[str] = field(default_factory=list)

    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Player | None:
        if self.current_player_name is None:
            return None
        return self.get_player(self.current_player_name)

    def get_player(self, name: str) -> Player | None:
        """Get player by name."""
        for p in self.players:
            if p.name == name:
                return p
        return None

    def player_for_car(self, car: Car) -> Player | None:
        for p in self.players:
            if p.car is car:
                return p
        return None

    def standings(self) -> list[Player]:
        """Players ordered by lap, then by how far along the track they are."""
        def position(player: Player) -> tuple[int, int]:
            space = self.board.find_car(player.car)
            index = self.board.index_of(space) if space is not None else -1
            return (player.car.lap, index)

        return sorted(self.players, key=position, reverse=True)

    def clone(self) -> RaceState:
        """Deep copy the race."""
        return deepcopy(self)
