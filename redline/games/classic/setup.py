"""
Classic Setup - Build a ready-to-race RaceState.

Setup steps:
1. Build the board from a track layout
2. Create one car per player, colors assigned in CarColor order
3. Place cars on the grid, two per space, starting on the finish line
   and moving forward in player order
4. Build each starter deck, shuffle it with the race RNG and deal
   an opening hand

All randomness comes from one random.Random seeded per race.
"""

from __future__ import annotations
import random
import uuid

from ...engine_core.car import Car, CarColor
from ...engine_core.deck import Deck, DiscardPile
from ...engine_core.hand import Hand
from ...engine_core.player import Player
from ...engine_core.state import RaceState, RacePhase
from ...engine_core.track import SPACE_CAPACITY
from .cards import build_starter_deck
from .tracks import get_track


MIN_PLAYERS = 1
MAX_PLAYERS = len(CarColor)

DEFAULT_ENGINE = 6
DEFAULT_HAND_SIZE = 7


def create_race(
    player_names: list[str],
    number_of_laps: int = 1,
    track_id: str = "oval",
    seed: int | None = None,
    engine: int = DEFAULT_ENGINE,
    hand_size: int = DEFAULT_HAND_SIZE,
    race_id: str | None = None,
) -> RaceState:
    """
    Create a race ready for its first round.

    Raises ValueError for an invalid player list or lap count, and
    KeyError for an unknown track.
    """
    if not MIN_PLAYERS <= len(player_names) <= MAX_PLAYERS:
        raise ValueError(f"Races need {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(player_names)}")
    if len(set(player_names)) != len(player_names):
        raise ValueError("Player names must be unique")
    if number_of_laps < 1:
        raise ValueError("A race needs at least one lap")

    layout = get_track(track_id)
    if len(player_names) > layout.length * SPACE_CAPACITY:
        raise ValueError(f"Track {layout.name} cannot fit {len(player_names)} cars")

    rng = random.Random(seed)
    board = layout.build_board(number_of_laps)
    colors = list(CarColor)

    players = []
    for i, name in enumerate(player_names):
        car = Car(color=colors[i].value, engine=engine)
        board.space_at(i // SPACE_CAPACITY).add_car(car)

        deck = Deck(build_starter_deck(), rng=rng)
        deck.shuffle()
        hand = Hand()
        hand.refill(deck, hand_size)

        players.append(Player(name, car, deck=deck, hand=hand, discard_pile=DiscardPile()))

    state = RaceState(
        race_id=race_id or str(uuid.uuid4()),
        board=board,
        players=players,
        phase=RacePhase.RACING,
        hand_size=hand_size,
        rng=rng,
        random_seed=seed,
        metadata={"track_id": layout.track_id, "track_name": layout.name},
    )
    state.action_log.append(
        f"Race created on {layout.name}: {len(players)} cars, {number_of_laps} lap(s)"
    )
    return state
