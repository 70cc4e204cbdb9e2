"""
Engine Core - The rules engine of the race.

The engine is a synchronous state machine:
1. Board computes turn order from car positions
2. Each player plays and discards cards from their hand
3. Played cards resolve into car speed and icon totals
4. Cars advance around the circuit

All inputs are method calls; rule violations raise EngineError.
"""

from .errors import EngineError
from .icons import Icon, merge_icons
from .card import Card, CardKind, heat_card, stress_card, speed_card, upgrade_card
from .deck import Deck, DiscardPile
from .hand import Hand
from .car import Car, CarColor
from .track import Space, Board
from .player import Player
from .movement import MoveResult, advance_car
from .state import RaceState, RacePhase

__all__ = [
    "EngineError",
    "Icon",
    "merge_icons",
    "Card",
    "CardKind",
    "heat_card",
    "stress_card",
    "speed_card",
    "upgrade_card",
    "Deck",
    "DiscardPile",
    "Hand",
    "Car",
    "CarColor",
    "Space",
    "Board",
    "Player",
    "MoveResult",
    "advance_car",
    "RaceState",
    "RacePhase",
]
