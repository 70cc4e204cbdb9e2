"""
Pytest fixtures for Redline tests.
"""

import random

import pytest

from ..engine_core.car import Car
from ..engine_core.card import Card, speed_card, stress_card, heat_card, upgrade_card
from ..engine_core.deck import Deck, DiscardPile
from ..engine_core.hand import Hand
from ..engine_core.icons import Icon
from ..engine_core.player import Player
from ..engine_core.track import Board, Space
from ..session import SessionManager


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG for deterministic shuffles."""
    return random.Random(1234)


@pytest.fixture
def speed_cards() -> list[Card]:
    """Speed 1-4, one of each."""
    return [speed_card(n) for n in range(1, 5)]


@pytest.fixture
def deck(speed_cards, rng) -> Deck:
    return Deck(speed_cards, rng=rng)


@pytest.fixture
def discard_pile() -> DiscardPile:
    return DiscardPile()


@pytest.fixture
def mixed_hand() -> Hand:
    """Hand of [Speed 1, Heat, Stress, Boost upgrade]."""
    return Hand([
        speed_card(1),
        heat_card(),
        stress_card(),
        upgrade_card("Slipstream", 1, {Icon.BOOST: 1}),
    ])


@pytest.fixture
def car() -> Car:
    """Red car in gear 1 with 3 engine."""
    return Car("Red", engine=3)


@pytest.fixture
def player(car, rng) -> Player:
    """Player with an empty hand and a small deck of speed cards."""
    deck = Deck([speed_card(n) for n in range(1, 5)], rng=rng)
    return Player("Ana", car, deck=deck, hand=Hand(), discard_pile=DiscardPile())


@pytest.fixture
def ring_board() -> Board:
    """Ten-space circuit: finish line at 0, corners at 3 and 7."""
    spaces = []
    for index in range(10):
        corner = {3: 1, 7: 2}.get(index, 0)
        spaces.append(Space(corner=corner, finish_line=(index == 0)))
    return Board(spaces, number_of_laps=2)


@pytest.fixture
def session_manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def two_player_session(session_manager):
    """Seeded two-player race on the oval."""
    return session_manager.create_session(["Ana", "Bo"], number_of_laps=1, seed=42)
