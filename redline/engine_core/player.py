"""
Player - Binds a car to a card economy.

A player owns:
- One Car
- A Deck, a Hand and a DiscardPile
- The cards played this turn, waiting to be resolved
- Running icon totals

Resolution (resolve_played_cards):
1. Sum the speed of every played card and merge its icons
2. Each Stress card draws from the deck until a basic card turns up,
   reshuffling the discard pile into the deck when it runs dry; every
   drawn card is discarded and the basic card's speed is added
3. Set (not add to) the car's speed
4. Move the played cards to the discard pile
"""

from __future__ import annotations

from .car import Car
from .card import Card
from .deck import Deck, DiscardPile
from .errors import NoBasicCardAvailableError
from .hand import Hand
from .icons import IconCounts, merge_icons


class Player:
    """A racer and their cards."""

    def __init__(
        self,
        name: str,
        car: Car,
        deck: Deck | None = None,
        hand: Hand | None = None,
        discard_pile: DiscardPile | None = None,
    ):
        self.name = name
        self.car = car
        self.deck = deck if deck is not None else Deck()
        self.hand = hand if hand is not None else Hand()
        self.discard_pile = discard_pile if discard_pile is not None else DiscardPile()
        self._played_cards: list[Card] = []
        self._icons: IconCounts = {}

    def __repr__(self) -> str:
        return f"Player({self.name!r}, car={self.car!r})"

    @property
    def played_cards(self) -> tuple[Card, ...]:
        return tuple(self._played_cards)

    @property
    def icons(self) -> IconCounts:
        return dict(self._icons)

    def add_icons(self, icons: IconCounts | None):
        if not icons:
            return
        self._icons = merge_icons(self._icons, icons)

    def draw_card(self, deck: Deck | None = None) -> Card | None:
        return self.hand.draw_card(deck if deck is not None else self.deck)

    def discard_card(self, index: int):
        self.hand.discard_card(index, self.discard_pile)

    def play_card(self, index: int) -> Card:
        card = self.hand.play_card(index)
        self._played_cards.append(card)
        return card

    def resolve_played_cards(self) -> int:
        """
        Settle the played cards onto the car. Returns the speed set.

        Raises NoBasicCardAvailableError, before changing anything, if a
        Stress card is played while no basic card exists in the deck or
        discard pile.
        """
        if any(card.is_stress for card in self._played_cards) and not self._basic_card_reachable():
            raise NoBasicCardAvailableError(
                f"{self.name} has no basic card left to resolve Stress"
            )

        speed = 0
        for card in self._played_cards:
            if card.is_stress:
                speed += self._resolve_stress()
            speed += card.speed
            self.add_icons(card.icons)

        self.car.speed = speed

        resolved, self._played_cards = self._played_cards, []
        for card in resolved:
            self.discard_pile.add_card(card)
        return speed

    def _basic_card_reachable(self) -> bool:
        return any(c.is_basic for c in self.deck.cards) or any(
            c.is_basic for c in self.discard_pile.cards
        )

    def _resolve_stress(self) -> int:
        # Terminates: a basic card is reachable, and after one reset the
        # deck holds every recoverable card, so a full pass must find it.
        while True:
            if self.deck.is_empty:
                self.discard_pile.reset_deck(self.deck)
            card = self.deck.draw_card()
            if card is None:
                raise NoBasicCardAvailableError(
                    f"{self.name} ran out of cards while resolving Stress"
                )
            self.discard_pile.add_card(card)
            if card.is_basic:
                return card.speed
