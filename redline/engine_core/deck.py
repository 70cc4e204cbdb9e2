"""
Deck and DiscardPile - The card economy.

Deck:
- Ordered queue, front is the next draw
- Drawing from an empty deck yields None (a normal game event)
- Shuffling uses an injected random.Random so tests stay deterministic

DiscardPile:
- Unordered bag of spent cards
- reset_deck() is the only recycling path back into a deck
"""

from __future__ import annotations
import random
from typing import Iterable

from .card import Card


class Deck:
    """Ordered draw pile."""

    def __init__(self, cards: Iterable[Card] | None = None, rng: random.Random | None = None):
        self._cards: list[Card] = list(cards or [])
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def draw_card(self) -> Card | None:
        """Remove and return the front card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def shuffle(self):
        self._rng.shuffle(self._cards)

    def add_cards_to_top(self, cards: Iterable[Card] | None):
        """Prepend cards, keeping their supplied order at the front."""
        if not cards:
            return
        self._cards[:0] = list(cards)


class DiscardPile:
    """Bag of spent cards."""

    def __init__(self, cards: Iterable[Card] | None = None):
        self._cards: list[Card] = list(cards or [])

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"DiscardPile({len(self._cards)} cards)"

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def add_card(self, card: Card | None):
        if card is None:
            return
        self._cards.append(card)

    def reset_deck(self, deck: Deck | None):
        """
        Fold every discarded card back into deck, then shuffle it.

        The pile is emptied in the same step, so no card is ever in
        neither collection. A None deck is a no-op.
        """
        if deck is None:
            return
        cards, self._cards = self._cards, []
        deck.add_cards_to_top(cards)
        deck.shuffle()
