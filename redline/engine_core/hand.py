"""
Hand - Cards held by one player.

Discard and play address cards by position in the current hand order.
Removing a card shifts every later card down by one, so callers
removing several cards should go from the highest index to the lowest.
"""

from __future__ import annotations
from typing import Iterable

from .card import Card
from .deck import Deck, DiscardPile
from .errors import (
    InvalidIndexError,
    NilCardError,
    NotDiscardableError,
    NotPlayableError,
    NilTargetError,
)


class Hand:
    """Ordered cards owned by a single player."""

    def __init__(self, cards: Iterable[Card | None] | None = None):
        self._cards: list[Card | None] = list(cards or [])

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"

    @property
    def cards(self) -> tuple[Card | None, ...]:
        return tuple(self._cards)

    def add_cards(self, cards: Iterable[Card | None] | None):
        if not cards:
            return
        self._cards.extend(cards)

    def draw_card(self, deck: Deck | None) -> Card | None:
        """Draw one card from deck into the hand. Returns the card, or None if nothing was drawn."""
        if deck is None:
            return None
        card = deck.draw_card()
        if card is None:
            return None
        self._cards.append(card)
        return card

    def refill(self, deck: Deck, size: int, discard_pile: DiscardPile | None = None) -> int:
        """
        Draw until the hand holds size cards.

        When the deck runs dry the discard pile is folded back into it.
        Stops quietly once both are exhausted. Returns the number drawn.
        """
        drawn = 0
        while len(self._cards) < size:
            if deck.is_empty and discard_pile is not None and not discard_pile.is_empty:
                discard_pile.reset_deck(deck)
            if self.draw_card(deck) is None:
                break
            drawn += 1
        return drawn

    def discard_card(self, index: int, discard_pile: DiscardPile | None):
        """Move the card at index to discard_pile."""
        card = self._card_at(index)
        if not card.is_discardable:
            raise NotDiscardableError(f"{card.name} cannot be discarded")
        if discard_pile is None:
            raise NilTargetError("discard pile is missing")

        del self._cards[index]
        discard_pile.add_card(card)

    def play_card(self, index: int) -> Card:
        """Remove and return the card at index. The hand no longer references it."""
        card = self._card_at(index)
        if not card.is_playable:
            raise NotPlayableError(f"{card.name} cannot be played")

        del self._cards[index]
        return card

    def _card_at(self, index: int) -> Card:
        if index < 0 or index >= len(self._cards):
            raise InvalidIndexError(f"invalid card index {index} for hand of {len(self._cards)}")
        card = self._cards[index]
        if card is None:
            raise NilCardError(f"no card at index {index}")
        return card
