"""
Classic Cards - The starter deck every racer begins with.

Deck composition:
- Speed cards 1-4, three of each (basic)
- Three Stress cards
- One Boost upgrade and one Cooling upgrade

Card definitions are templates; build_starter_deck() creates fresh card
instances so no two players ever share a card.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ...engine_core.card import Card, CardKind, stress_card
from ...engine_core.icons import Icon


@dataclass
class CardDefinition:
    """Template for creating card instances."""
    name: str
    speed: int = 0
    icons: dict[Icon, int] = field(default_factory=dict)
    discardable: bool = True
    playable: bool = True
    basic: bool = False
    kind: CardKind = CardKind.GENERIC
    copies: int = 1

    def create(self) -> Card:
        if self.kind == CardKind.STRESS:
            return stress_card()
        return Card(
            name=self.name,
            speed=self.speed,
            icon_counts=self.icons,
            discardable=self.discardable,
            playable=self.playable,
            basic=self.basic,
            kind=self.kind,
        )


# ============================================================================
# Starter cards
# ============================================================================

SPEED_1 = CardDefinition(name="Speed 1", speed=1, basic=True, copies=3)
SPEED_2 = CardDefinition(name="Speed 2", speed=2, basic=True, copies=3)
SPEED_3 = CardDefinition(name="Speed 3", speed=3, basic=True, copies=3)
SPEED_4 = CardDefinition(name="Speed 4", speed=4, basic=True, copies=3)

STRESS = CardDefinition(
    name="Stress",
    discardable=False,
    kind=CardKind.STRESS,
    copies=3,
)

SLIPSTREAM = CardDefinition(
    name="Slipstream",
    speed=0,
    icons={Icon.BOOST: 1},
)

RADIATOR = CardDefinition(
    name="Radiator",
    speed=0,
    icons={Icon.COOLING: 1},
)


STARTER_CARDS: list[CardDefinition] = [
    SPEED_1,
    SPEED_2,
    SPEED_3,
    SPEED_4,
    STRESS,
    SLIPSTREAM,
    RADIATOR,
]


def build_starter_deck() -> list[Card]:
    """Fresh card instances for one player's starting deck, unshuffled."""
    cards = []
    for definition in STARTER_CARDS:
        for _ in range(definition.copies):
            cards.append(definition.create())
    return cards
