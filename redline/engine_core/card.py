"""
Cards - Immutable capability bundles.

A card describes:
- Name and speed contribution
- Icon counts (Icon -> count)
- Three capability flags: discardable, playable, basic

Special behavior is dispatched on CardKind rather than on the card
name. Cards compare by identity: two Speed 2 cards are different cards,
and moving a card between collections never duplicates it.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .icons import Icon, IconCounts


HEAT = "Heat"
STRESS = "Stress"


class CardKind(Enum):
    """Card variants with distinct rules."""
    GENERIC = "generic"
    HEAT = "heat"  # Cost of an aggressive gear shift
    STRESS = "stress"  # Resolves by drawing until a basic card


@dataclass(frozen=True, eq=False)
class Card:
    """
    A single card.

    Icons are stored as a tuple of (icon, count) pairs; the icons
    property hands out a fresh dict so callers cannot mutate shared
    card state.
    """
    name: str
    speed: int = 0
    icon_counts: Mapping[Icon, int] | tuple[tuple[Icon, int], ...] = ()
    discardable: bool = True
    playable: bool = True
    basic: bool = False
    kind: CardKind = CardKind.GENERIC

    def __post_init__(self):
        object.__setattr__(self, "icon_counts", tuple(dict(self.icon_counts or ()).items()))

    @property
    def icons(self) -> IconCounts:
        return dict(self.icon_counts)

    @property
    def is_discardable(self) -> bool:
        return self.discardable

    @property
    def is_playable(self) -> bool:
        return self.playable

    @property
    def is_basic(self) -> bool:
        return self.basic

    @property
    def is_stress(self) -> bool:
        return self.kind == CardKind.STRESS

    @property
    def is_heat(self) -> bool:
        return self.kind == CardKind.HEAT

    def __repr__(self) -> str:
        return f"Card({self.name!r}, speed={self.speed}, kind={self.kind.value})"


def heat_card() -> Card:
    """Factory for a Heat card: dead weight that cannot be played or discarded."""
    return Card(
        name=HEAT,
        speed=0,
        discardable=False,
        playable=False,
        basic=False,
        kind=CardKind.HEAT,
    )


def stress_card() -> Card:
    """Factory for a Stress card: playable, resolved by drawing until a basic card."""
    return Card(
        name=STRESS,
        speed=0,
        discardable=False,
        playable=True,
        basic=False,
        kind=CardKind.STRESS,
    )


def speed_card(speed: int) -> Card:
    """Factory for a basic speed card."""
    return Card(name=f"Speed {speed}", speed=speed, basic=True)


def upgrade_card(name: str, speed: int, icons: Mapping[Icon, int] | None = None) -> Card:
    """Factory for a non-basic upgrade card carrying icons."""
    return Card(name=name, speed=speed, icon_counts=icons or {}, basic=False)
