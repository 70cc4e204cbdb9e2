"""
Icons - Typed resource units carried by cards and accumulated by players.

Icons are how cards pay for things beyond raw speed:
- Boost: extra push gained from upgrade cards
- Cooling: heat vented, produced by low gears and some upgrades

Icon counts travel as plain dicts (Icon -> count). Helpers here
never mutate their inputs.
"""

from __future__ import annotations
from enum import Enum
from typing import Mapping


class Icon(Enum):
    """Icon types."""
    BOOST = "Boost"
    COOLING = "Cooling"

    def __str__(self) -> str:
        return self.value


IconCounts = dict[Icon, int]


def merge_icons(
    base: Mapping[Icon, int] | None,
    extra: Mapping[Icon, int] | None,
) -> IconCounts:
    """Return a new mapping with the counts of extra added to base."""
    merged: IconCounts = dict(base or {})
    for icon, count in (extra or {}).items():
        merged[icon] = merged.get(icon, 0) + count
    return merged


def parse_icon(name: str) -> Icon:
    """Convert an icon name ("boost", "Cooling") to Icon. Raises ValueError if unknown."""
    for icon in Icon:
        if icon.value.lower() == name.strip().lower():
            return icon
    raise ValueError(f"Unknown icon: {name}")


def icons_to_names(icons: Mapping[Icon, int]) -> dict[str, int]:
    """Serializable form of an icon mapping."""
    return {icon.value: count for icon, count in icons.items()}
