"""
Classic - The standard race content.

This module contains:
- Starter deck definitions
- Circuit layouts
- Race setup (grid placement, dealing)
"""

from .cards import CardDefinition, STARTER_CARDS, build_starter_deck
from .tracks import TrackLayout, TRACKS, get_track
from .setup import create_race

__all__ = [
    "CardDefinition",
    "STARTER_CARDS",
    "build_starter_deck",
    "TrackLayout",
    "TRACKS",
    "get_track",
    "create_race",
]
