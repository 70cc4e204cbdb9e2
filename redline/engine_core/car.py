"""
Car - Per-player vehicle state.

Gear shifting rules:
- Target gear must be 1-5
- Shift by 0: refresh, nothing changes
- Shift by 1: free
- Shift by 2: costs one engine unit and puts a Heat card in the discard pile
- Shift by more than 2: not allowed

Landing on a low gear vents heat: gear 1 yields 3 Cooling, gear 2 yields 1.
"""

from __future__ import annotations
from enum import Enum

from .card import heat_card
from .deck import DiscardPile
from .errors import InvalidGearError, InsufficientEngineError, TooManyGearShiftsError
from .icons import Icon, IconCounts


MIN_GEAR = 1
MAX_GEAR = 5

# Cooling icons produced by landing on a gear
COOLING_BY_GEAR = {
    1: 3,
    2: 1,
}


class CarColor(Enum):
    """Car colors."""
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    ORANGE = "Orange"
    BLACK = "Black"
    GRAY = "Gray"


class Car:
    """A race car. Compared by identity."""

    def __init__(self, color: str, engine: int = 0, gear: int = MIN_GEAR):
        if gear < MIN_GEAR or gear > MAX_GEAR:
            raise InvalidGearError(f"gear must be between {MIN_GEAR} and {MAX_GEAR}")
        if engine < 0:
            raise ValueError(f"engine cannot be negative, got {engine}")
        self._color = color
        self._engine = engine
        self._gear = gear
        self._speed = 0
        self._lap = 0
        self._passed_corners: list[int] = []

    def __repr__(self) -> str:
        return f"Car({self._color}, gear={self._gear}, lap={self._lap}, engine={self._engine})"

    @property
    def color(self) -> str:
        return self._color

    @property
    def speed(self) -> int:
        return self._speed

    @speed.setter
    def speed(self, value: int):
        # Not clamped: upstream logic may report negative speeds
        self._speed = value

    @property
    def gear(self) -> int:
        return self._gear

    @property
    def engine(self) -> int:
        return self._engine

    @property
    def lap(self) -> int:
        return self._lap

    def increase_lap(self):
        self._lap += 1

    @property
    def passed_corners(self) -> list[int]:
        return list(self._passed_corners)

    def add_passed_corner(self, corner: int):
        self._passed_corners.append(corner)

    def reset_passed_corners(self):
        self._passed_corners = []

    def set_gear(self, gear: int, discard_pile: DiscardPile | None = None) -> IconCounts:
        """
        Shift to gear and return the Cooling icons earned by landing there.

        Raises InvalidGearError, TooManyGearShiftsError or
        InsufficientEngineError without changing any state.
        """
        if gear < MIN_GEAR or gear > MAX_GEAR:
            raise InvalidGearError(f"gear must be between {MIN_GEAR} and {MAX_GEAR}")

        shifts = abs(gear - self._gear)
        if shifts > 2:
            raise TooManyGearShiftsError("cannot shift more than 2 gears at once")
        if shifts == 2:
            if self._engine == 0:
                raise InsufficientEngineError(f"cannot shift to gear {gear} with engine 0")
            self._engine -= 1
            if discard_pile is not None:
                discard_pile.add_card(heat_card())

        self._gear = gear
        return cooling_icons_for_gear(gear)


def cooling_icons_for_gear(gear: int) -> IconCounts:
    """Cooling icons for landing on gear."""
    count = COOLING_BY_GEAR.get(gear, 0)
    if not count:
        return {}
    return {Icon.COOLING: count}
