"""
Track - Spaces and the Board that schedules turns.

Topology:
- The board is an ordered list of spaces; neighbors are computed by
  index modulo track length, so the circuit wraps without spaces holding
  references to each other
- Each space holds at most two cars, in the order they arrived
- corner > 0 marks a corner (its number); 0 is a straight

Turn order:
- Rebuilt from scratch by set_racer_turn_order()
- Scans spaces in board order and cars in arrival order
- Higher lap first; equal laps keep their scan order
"""

from __future__ import annotations
from typing import Iterable

from .car import Car
from .errors import SpaceFullError, NilCarError, CarNotFoundError, TurnOrderEmptyError


SPACE_CAPACITY = 2


class Space:
    """One cell of the circuit."""

    def __init__(self, corner: int = 0, finish_line: bool = False):
        self._cars: list[Car] = []
        self._corner = corner
        self._finish_line = finish_line

    def __repr__(self) -> str:
        flags = " finish" if self._finish_line else ""
        return f"Space(corner={self._corner}{flags}, cars={self._cars!r})"

    @property
    def cars(self) -> list[Car]:
        return list(self._cars)

    @property
    def corner(self) -> int:
        return self._corner

    @property
    def is_corner(self) -> bool:
        return self._corner > 0

    @property
    def is_finish_line(self) -> bool:
        return self._finish_line

    @property
    def is_full(self) -> bool:
        return len(self._cars) >= SPACE_CAPACITY

    @property
    def is_occupied(self) -> bool:
        return len(self._cars) > 0

    def has_car(self, car: Car) -> bool:
        return any(c is car for c in self._cars)

    def add_car(self, car: Car | None):
        if car is None:
            raise NilCarError("cannot add a missing car")
        if self.is_full:
            raise SpaceFullError("space is full")
        self._cars.append(car)

    def remove_car(self, car: Car):
        for i, c in enumerate(self._cars):
            if c is car:
                del self._cars[i]
                return
        raise CarNotFoundError(f"{car!r} is not on this space")


class Board:
    """
    The circuit plus the turn-order queue.

    If finish_line is not given, the first space flagged as a finish
    line is used, falling back to the first space.
    """

    def __init__(
        self,
        spaces: Iterable[Space],
        finish_line: Space | None = None,
        number_of_laps: int = 1,
    ):
        self._spaces: list[Space] = list(spaces)
        if finish_line is None:
            flagged = [s for s in self._spaces if s.is_finish_line]
            finish_line = flagged[0] if flagged else (self._spaces[0] if self._spaces else None)
        self._finish_line = finish_line
        self._number_of_laps = number_of_laps
        self._racer_turn_order: list[Car] = []

    @property
    def spaces(self) -> list[Space]:
        return list(self._spaces)

    @property
    def finish_line(self) -> Space | None:
        return self._finish_line

    @property
    def number_of_laps(self) -> int:
        return self._number_of_laps

    def __len__(self) -> int:
        return len(self._spaces)

    # =========================================================================
    # Topology
    # =========================================================================

    def index_of(self, space: Space) -> int:
        """Board index of space. Raises ValueError if it is not on this board."""
        for i, candidate in enumerate(self._spaces):
            if candidate is space:
                return i
        raise ValueError("space is not on this board")

    def space_at(self, index: int) -> Space:
        return self._spaces[index % len(self._spaces)]

    def next_space(self, space: Space) -> Space:
        return self.space_at(self.index_of(space) + 1)

    def previous_space(self, space: Space) -> Space:
        return self.space_at(self.index_of(space) - 1)

    def find_car(self, car: Car) -> Space | None:
        for space in self._spaces:
            if space.has_car(car):
                return space
        return None

    def cars(self) -> list[Car]:
        """All cars in scan order."""
        return [car for space in self._spaces for car in space.cars]

    # =========================================================================
    # Race progress
    # =========================================================================

    def has_finished(self, car: Car) -> bool:
        return car.lap >= self._number_of_laps

    @property
    def is_race_over(self) -> bool:
        cars = self.cars()
        return bool(cars) and all(self.has_finished(car) for car in cars)

    # =========================================================================
    # Turn order
    # =========================================================================

    @property
    def racer_turn_order(self) -> list[Car]:
        return list(self._racer_turn_order)

    @property
    def has_next_racer(self) -> bool:
        return len(self._racer_turn_order) > 0

    def set_racer_turn_order(self):
        """Rebuild the queue: descending lap, ties in scan order."""
        self._racer_turn_order = []
        for space in self._spaces:
            for car in space.cars:
                self._insert_racer(car)

    def get_next_racer(self) -> Car:
        """Pop the head of the queue."""
        if not self._racer_turn_order:
            raise TurnOrderEmptyError("no racers left in the turn order")
        return self._racer_turn_order.pop(0)

    def _insert_racer(self, car: Car):
        # Insert before the first car with a strictly lower lap
        for i, queued in enumerate(self._racer_turn_order):
            if queued.lap < car.lap:
                self._racer_turn_order.insert(i, car)
                return
        self._racer_turn_order.append(car)
