"""
Movement - Advancing a car around the circuit.

A car moves forward by its speed, one space at a time:
- Stepping onto a corner logs the corner number on the car
- Stepping onto the finish line completes a lap and clears the corner log
- If the destination is full the car drops back to the nearest space
  with room, never behind where it started

Laps and corners are only counted up to the space the car lands on, so
a car that drops back behind the finish line has not completed the lap.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .car import Car
from .errors import CarNotFoundError
from .track import Board


@dataclass
class MoveResult:
    """Outcome of advancing a car."""
    from_index: int
    to_index: int
    spaces_moved: int = 0
    laps_completed: int = 0
    corners_passed: list[int] = field(default_factory=list)
    blocked: bool = False  # Destination was full


def advance_car(board: Board, car: Car, speed: int | None = None) -> MoveResult:
    """
    Move car forward by speed spaces (car.speed if not given).

    Zero or negative speed leaves the car where it is.
    Raises CarNotFoundError if the car is not on the board.
    """
    origin = board.find_car(car)
    if origin is None:
        raise CarNotFoundError(f"{car!r} is not on the board")

    start = board.index_of(origin)
    steps = car.speed if speed is None else speed
    result = MoveResult(from_index=start, to_index=start)
    if steps <= 0:
        return result

    landing = steps
    while landing > 0 and board.space_at(start + landing).is_full:
        landing -= 1
        result.blocked = True

    for step in range(1, landing + 1):
        space = board.space_at(start + step)
        if space.is_corner:
            car.add_passed_corner(space.corner)
            result.corners_passed.append(space.corner)
        if space is board.finish_line:
            car.increase_lap()
            car.reset_passed_corners()
            result.laps_completed += 1

    if landing > 0:
        origin.remove_car(car)
        board.space_at(start + landing).add_car(car)

    result.to_index = board.index_of(board.space_at(start + landing))
    result.spaces_moved = landing
    return result
