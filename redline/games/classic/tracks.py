"""
Classic Tracks - Circuit layouts.

A layout is a length plus the board indices of its corners. Index 0 is
always the finish line. Corners are numbered 1..n in track order.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ...engine_core.track import Board, Space


@dataclass
class TrackLayout:
    """A named circuit layout."""
    track_id: str
    name: str
    length: int
    corner_positions: list[int] = field(default_factory=list)

    def build_spaces(self) -> list[Space]:
        corner_numbers = {pos: i + 1 for i, pos in enumerate(sorted(self.corner_positions))}
        return [
            Space(corner=corner_numbers.get(index, 0), finish_line=(index == 0))
            for index in range(self.length)
        ]

    def build_board(self, number_of_laps: int) -> Board:
        spaces = self.build_spaces()
        return Board(spaces, finish_line=spaces[0], number_of_laps=number_of_laps)


OVAL = TrackLayout(
    track_id="oval",
    name="Oval",
    length=24,
    corner_positions=[6, 18],
)

SPEEDWAY = TrackLayout(
    track_id="speedway",
    name="Speedway",
    length=40,
    corner_positions=[8, 15, 27, 34],
)


TRACKS: dict[str, TrackLayout] = {
    OVAL.track_id: OVAL,
    SPEEDWAY.track_id: SPEEDWAY,
}


def get_track(track_id: str) -> TrackLayout:
    """Look up a layout. Raises KeyError for unknown track ids."""
    try:
        return TRACKS[track_id]
    except KeyError:
        raise KeyError(f"Unknown track: {track_id}") from None
