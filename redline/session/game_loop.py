"""
Game Loop - Rounds and turns of a race.

A round:
1. The board rebuilds the turn order from car positions
2. Racers take turns in that order (finished cars are skipped)
3. When the queue is drained the round is over

A turn, for the current racer only:
1. Optional gear shift (cooling icons go to the player)
2. Play cards by hand index
3. Resolve played cards into car speed
4. Move the car
5. Discard cards by hand index
6. Refill the hand

A turn is all-or-nothing: if any step breaks a rule the race is
restored to how it was before the turn started.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
import logging

from ..engine_core.errors import (
    EngineError,
    InvalidIndexError,
    NotYourTurnError,
    PlayerNotFoundError,
    RaceOverError,
)
from ..engine_core.icons import IconCounts
from ..engine_core.movement import MoveResult, advance_car
from ..engine_core.state import RaceState, RacePhase

if TYPE_CHECKING:
    from .manager import Session


log = logging.getLogger(__name__)

ROUND_IN_PROGRESS = "ROUND_IN_PROGRESS"


class LoopState(Enum):
    """State of the game loop."""
    WAITING_ROUND = "waiting_round"  # Between rounds
    WAITING_TURN = "waiting_turn"  # A racer is up
    FINISHED = "finished"


@dataclass
class TurnPlan:
    """
    Everything a racer does on their turn.

    play indices refer to the hand at the start of the turn; discard
    indices refer to the hand after the played cards have left it.
    """
    player_name: str
    gear: int | None = None
    play: list[int] = field(default_factory=list)
    discard: list[int] = field(default_factory=list)


@dataclass
class TurnResult:
    """Result of starting a round or taking a turn."""
    success: bool
    loop_state: LoopState

    player_name: str | None = None
    speed: int | None = None
    move: MoveResult | None = None
    icons: IconCounts = field(default_factory=dict)

    # Who is up next, and the order for this round
    next_player: str | None = None
    turn_order: list[str] = field(default_factory=list)

    changes: list[str] = field(default_factory=list)

    error: str | None = None
    error_code: str | None = None

    @classmethod
    def failure(cls, loop_state: LoopState, error: str, error_code: str | None = None) -> TurnResult:
        return cls(success=False, loop_state=loop_state, error=error, error_code=error_code)


class GameLoop:
    """
    Drives rounds and turns for one session.

    Usage:
        loop = GameLoop(session)
        result = loop.start_round()
        result = loop.take_turn(TurnPlan(result.next_player, gear=2, play=[0, 3]))
    """

    def __init__(self, session: Session):
        self.session = session

    @property
    def race(self) -> RaceState:
        return self.session.game_state

    @property
    def state(self) -> LoopState:
        if self.race.phase == RacePhase.FINISHED:
            return LoopState.FINISHED
        if self.race.current_player_name is not None:
            return LoopState.WAITING_TURN
        return LoopState.WAITING_ROUND

    def start_round(self) -> TurnResult:
        """Rebuild the turn order and hand the turn to the first racer."""
        race = self.race
        if race.phase == RacePhase.FINISHED:
            return TurnResult.failure(self.state, "The race is over", RaceOverError.error_code)
        if race.current_player_name is not None:
            return TurnResult.failure(
                self.state,
                f"Round {race.round_number} is still in progress",
                ROUND_IN_PROGRESS,
            )

        race.board.set_racer_turn_order()
        race.round_number += 1
        race.phase = RacePhase.RACING
        turn_order = [self._name_for(car) for car in race.board.racer_turn_order]

        self._advance_to_next_racer()

        change = f"Round {race.round_number} started: {', '.join(turn_order)}"
        race.action_log.append(change)
        log.info("%s: %s", race.race_id, change)

        return TurnResult(
            success=True,
            loop_state=self.state,
            next_player=race.current_player_name,
            turn_order=turn_order,
            changes=[change],
        )

    def take_turn(self, plan: TurnPlan) -> TurnResult:
        """Apply a full turn for the current racer."""
        race = self.race
        if race.phase == RacePhase.FINISHED:
            return TurnResult.failure(self.state, "The race is over", RaceOverError.error_code)
        if race.get_player(plan.player_name) is None:
            return TurnResult.failure(
                self.state,
                f"Player {plan.player_name} not found",
                PlayerNotFoundError.error_code,
            )
        if race.current_player_name != plan.player_name:
            return TurnResult.failure(
                self.state,
                f"Not {plan.player_name}'s turn",
                NotYourTurnError.error_code,
            )

        snapshot = race.clone()
        try:
            result = self._apply_turn(race, plan)
        except EngineError as e:
            self.session.game_state = snapshot
            log.warning("%s: turn rejected for %s: %s", race.race_id, plan.player_name, e)
            return TurnResult.failure(self.state, str(e), e.error_code)

        race.action_log.extend(result.changes)
        self._advance_to_next_racer()
        if race.board.is_race_over:
            race.phase = RacePhase.FINISHED
            race.current_player_name = None
            race.action_log.append("Race finished")
            log.info("%s: race finished after %d round(s)", race.race_id, race.round_number)

        result.loop_state = self.state
        result.next_player = race.current_player_name
        return result

    def _apply_turn(self, race: RaceState, plan: TurnPlan) -> TurnResult:
        player = race.get_player(plan.player_name)
        car = player.car
        changes = []
        icons: IconCounts = {}
        play_order = _descending_indices(plan.play, "play")
        discard_order = _descending_indices(plan.discard, "discard")

        if plan.gear is not None:
            old_gear = car.gear
            icons = car.set_gear(plan.gear, player.discard_pile)
            player.add_icons(icons)
            if old_gear != car.gear:
                changes.append(f"{player.name} shifted from gear {old_gear} to {car.gear}")

        for index in play_order:
            card = player.play_card(index)
            changes.append(f"{player.name} played {card.name}")

        speed = player.resolve_played_cards()
        move = advance_car(race.board, car)
        changes.append(f"{player.name} moved {move.spaces_moved} space(s) at speed {speed}")
        if move.laps_completed:
            changes.append(f"{player.name} completed lap {car.lap}")

        for index in discard_order:
            player.discard_card(index)

        player.hand.refill(player.deck, race.hand_size, player.discard_pile)

        return TurnResult(
            success=True,
            loop_state=LoopState.WAITING_TURN,
            player_name=player.name,
            speed=speed,
            move=move,
            icons=icons,
            changes=changes,
        )

    def _advance_to_next_racer(self):
        race = self.race
        race.current_player_name = None
        while race.board.has_next_racer:
            car = race.board.get_next_racer()
            if race.board.has_finished(car):
                continue
            race.current_player_name = self._name_for(car)
            return

    def _name_for(self, car) -> str:
        player = self.race.player_for_car(car)
        return player.name if player else car.color


def _descending_indices(indices: list[int], action: str) -> list[int]:
    """Hand indices highest first, so earlier indices stay valid while cards leave."""
    if len(set(indices)) != len(indices):
        raise InvalidIndexError(f"Duplicate hand index in {action}: {indices}")
    return sorted(indices, reverse=True)
