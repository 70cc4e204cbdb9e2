"""
API Service - Business logic layer between the HTTP app and the engine.

The service:
1. Translates requests into session and game loop calls
2. Converts engine results and errors into Envelopes
3. Builds display models from race state

This layer is framework-agnostic (usable from FastAPI, a CLI or tests).
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..engine_core.card import Card
from ..engine_core.icons import icons_to_names
from ..engine_core.player import Player
from ..engine_core.state import RaceState
from ..games.classic.tracks import TRACKS
from ..session import SessionManager, Session, LoopState, TurnPlan, TurnResult
from .schemas import (
    Envelope,
    ErrorCode,
    RaceStatus,
    CardInfo,
    CarInfo,
    PlayerInfo,
    MoveInfo,
    CreateRaceRequest,
    TurnRequest,
    RaceStateResponse,
    TurnResponse,
    TrackInfo,
)


log = logging.getLogger(__name__)


@dataclass
class RaceService:
    """
    Main API service.

    Usage:
        service = RaceService()
        created = service.create_race(CreateRaceRequest(player_names=["Ana", "Bo"]))
        race_id = created.data["race_id"]
        service.start_round(race_id)
        service.take_turn(race_id, TurnRequest(player_name="Ana", play=[0]))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_race(self, request: CreateRaceRequest) -> Envelope:
        try:
            session = self.session_manager.create_session(
                request.player_names,
                number_of_laps=request.number_of_laps,
                track_id=request.track_id,
                seed=request.seed,
                engine=request.engine,
                hand_size=request.hand_size,
            )
        except (ValueError, KeyError) as e:
            message = e.args[0] if e.args else str(e)
            log.warning("Race setup rejected: %s", message)
            return Envelope.fail(str(message), ErrorCode.VALIDATION_ERROR.value)

        return Envelope.ok(self._build_race_state(session), message="Race created")

    def get_race(self, race_id: str) -> Envelope:
        session = self.session_manager.get_session(race_id)
        if session is None:
            return self._not_found(race_id)
        return Envelope.ok(self._build_race_state(session))

    def end_race(self, race_id: str, reason: str = "user_ended") -> Envelope:
        if not self.session_manager.end_session(race_id, reason):
            return self._not_found(race_id)
        return Envelope.ok({"race_id": race_id}, message="Race ended")

    def list_races(self) -> Envelope:
        races = self.session_manager.list_active_sessions()
        return Envelope.ok({"races": races, "count": len(races)})

    def list_tracks(self) -> Envelope:
        tracks = [
            TrackInfo(
                track_id=layout.track_id,
                name=layout.name,
                length=layout.length,
                corner_positions=list(layout.corner_positions),
            ).model_dump()
            for layout in TRACKS.values()
        ]
        return Envelope.ok(tracks)

    def start_round(self, race_id: str) -> Envelope:
        session = self.session_manager.get_session(race_id)
        if session is None:
            return self._not_found(race_id)
        return self._turn_result_to_envelope(session, session.loop.start_round())

    def take_turn(self, race_id: str, request: TurnRequest) -> Envelope:
        session = self.session_manager.get_session(race_id)
        if session is None:
            return self._not_found(race_id)

        plan = TurnPlan(
            player_name=request.player_name,
            gear=request.gear,
            play=list(request.play),
            discard=list(request.discard),
        )
        return self._turn_result_to_envelope(session, session.loop.take_turn(plan))

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _not_found(self, race_id: str) -> Envelope:
        return Envelope.fail(f"Race {race_id} not found", ErrorCode.SESSION_NOT_FOUND.value)

    def _turn_result_to_envelope(self, session: Session, result: TurnResult) -> Envelope:
        if not result.success:
            return Envelope.fail(result.error or "Turn failed", result.error_code)

        move = None
        if result.move is not None:
            move = MoveInfo(
                from_index=result.move.from_index,
                to_index=result.move.to_index,
                spaces_moved=result.move.spaces_moved,
                laps_completed=result.move.laps_completed,
                corners_passed=list(result.move.corners_passed),
                blocked=result.move.blocked,
            )

        return Envelope.ok(TurnResponse(
            race_id=session.session_id,
            status=self._loop_state_to_status(result.loop_state),
            player_name=result.player_name,
            speed=result.speed,
            move=move,
            icons=icons_to_names(result.icons),
            next_player=result.next_player,
            turn_order=result.turn_order,
            changes=result.changes,
        ))

    def _loop_state_to_status(self, loop_state: LoopState) -> RaceStatus:
        mapping = {
            LoopState.WAITING_ROUND: RaceStatus.WAITING_ROUND,
            LoopState.WAITING_TURN: RaceStatus.WAITING_TURN,
            LoopState.FINISHED: RaceStatus.FINISHED,
        }
        return mapping[loop_state]

    def _build_race_state(self, session: Session) -> RaceStateResponse:
        race = session.game_state
        board = race.board
        turn_order = []
        for car in board.racer_turn_order:
            player = race.player_for_car(car)
            turn_order.append(player.name if player else car.color)

        return RaceStateResponse(
            race_id=race.race_id,
            status=self._loop_state_to_status(session.loop.state),
            track_id=race.metadata.get("track_id"),
            round_number=race.round_number,
            number_of_laps=board.number_of_laps,
            track_length=len(board),
            current_player=race.current_player_name,
            turn_order=turn_order,
            players=[self._build_player(race, p) for p in race.players],
        )

    def _build_player(self, race: RaceState, player: Player) -> PlayerInfo:
        car = player.car
        space = race.board.find_car(car)
        return PlayerInfo(
            name=player.name,
            car=CarInfo(
                color=car.color,
                speed=car.speed,
                gear=car.gear,
                engine=car.engine,
                lap=car.lap,
                position=race.board.index_of(space) if space is not None else None,
                passed_corners=car.passed_corners,
            ),
            hand=[self._build_card(c) for c in player.hand.cards if c is not None],
            deck_size=len(player.deck),
            discard_size=len(player.discard_pile),
            icons=icons_to_names(player.icons),
            is_current_turn=(player.name == race.current_player_name),
            finished=race.board.has_finished(car),
        )

    def _build_card(self, card: Card) -> CardInfo:
        return CardInfo(
            name=card.name,
            speed=card.speed,
            icons=icons_to_names(card.icons),
            playable=card.is_playable,
            discardable=card.is_discardable,
            basic=card.is_basic,
        )
