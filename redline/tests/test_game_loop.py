"""
Tests for the session game loop.

Tests:
- Round start and turn order
- Turn validation
- Full turns: gear, play, resolve, move, discard, refill
- Rollback of failed turns
- Finishing a race
"""

from ..engine_core.icons import Icon
from ..engine_core.state import RacePhase
from ..session import LoopState, TurnPlan, SessionState


def first_basic_index(player) -> int:
    return next(i for i, c in enumerate(player.hand.cards) if c.is_basic)


def playable_indices(player) -> list[int]:
    return [i for i, c in enumerate(player.hand.cards) if c.is_playable]


class TestRounds:
    """Tests for start_round."""

    def test_start_round(self, two_player_session):
        result = two_player_session.loop.start_round()

        assert result.success
        assert result.turn_order == ["Ana", "Bo"]
        assert result.next_player == "Ana"
        assert result.loop_state == LoopState.WAITING_TURN
        assert two_player_session.game_state.round_number == 1

    def test_round_in_progress(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        result = loop.start_round()
        assert not result.success
        assert result.error_code == "ROUND_IN_PROGRESS"

    def test_finished_cars_are_skipped(self, two_player_session):
        race = two_player_session.game_state
        race.get_player("Ana").car.increase_lap()

        result = two_player_session.loop.start_round()

        assert result.next_player == "Bo"


class TestTurnValidation:
    """Tests for rejected turns."""

    def test_not_your_turn(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        result = loop.take_turn(TurnPlan("Bo"))
        assert not result.success
        assert result.error_code == "NOT_YOUR_TURN"

    def test_turn_before_round(self, two_player_session):
        result = two_player_session.loop.take_turn(TurnPlan("Ana"))
        assert result.error_code == "NOT_YOUR_TURN"

    def test_unknown_player(self, two_player_session):
        two_player_session.loop.start_round()
        result = two_player_session.loop.take_turn(TurnPlan("Zed"))
        assert result.error_code == "PLAYER_NOT_FOUND"


class TestTakeTurn:
    """Tests for a full turn."""

    def test_basic_turn(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        ana = two_player_session.game_state.get_player("Ana")
        index = first_basic_index(ana)
        card_speed = ana.hand.cards[index].speed

        result = loop.take_turn(TurnPlan("Ana", gear=2, play=[index]))

        assert result.success
        assert result.speed == card_speed
        assert result.icons == {Icon.COOLING: 1}
        assert result.move.spaces_moved == card_speed
        assert result.next_player == "Bo"

        race = two_player_session.game_state
        ana = race.get_player("Ana")
        assert ana.car.gear == 2
        assert ana.car.speed == card_speed
        assert ana.icons == {Icon.COOLING: 1}
        assert len(ana.hand) == race.hand_size
        assert race.board.index_of(race.board.find_car(ana.car)) == card_speed

    def test_discard_after_play(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        ana = two_player_session.game_state.get_player("Ana")
        index = first_basic_index(ana)
        remaining = [c for i, c in enumerate(ana.hand.cards) if i != index]
        discard_index = next(i for i, c in enumerate(remaining) if c.is_discardable)
        discarded = remaining[discard_index]

        result = loop.take_turn(TurnPlan("Ana", play=[index], discard=[discard_index]))

        assert result.success
        assert discarded in ana.discard_pile.cards

    def test_round_ends_after_last_racer(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        loop.take_turn(TurnPlan("Ana"))
        result = loop.take_turn(TurnPlan("Bo"))

        assert result.success
        assert result.next_player is None
        assert result.loop_state == LoopState.WAITING_ROUND

    def test_failed_turn_rolls_back(self, two_player_session):
        """A shift succeeds, then a bad play index fails: the shift is undone."""
        loop = two_player_session.loop
        loop.start_round()
        hand_before = [c.name for c in two_player_session.game_state.get_player("Ana").hand.cards]

        result = loop.take_turn(TurnPlan("Ana", gear=2, play=[99]))

        assert not result.success
        assert result.error_code == "INVALID_INDEX"
        ana = two_player_session.game_state.get_player("Ana")
        assert ana.car.gear == 1
        assert ana.icons == {}
        assert [c.name for c in ana.hand.cards] == hand_before
        assert two_player_session.game_state.current_player_name == "Ana"

    def test_duplicate_play_index_rejected(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        hand_before = [c.name for c in two_player_session.game_state.get_player("Ana").hand.cards]

        result = loop.take_turn(TurnPlan("Ana", play=[0, 0]))

        assert not result.success
        assert result.error_code == "INVALID_INDEX"
        ana = two_player_session.game_state.get_player("Ana")
        assert [c.name for c in ana.hand.cards] == hand_before
        assert ana.played_cards == ()

    def test_duplicate_discard_index_rejected(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        result = loop.take_turn(TurnPlan("Ana", discard=[1, 1]))
        assert result.error_code == "INVALID_INDEX"
        assert two_player_session.game_state.current_player_name == "Ana"

    def test_gear_errors_surface(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        result = loop.take_turn(TurnPlan("Ana", gear=4))
        assert result.error_code == "TOO_MANY_GEAR_SHIFTS"

    def test_retry_after_failure(self, two_player_session):
        loop = two_player_session.loop
        loop.start_round()
        loop.take_turn(TurnPlan("Ana", gear=5))
        result = loop.take_turn(TurnPlan("Ana", gear=3))
        assert result.success
        assert two_player_session.game_state.get_player("Ana").car.engine == 5


class TestRaceFinish:
    """Tests for running a race to the end."""

    def test_race_runs_to_finish(self, session_manager):
        session = session_manager.create_session(["Ana", "Bo"], number_of_laps=1, seed=3)
        loop = session.loop

        for _ in range(30):
            if loop.state == LoopState.FINISHED:
                break
            result = loop.start_round()
            assert result.success
            while loop.state == LoopState.WAITING_TURN:
                name = session.game_state.current_player_name
                player = session.game_state.get_player(name)
                result = loop.take_turn(TurnPlan(name, play=playable_indices(player)))
                assert result.success, result.error

        race = session.game_state
        assert race.phase == RacePhase.FINISHED
        assert all(p.car.lap >= 1 for p in race.players)
        assert not session.is_active()
        assert loop.start_round().error_code == "RACE_OVER"


class TestSessionManager:
    """Tests for session lifecycle."""

    def test_create_and_get(self, session_manager):
        session = session_manager.create_session(["Ana"], seed=1)
        assert session_manager.get_session(session.session_id) is session
        assert session.game_state.race_id == session.session_id
        assert session_manager.list_active_sessions() == [session.session_id]

    def test_end_session(self, session_manager):
        session = session_manager.create_session(["Ana"], seed=1)
        assert session_manager.end_session(session.session_id)
        assert session.state == SessionState.FINISHED
        assert session_manager.get_session(session.session_id) is None
        assert not session_manager.end_session(session.session_id)

    def test_abandon_session(self, session_manager):
        session = session_manager.create_session(["Ana"], seed=1)
        session_manager.end_session(session.session_id, reason="user_ended")
        assert session.state == SessionState.ABANDONED

    def test_cleanup_keeps_active_sessions(self, session_manager):
        session_manager.create_session(["Ana"], seed=1)
        assert session_manager.cleanup_stale_sessions(max_age_seconds=-1) == 0
