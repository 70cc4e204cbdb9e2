"""
Tests for classic race setup.
"""

import pytest

from ..engine_core.state import RacePhase
from ..games.classic import STARTER_CARDS, build_starter_deck, create_race, get_track, TRACKS


class TestStarterDeck:
    """Tests for the starter deck."""

    def test_composition(self):
        cards = build_starter_deck()
        assert len(cards) == sum(d.copies for d in STARTER_CARDS) == 17
        assert sum(1 for c in cards if c.is_basic) == 12
        assert sum(1 for c in cards if c.is_stress) == 3

    def test_fresh_instances(self):
        first, second = build_starter_deck(), build_starter_deck()
        assert not set(map(id, first)) & set(map(id, second))


class TestTracks:
    """Tests for track layouts."""

    def test_layout_builds_board(self):
        board = get_track("oval").build_board(number_of_laps=3)
        assert len(board) == 24
        assert board.finish_line is board.space_at(0)
        assert board.space_at(6).corner == 1
        assert board.space_at(18).corner == 2
        assert board.number_of_laps == 3

    def test_unknown_track(self):
        with pytest.raises(KeyError):
            get_track("monaco")

    def test_all_tracks_have_finish_line(self):
        for layout in TRACKS.values():
            spaces = layout.build_spaces()
            assert spaces[0].is_finish_line
            assert sum(1 for s in spaces if s.is_finish_line) == 1


class TestCreateRace:
    """Tests for create_race."""

    def test_grid_two_per_space(self):
        race = create_race(["Ana", "Bo", "Cy"], seed=1)
        board = race.board
        assert [c.color for c in board.space_at(0).cars] == ["Red", "Blue"]
        assert [c.color for c in board.space_at(1).cars] == ["Green"]
        assert race.phase == RacePhase.RACING

    def test_opening_hands(self):
        race = create_race(["Ana", "Bo"], seed=1, hand_size=7)
        for player in race.players:
            assert len(player.hand) == 7
            assert len(player.deck) == 10
            assert player.discard_pile.is_empty
            assert player.car.gear == 1

    def test_same_seed_same_hands(self):
        first = create_race(["Ana", "Bo"], seed=5)
        second = create_race(["Ana", "Bo"], seed=5)
        for a, b in zip(first.players, second.players):
            assert [c.name for c in a.hand.cards] == [c.name for c in b.hand.cards]

    def test_engine_setting(self):
        race = create_race(["Ana"], engine=2)
        assert race.players[0].car.engine == 2

    @pytest.mark.parametrize("names", [[], ["A"] * 2, [f"P{i}" for i in range(8)]])
    def test_invalid_players(self, names):
        with pytest.raises(ValueError):
            create_race(names)

    def test_invalid_laps(self):
        with pytest.raises(ValueError):
            create_race(["Ana"], number_of_laps=0)

    def test_unknown_track(self):
        with pytest.raises(KeyError):
            create_race(["Ana"], track_id="nowhere")

    def test_lookup_helpers(self):
        race = create_race(["Ana", "Bo"], seed=1)
        bo = race.get_player("Bo")
        assert race.player_for_car(bo.car) is bo
        assert race.get_player("Zed") is None

    def test_clone_is_independent(self):
        race = create_race(["Ana", "Bo"], seed=1)
        copy = race.clone()
        copy.players[0].car.increase_lap()
        copy.players[0].hand.play_card(0)
        assert race.players[0].car.lap == 0
        assert len(race.players[0].hand) == 7
        # Cloned players still point at cloned cars on the cloned board
        assert copy.board.find_car(copy.players[0].car) is copy.board.space_at(0)
