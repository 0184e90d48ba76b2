"""Tests for the game manager."""

from unittest.mock import Mock

import pytest

from launchgames.games import Game, GameManager
from launchgames.models import PadPosition


def make_game(name: str) -> Mock:
    game = Mock(spec=Game)
    game.name = name
    return game


@pytest.fixture
def manager(registry):
    return GameManager(registry)


@pytest.fixture
def three_games(manager):
    games = [make_game("a"), make_game("b"), make_game("c")]
    for game in games:
        manager.add_game(game)
    return games


class TestEmptyManager:
    """Operations on an empty game list are no-ops."""

    def test_start_current(self, manager):
        manager.start_current()
        assert manager.active_game is None

    def test_switch_to_next(self, manager, surface):
        manager.switch_to_next()
        assert manager.active_game is None
        assert manager.current_index == 0
        surface.clear_pad.assert_not_called()

    def test_dispatch(self, manager):
        manager.dispatch(PadPosition(row=1, col=1))

    def test_stop_current(self, manager):
        manager.stop_current()


class TestGameManager:
    """Test starting, switching and routing."""

    def test_start_current_starts_first_game(self, manager, three_games):
        manager.start_current()

        assert manager.active_game is three_games[0]
        three_games[0].start.assert_called_once()
        three_games[1].start.assert_not_called()

    def test_start_current_only_once(self, manager, three_games):
        manager.start_current()
        manager.start_current()

        three_games[0].start.assert_called_once()

    def test_three_switches_return_to_first(self, manager, three_games):
        manager.start_current()
        for _ in range(3):
            manager.switch_to_next()

        assert manager.current_index == 0
        assert manager.active_game is three_games[0]

    def test_each_switch_stops_one_and_starts_one(self, manager, three_games):
        manager.start_current()

        manager.switch_to_next()
        three_games[0].stop.assert_called_once()
        three_games[1].start.assert_called_once()
        three_games[1].stop.assert_not_called()
        three_games[2].start.assert_not_called()

        manager.switch_to_next()
        three_games[1].stop.assert_called_once()
        three_games[2].start.assert_called_once()

        manager.switch_to_next()
        three_games[2].stop.assert_called_once()
        assert three_games[0].start.call_count == 2

    def test_switch_before_start(self, manager, three_games):
        """Without an active game nothing is stopped, the next one starts."""
        manager.switch_to_next()

        for game in three_games:
            game.stop.assert_not_called()
        three_games[1].start.assert_called_once()
        assert manager.active_game is three_games[1]

    def test_switch_stops_before_starting(self, manager, three_games):
        order = Mock()
        three_games[0].stop = order.stop_a
        three_games[1].start = order.start_b

        manager.start_current()
        manager.switch_to_next()

        assert [c[0] for c in order.mock_calls] == ["stop_a", "start_b"]

    def test_switch_clears_surface(self, manager, three_games, surface):
        manager.start_current()
        manager.switch_to_next()

        assert surface.clear_pad.call_count == 81

    def test_dispatch_forwards_to_active_game(self, manager, three_games):
        manager.start_current()
        position = PadPosition(row=2, col=3)

        manager.dispatch(position)

        three_games[0].handle_pad_press.assert_called_once_with(position)
        three_games[1].handle_pad_press.assert_not_called()

    def test_dispatch_before_start_is_dropped(self, manager, three_games):
        manager.dispatch(PadPosition(row=2, col=3))

        for game in three_games:
            game.handle_pad_press.assert_not_called()

    def test_add_game_after_start(self, manager, three_games):
        manager.start_current()
        late = make_game("d")
        manager.add_game(late)

        for _ in range(3):
            manager.switch_to_next()

        assert manager.active_game is late

    def test_select(self, manager, three_games):
        assert manager.select("c")
        manager.start_current()
        assert manager.active_game is three_games[2]

    def test_select_unknown(self, manager, three_games):
        assert not manager.select("nope")
        assert manager.current_index == 0

    def test_stop_current(self, manager, three_games):
        manager.start_current()
        manager.stop_current()

        three_games[0].stop.assert_called_once()
        assert manager.active_game is None
