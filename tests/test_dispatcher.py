"""Tests for pad event dispatch."""

import threading
import time
from unittest.mock import Mock

import pytest

from launchgames.core import PadDispatcher
from launchgames.devices import PadPressEvent, PadReleaseEvent
from launchgames.models import PadPosition


def press(row: int, col: int, velocity: int = 127) -> PadPressEvent:
    return PadPressEvent(PadPosition(row=row, col=col), velocity)


def release(row: int, col: int) -> PadReleaseEvent:
    return PadReleaseEvent(PadPosition(row=row, col=col))


@pytest.fixture
def manager():
    return Mock()


@pytest.fixture
def dispatcher(manager):
    return PadDispatcher(manager)


class TestRouting:
    """Test where presses end up."""

    def test_grid_press_dispatched(self, dispatcher, manager):
        dispatcher.process(press(4, 4))

        manager.dispatch.assert_called_once_with(PadPosition(row=4, col=4))
        manager.switch_to_next.assert_not_called()

    def test_switch_pad(self, dispatcher, manager):
        dispatcher.process(press(1, 9))

        manager.switch_to_next.assert_called_once()
        manager.dispatch.assert_not_called()

    def test_other_side_pads_dropped(self, dispatcher, manager):
        for row in range(2, 9):
            dispatcher.process(press(row, 9))

        manager.switch_to_next.assert_not_called()
        manager.dispatch.assert_not_called()

    def test_top_row_dispatched(self, dispatcher, manager):
        """Top control row goes to the active game."""
        dispatcher.process(press(9, 3))

        manager.dispatch.assert_called_once_with(PadPosition(row=9, col=3))

    def test_custom_switch_pad(self, manager):
        dispatcher = PadDispatcher(manager, switch_pad=89)

        dispatcher.process(press(1, 9))
        dispatcher.process(press(8, 9))

        manager.switch_to_next.assert_called_once()
        manager.dispatch.assert_not_called()


class TestHeldPads:
    """Test press/release tracking."""

    def test_repeat_press_ignored(self, dispatcher, manager):
        dispatcher.process(press(2, 2))
        dispatcher.process(press(2, 2))

        assert manager.dispatch.call_count == 1
        assert dispatcher.held_pads == {22}

    def test_release_allows_next_press(self, dispatcher, manager):
        dispatcher.process(press(2, 2))
        dispatcher.process(release(2, 2))
        dispatcher.process(press(2, 2))

        assert manager.dispatch.call_count == 2

    def test_zero_velocity_is_release(self, dispatcher, manager):
        dispatcher.process(press(2, 2))
        dispatcher.process(press(2, 2, velocity=0))

        assert dispatcher.held_pads == set()
        assert manager.dispatch.call_count == 1

    def test_release_without_press(self, dispatcher, manager):
        dispatcher.process(release(5, 5))

        assert dispatcher.held_pads == set()
        manager.dispatch.assert_not_called()

    def test_different_pads_held_together(self, dispatcher, manager):
        dispatcher.process(press(1, 1))
        dispatcher.process(press(8, 8))

        assert dispatcher.held_pads == {11, 88}
        assert manager.dispatch.call_count == 2

    def test_held_switch_pad_switches_once(self, dispatcher, manager):
        dispatcher.process(press(1, 9))
        dispatcher.process(press(1, 9))

        manager.switch_to_next.assert_called_once()


class TestWorker:
    """Test the threaded queue."""

    def test_submit_and_stop(self, dispatcher, manager):
        dispatcher.start()
        assert dispatcher.is_running

        dispatcher.submit(press(1, 1))
        dispatcher.submit(release(1, 1))
        dispatcher.submit(press(1, 1))
        dispatcher.stop()

        assert not dispatcher.is_running
        assert manager.dispatch.call_count == 2

    def test_events_handled_on_worker_thread(self, dispatcher, manager):
        threads = []
        manager.dispatch.side_effect = lambda position: threads.append(threading.current_thread().name)

        dispatcher.start()
        dispatcher.submit(press(3, 3))
        dispatcher.stop()

        assert threads == ["pad-dispatcher"]

    def test_error_does_not_stop_worker(self, dispatcher, manager):
        manager.dispatch.side_effect = [RuntimeError("boom"), None]

        dispatcher.start()
        dispatcher.submit(press(1, 1))
        dispatcher.submit(press(2, 2))
        dispatcher.stop()

        assert manager.dispatch.call_count == 2

    def test_start_twice(self, dispatcher):
        dispatcher.start()
        dispatcher.start()
        assert dispatcher.is_running
        dispatcher.stop()

    def test_stop_without_timeout_waits_for_handler(self, dispatcher, manager):
        started = threading.Event()
        finished = threading.Event()

        def slow_dispatch(position):
            started.set()
            time.sleep(0.3)
            finished.set()

        manager.dispatch.side_effect = slow_dispatch

        dispatcher.start()
        dispatcher.submit(press(1, 1))
        assert started.wait(timeout=2)
        dispatcher.stop(timeout=None)

        assert finished.is_set()

    def test_stop_without_start(self, dispatcher):
        dispatcher.stop()
        assert not dispatcher.is_running
