"""Tests for LED animations."""

from unittest.mock import Mock

import pytest

from launchgames.games import Animator
from launchgames.models import LightMode, PadPosition


@pytest.fixture
def sleep():
    return Mock()


@pytest.fixture
def animator(registry, sleep):
    return Animator(registry, sleep=sleep)


class TestScrollText:
    """Test scrolling text across the grid."""

    def test_sleeps_once_per_frame(self, animator, sleep):
        animator.scroll_text("T", 21, 0.1)

        assert sleep.call_count == 13
        sleep.assert_called_with(0.1)

    def test_ends_dark(self, animator, registry):
        animator.scroll_text("HI", 21, 0.1)

        assert not any(pad.lit for pad in registry.snapshot().values())

    def test_draws_in_text_band(self, animator, surface):
        """Five glyph rows from row 7 down to row 3."""
        animator.scroll_text("T", 21, 0.1)

        rows = {c.args[0].row for c in surface.set_pad.call_args_list}
        assert rows == {3, 4, 5, 6, 7}
        assert all(c.args[1] == 21 for c in surface.set_pad.call_args_list)

    def test_blank_text_writes_nothing(self, animator, surface, sleep):
        """Only changed pads are written."""
        animator.scroll_text("", 21, 0.1)

        surface.set_pad.assert_not_called()
        surface.clear_pad.assert_not_called()
        assert sleep.call_count == 9

    def test_unchanged_pixels_not_rewritten(self, animator, surface):
        """The top bar of 'I' stays lit for three frames but is written once per pad."""
        animator.scroll_text("I", 21, 0.0)

        top_row_writes = [c for c in surface.set_pad.call_args_list if c.args[0].row == 7]
        assert len(top_row_writes) == 8
        assert surface.set_pad.call_count == 40

    def test_clipped_top_row(self, animator, surface):
        animator.scroll_text("T", 21, 0.1, top_row=2)

        rows = {c.args[0].row for c in surface.set_pad.call_args_list}
        assert rows <= {1, 2}


class TestStop:
    """Test cutting sequences short."""

    def test_stop_ends_scroll_at_frame_boundary(self, animator, sleep, surface):
        sleep.side_effect = lambda _: animator.stop() if sleep.call_count == 2 else None

        animator.scroll_text("TIC TAC TOE", 21, 0.1)

        assert sleep.call_count == 2
        assert animator.stopped

    def test_stop_ends_flash(self, animator, sleep, surface):
        sleep.side_effect = lambda _: animator.stop()

        animator.flash([PadPosition(row=1, col=1)], 5, 5, 0.2)

        assert surface.set_pad.call_count == 1
        assert surface.clear_pad.call_count == 1

    def test_stopped_animator_draws_nothing(self, animator, sleep, surface):
        animator.stop()

        animator.scroll_text("HI", 21, 0.1)
        animator.flash([PadPosition(row=1, col=1)], 5, 3, 0.2)

        surface.set_pad.assert_not_called()
        sleep.assert_not_called()


class TestFlash:
    """Test flashing a set of pads."""

    def test_flash_cycles(self, animator, surface, sleep):
        pads = [PadPosition(row=1, col=1), PadPosition(row=2, col=2)]

        animator.flash(pads, 5, 3, 0.2)

        assert surface.set_pad.call_count == 6
        assert surface.clear_pad.call_count == 6
        assert sleep.call_count == 6

    def test_flash_ends_off(self, animator, registry):
        pads = [PadPosition(row=1, col=1)]
        animator.flash(pads, 5, 2, 0.2)

        assert not registry.get(11).lit

    def test_flash_accepts_iterators(self, animator, surface):
        animator.flash(iter([PadPosition(row=1, col=1)]), 5, 2, 0.2)
        assert surface.set_pad.call_count == 2


class TestPulse:
    """Test pulsing a single pad."""

    def test_pulse(self, animator, surface, sleep, registry):
        position = PadPosition(row=4, col=4)

        animator.pulse(position, 45, 1.5)

        surface.set_pad.assert_called_once_with(position, 45, LightMode.PULSING)
        sleep.assert_called_once_with(1.5)
        surface.clear_pad.assert_called_once_with(position)
        assert not registry.get(44).lit
