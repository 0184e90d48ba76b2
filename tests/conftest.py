"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from launchgames.core import PadRegistry
from launchgames.games import Animator


def no_sleep(seconds: float) -> None:
    """Animation delay that returns immediately."""


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def surface():
    """Mock LED surface recording every write."""
    mock = Mock()
    mock.set_pad = Mock()
    mock.clear_pad = Mock()
    mock.clear_all = Mock()
    return mock


@pytest.fixture
def registry(surface):
    """Pad registry backed by the mock surface."""
    return PadRegistry(surface)


@pytest.fixture
def animator(registry):
    """Animator that doesn't wait between frames."""
    return Animator(registry, sleep=no_sleep)
