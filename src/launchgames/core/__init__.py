"""Core state and event dispatch."""

from .dispatcher import PadDispatcher
from .registry import PadRegistry

__all__ = ["PadDispatcher", "PadRegistry"]
