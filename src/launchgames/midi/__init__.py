"""MIDI port handling."""

from .connection import MidiConnection, select_port

__all__ = ["MidiConnection", "select_port"]
