"""MIDI command implementations."""

import logging
import time
from datetime import datetime
from typing import Optional

import click
import mido

from launchgames.devices import LaunchpadInput
from launchgames.exceptions import LaunchGamesError
from launchgames.midi import MidiConnection

logger = logging.getLogger(__name__)


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""
    pass


@midi_group.command(name="list")
def list_midi():
    """List available MIDI ports."""
    ports = MidiConnection.list_ports()

    click.echo("MIDI Input Ports:\n")
    if not ports["input"]:
        click.echo("  No MIDI input ports found.")
    else:
        for i, port in enumerate(ports["input"]):
            click.echo(f"  [{i}] {port}")

    click.echo("\nMIDI Output Ports:\n")
    if not ports["output"]:
        click.echo("  No MIDI output ports found.")
    else:
        for i, port in enumerate(ports["output"]):
            click.echo(f"  [{i}] {port}")


@midi_group.command(name="monitor")
@click.option("--port", "-p", type=str, default=None, help="Port name pattern (default: any Launchpad)")
def monitor_midi(port: Optional[str]):
    """
    Show pad presses and releases as the surface reports them.

    Press Ctrl+C to stop monitoring.
    """
    parser = LaunchpadInput()
    connection = MidiConnection(port)

    def show(msg: mido.Message) -> None:
        event = parser.parse_message(msg)
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        click.echo(f"[{timestamp}] {event if event is not None else msg}")

    connection.on_message(show)
    try:
        with connection:
            click.echo("Monitoring, press Ctrl+C to stop\n")
            while True:
                time.sleep(0.1)
    except LaunchGamesError as e:
        click.echo(f"ERROR: {e.user_message}", err=True)
        if e.recovery_hint:
            click.echo(e.recovery_hint, err=True)
        raise SystemExit(1)
    except KeyboardInterrupt:
        click.echo("\n\nStopping monitor...")
