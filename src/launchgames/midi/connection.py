"""MIDI port discovery and connection for the control surface."""

import logging
import threading
from typing import Callable, Optional

import mido

from launchgames.devices.launchpad import LaunchpadModel
from launchgames.exceptions import DeviceNotFoundError

logger = logging.getLogger(__name__)


def select_port(candidates: list[str]) -> Optional[str]:
    """
    Pick the best port among the ones matching the device.

    Launchpads expose a "MIDI" port for programmer mode and a "DAW" port
    for host integration; the MIDI one is preferred.
    """
    if not candidates:
        return None
    for port in candidates:
        upper = port.upper()
        if "MIDI" in upper and "DAW" not in upper:
            return port
    non_daw = [p for p in candidates if "DAW" not in p.upper()]
    return non_daw[0] if non_daw else candidates[0]


class MidiConnection:
    """
    Input/output port pair for one control surface.

    Unlike a hot-plug monitor, the connection is opened once at startup:
    if no matching device is present the program cannot run.
    """

    def __init__(self, port_pattern: Optional[str] = None):
        """
        Initialize MIDI connection.

        Args:
            port_pattern: Substring the port name must contain. If None,
                          any port recognised as a Launchpad matches.
        """
        self._pattern = port_pattern
        self._input: Optional[mido.ports.BaseInput] = None
        self._output: Optional[mido.ports.BaseOutput] = None
        self._port_lock = threading.Lock()
        self._message_callback: Optional[Callable[[mido.Message], None]] = None

    def _matches(self, port_name: str) -> bool:
        if self._pattern:
            return self._pattern.upper() in port_name.upper()
        return LaunchpadModel.detect(port_name) is not None

    def find_ports(self) -> tuple[str, str]:
        """
        Find input and output port names for the device.

        Raises:
            DeviceNotFoundError: If either side has no matching port
        """
        inputs = mido.get_input_names()
        outputs = mido.get_output_names()

        input_name = select_port([p for p in inputs if self._matches(p)])
        output_name = select_port([p for p in outputs if self._matches(p)])

        if input_name is None or output_name is None:
            raise DeviceNotFoundError(self._pattern, sorted(set(inputs) | set(outputs)))

        return input_name, output_name

    def on_message(self, callback: Callable[[mido.Message], None]) -> None:
        """
        Register callback for incoming MIDI messages.

        Callback is executed in mido's internal I/O thread - keep it fast!
        """
        self._message_callback = callback

    def open(self) -> None:
        """Open both ports."""
        input_name, output_name = self.find_ports()
        with self._port_lock:
            self._output = mido.open_output(output_name)
            logger.info(f"Connected to MIDI output: {output_name}")
            self._input = mido.open_input(input_name, callback=self._midi_callback)
            logger.info(f"Connected to MIDI input: {input_name}")

    def close(self) -> None:
        """Close both ports."""
        with self._port_lock:
            for port in (self._input, self._output):
                if port is None:
                    continue
                try:
                    port.close()
                except Exception as e:
                    logger.error(f"Error closing MIDI port {port.name}: {e}")
            self._input = None
            self._output = None
        logger.debug("MidiConnection closed")

    def send(self, message: mido.Message) -> bool:
        """
        Send MIDI message to device.

        Returns:
            True if sent successfully, False if not connected or the send failed
        """
        with self._port_lock:
            if self._output is None:
                return False
            try:
                self._output.send(message)
                return True
            except Exception as e:
                logger.error(f"Error sending MIDI message: {e}")
                return False

    def _midi_callback(self, msg: mido.Message) -> None:
        """Called from mido's internal I/O thread."""
        try:
            if self._message_callback:
                self._message_callback(msg)
        except Exception as e:
            logger.error(f"Error in MIDI input callback: {e}")

    @property
    def model(self) -> LaunchpadModel:
        """Hardware model detected from the output port name."""
        with self._port_lock:
            name = self._output.name if self._output else ""
        return LaunchpadModel.detect(name) or LaunchpadModel.MINI_MK3

    @property
    def is_connected(self) -> bool:
        """Check if both ports are open."""
        with self._port_lock:
            return self._input is not None and self._output is not None

    @staticmethod
    def list_ports() -> dict:
        """
        List all available MIDI ports.

        Returns:
            Dictionary with 'input' and 'output' lists of port names
        """
        return {
            "input": mido.get_input_names(),
            "output": mido.get_output_names(),
        }

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
