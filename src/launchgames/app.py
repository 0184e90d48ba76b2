"""Application: wires the Launchpad to the games and runs until stopped."""

import logging
import signal
import threading
import time
from typing import Callable, Optional

import mido

from launchgames.core import PadDispatcher, PadRegistry
from launchgames.devices import LaunchpadInput, LaunchpadModel, LaunchpadSurface
from launchgames.games import Animator, GameManager, build_games
from launchgames.midi import MidiConnection
from launchgames.models import AppConfig, PadPosition

logger = logging.getLogger(__name__)

STARTUP_PAD = PadPosition(row=1, col=1)
STARTUP_COLOR = 53


class LaunchGamesApp:
    """
    Long-running pad games process.

    Startup order matters: the MIDI input is opened before the dispatcher
    runs, so presses made during the first game's intro are queued and
    handled afterwards rather than racing it.
    """

    def __init__(
        self,
        config: AppConfig,
        connection: Optional[MidiConnection] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the application.

        Args:
            config: Application configuration
            connection: MIDI connection (defaults to one built from config.port_pattern)
            sleep: Delay function used by animations
        """
        self.config = config
        self._connection = connection or MidiConnection(config.port_pattern)
        self._parser = LaunchpadInput()
        self._sleep = sleep
        self._stop_event = threading.Event()

        self.surface: Optional[LaunchpadSurface] = None
        self.registry: Optional[PadRegistry] = None
        self.animator: Optional[Animator] = None
        self.manager: Optional[GameManager] = None
        self.dispatcher: Optional[PadDispatcher] = None

    def initialize(self) -> None:
        """
        Connect to the device and build the game stack.

        Raises:
            DeviceNotFoundError: If no matching MIDI device is connected
        """
        self._connection.on_message(self._handle_message)
        self._connection.open()

        if self.config.model:
            model = LaunchpadModel(self.config.model)
        else:
            model = self._connection.model
        self.surface = LaunchpadSurface(self._connection.send, model)
        self.surface.initialize()

        self.registry = PadRegistry(self.surface)
        self.animator = Animator(self.registry, sleep=self._sleep)

        self.manager = GameManager(self.registry)
        for game in build_games(self.config, self.registry, self.animator):
            self.manager.add_game(game)
        if self.config.start_game:
            self.manager.select(self.config.start_game)

        self.dispatcher = PadDispatcher(self.manager, switch_pad=self.config.switch_game_pad)
        self.registry.clear_all()
        logger.info(f"Loaded {len(self.manager.games)} games")

    def run(self) -> None:
        """Initialize, start the first game and block until stopped."""
        self.initialize()

        if threading.current_thread() is threading.main_thread():
            signal.signal(signal.SIGTERM, lambda signum, frame: self.request_stop())

        # Ready signal; presses made meanwhile wait in the dispatcher queue
        if self.config.animation.startup_pulse > 0:
            self.animator.pulse(
                STARTUP_PAD, STARTUP_COLOR, self.config.animation.startup_pulse
            )

        self.manager.start_current()
        self.dispatcher.start()
        logger.info("Running, press Ctrl+C to stop")

        try:
            while not self._stop_event.wait(timeout=0.5):
                pass
        except KeyboardInterrupt:
            logger.info("Interrupted by user")

    def request_stop(self) -> None:
        """Ask `run` to return."""
        logger.info("Stop requested")
        self._stop_event.set()

    def shutdown(self) -> None:
        """Stop dispatching, blank the surface and close the ports."""
        # The worker may be inside an animation; cut it short, then wait
        # for the worker to exit before anything else touches the surface.
        if self.animator:
            self.animator.stop()
        if self.dispatcher:
            self.dispatcher.stop(timeout=None)
        if self.manager:
            self.manager.stop_current()
        if self.surface:
            self.surface.shutdown()
        self._connection.close()
        logger.info("Shut down")

    def _handle_message(self, msg: mido.Message) -> None:
        """Called from mido's I/O thread; parse and queue."""
        event = self._parser.parse_message(msg)
        if event is None:
            logger.debug(f"Unhandled message: {msg}")
            return
        if self.dispatcher is None:
            return
        self.dispatcher.submit(event)
