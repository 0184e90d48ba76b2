"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from launchgames import __version__

from .commands import config, games, midi_group

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".launchgames" / "logs"
DEBUG_LOG_NAME = "launchgames-debug.log"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log records go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / DEBUG_LOG_NAME
    return LOG_DIR / "launchgames.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Records always go to a rotating log file; -v additionally echoes them
    to stderr.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log everything at DEBUG to ./launchgames-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level for a custom log file

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="launchgames")
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.launchgames/config.json)'
)
@click.option(
    '--game',
    '-g',
    type=str,
    default=None,
    help='Game to start with (see: launchgames games)'
)
@click.option(
    '--port',
    '-p',
    type=str,
    default=None,
    help='MIDI port name pattern (default: any Launchpad)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG) and echo logs to stderr'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./launchgames-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for the custom log file (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    game: Optional[str],
    port: Optional[str],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Launchpad Games - small games for a Novation Launchpad in programmer mode.

    \b
    - Color Changer: every press steps a pad through the palette
    - Pixel Paint: pick a color in the left column, paint the grid
    - Tic Tac Toe: two players, only the last seven marks stay

    The side button next to the bottom row switches to the next game.

    \b
    Examples:
      # Run with defaults
      launchgames

      # Start straight into tic-tac-toe
      launchgames --game tictactoe

      # Use a specific MIDI port
      launchgames --port "LPMiniMK3 MIDI"

      # List MIDI devices
      launchgames midi list
    """
    if ctx.invoked_subcommand is not None:
        return

    from launchgames.app import LaunchGamesApp
    from launchgames.models import AppConfig

    log_path = setup_logging(verbose, debug, log_file, log_level)
    logger.info("Starting Launchpad Games")

    app = None
    try:
        config_obj = AppConfig.load_or_default(config_path)
        if game:
            config_obj.start_game = game
        if port:
            config_obj.port_pattern = port

        app = LaunchGamesApp(config=config_obj)
        app.run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        from launchgames.exceptions import format_error_for_display

        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)
    finally:
        if app is not None:
            app.shutdown()


cli.add_command(config)
cli.add_command(games)
cli.add_command(midi_group)

if __name__ == "__main__":
    cli()
