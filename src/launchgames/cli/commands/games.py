"""Game listing command."""

from pathlib import Path
from typing import Optional

import click

from launchgames.games import GAME_TYPES
from launchgames.models import AppConfig


@click.command(name="games")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.launchgames/config.json)",
)
def games(config_path: Optional[Path]):
    """List the built-in games in switching order."""
    config = AppConfig.load_or_default(config_path)

    click.echo("Games (side button 1 switches to the next one):\n")
    for i, name in enumerate(config.games):
        game_type = GAME_TYPES.get(name)
        title = game_type.title if game_type else "unknown, skipped"
        marker = "*" if name == config.start_game else " "
        click.echo(f" {marker}[{i}] {name:<14} {title}")
