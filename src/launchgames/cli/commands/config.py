"""Configuration command."""

from pathlib import Path
from typing import Optional

import click

from launchgames.models import AppConfig
from launchgames.models.config import DEFAULT_CONFIG_PATH


@click.command(name="config")
@click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.launchgames/config.json)",
)
@click.option("--write", is_flag=True, help="Write the effective configuration to the file")
def config(config_path: Optional[Path], write: bool):
    """Show the effective configuration."""
    path = config_path or DEFAULT_CONFIG_PATH
    config_obj = AppConfig.load_or_default(path)

    click.echo(config_obj.model_dump_json(indent=2))

    if write:
        config_obj.save(path)
        click.echo(f"\nWrote {path}")
