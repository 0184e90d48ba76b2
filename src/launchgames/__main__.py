"""Main entry point for launchgames."""

from launchgames.cli.main import cli

if __name__ == "__main__":
    cli()
