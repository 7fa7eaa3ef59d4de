"""CLI entry point for fitlog."""

import click

from . import __version__
from .commands import show
from .commands.base import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="fitlog")
@click.option(
    "--log-level",
    envvar="FITLOG_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for workout and routine notifications",
)
def main(log_level: str):
    """fitlog: personal fitness log.

    Inspect routines and workouts stored as JSON.

    Example usage:

        # Print a routine
        fitlog show routine.json

        # Include soft-deleted workouts and exercises
        fitlog show routine.json --deleted
    """
    configure_logging(log_level)


# Register commands
main.add_command(show)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
