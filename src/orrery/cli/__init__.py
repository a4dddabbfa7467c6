"""CLI entry point for orrery."""

import click

from .positions import positions, position, info
from . import common as common
from ..logging import get_logger


logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, debug: bool, quiet: bool) -> None:
    """Orrery CLI.

    Without a command, prints today's position of every planet.
    """
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")

    if ctx.invoked_subcommand is None:
        common.echo_positions()


cli.add_command(positions)
cli.add_command(position)
cli.add_command(info)

if __name__ == "__main__":
    cli()
