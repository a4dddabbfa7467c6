"""
Command-line interface utilities for orrery.

This module handles logging configuration and the shared output helpers
used by the commands.
"""

import logging
from typing import Dict, Any, Optional

import click

from ..errors import OrreryError
from ..logging import set_log_level
from ..orbit import CATALOG, positions_at
from ..space_time import today_string


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logging.getLogger("orrery").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def format_position(name: str, degrees: float) -> str:
    """Format one body's position as "<name>: <degrees>"."""
    return f"{name}: {degrees}"


def resolve_date(date: Optional[str]) -> str:
    """Use today's local calendar date when no date was given."""
    return date if date is not None else today_string()


def echo_positions(date: Optional[str] = None) -> None:
    """Print the position of every catalog body on a date."""
    date = resolve_date(date)
    try:
        positions = positions_at(date, CATALOG)
    except OrreryError as e:
        raise click.BadParameter(str(e), param_hint="'--date'") from e
    for name, degrees in positions.items():
        click.echo(format_position(name, degrees))
