"""CLI commands for planetary positions."""

from typing import Optional

import click

from ..errors import OrreryError, UnknownBodyError
from ..orbit import CATALOG, body_position_at
from .common import echo_positions, format_position, resolve_date


@click.command()
@click.option(
    "--date",
    "-d",
    default=None,
    help="Date to get positions for, e.g. 03/15/2024. Defaults to today.",
)
def positions(date: Optional[str] = None) -> None:
    """Print the longitude of every planet.

    Examples:

       orrery positions

       orrery positions --date 12/31/1999
    """
    echo_positions(date)


@click.command()
@click.argument("planet")
@click.option(
    "--date",
    "-d",
    default=None,
    help="Date to get the position for, e.g. 03/15/2024. Defaults to today.",
)
def position(planet: str, date: Optional[str] = None) -> None:
    """Print the longitude of a single planet.

    Example:

       orrery position mars --date 1/1/2001
    """
    try:
        body = CATALOG.lookup(planet)
    except UnknownBodyError as e:
        raise click.BadParameter(str(e), param_hint="'PLANET'") from e

    try:
        degrees = body_position_at(body, resolve_date(date))
    except OrreryError as e:
        raise click.BadParameter(str(e), param_hint="'--date'") from e

    click.echo(format_position(planet, degrees))


@click.command()
@click.argument("planet", required=False)
@click.option(
    "--date",
    "-d",
    default=None,
    help="Date for the reported position. Defaults to today.",
)
def info(planet: Optional[str] = None, date: Optional[str] = None) -> None:
    """Print orbital properties and the current position of the planets.

    Without PLANET every planet in the catalog is described.
    """
    names = list(CATALOG) if planet is None else [planet]

    date = resolve_date(date)
    for name in names:
        try:
            body = CATALOG.lookup(name)
        except UnknownBodyError as e:
            raise click.BadParameter(str(e), param_hint="'PLANET'") from e

        try:
            degrees = body_position_at(body, date)
        except OrreryError as e:
            raise click.BadParameter(str(e), param_hint="'--date'") from e

        click.echo(f"Planet: {name}")
        click.echo(f"Astronomical Units: {body.au}")
        click.echo(f"Kilometers: {body.km}")
        click.echo(f"Years to orbit the sun: {body.years}")
        click.echo(f"Eccentricity: {body.eccentricity}")
        click.echo(f"Planet {name} is at {degrees}")
        click.echo("================")
