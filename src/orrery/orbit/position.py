"""Mean longitude propagation from the epoch."""

import math
from typing import Dict, Union

from ..constants import EPOCH
from ..logging import get_logger
from ..planet import Planet
from ..space_time.date_math import days_between
from .body import CelestialBody
from .catalog import CATALOG, Catalog

logger = get_logger(__name__)


def body_position_at(body: CelestialBody, date: str) -> float:
    """Find where a body is around the sun on a given date.

    The mean longitude at the epoch is advanced linearly by the body's
    angular speed. Eccentricity is not applied.

    The remainder is truncated, not floored: a date far enough before the
    epoch gives a negative angle in (-360, 0].

    Args:
        body: Orbital elements of the body
        date: Date string, e.g. "12/31/1999"

    Returns:
        float: Longitude in degrees, in the open range (-360, 360)
    """
    elapsed_days = days_between(EPOCH, date)
    angle_traversed = body.angular_speed * elapsed_days
    raw_angle = body.mean_longitude + angle_traversed
    logger.debug(
        f"{body.name}: {elapsed_days} days since {EPOCH}, raw angle {raw_angle}"
    )
    return math.fmod(raw_angle, 360.0)


def position_at(
    name: Union[str, Planet], date: str, catalog: Catalog = CATALOG
) -> float:
    """Find where a named body is around the sun on a given date.

    Args:
        name: Catalog key of the body (e.g. "mars") or a Planet member
        date: Date string, e.g. "12/31/1999"
        catalog: Table to look the body up in

    Returns:
        float: Longitude in degrees

    Raises:
        UnknownBodyError: If the body is not in the catalog
        InvalidDateError: If the date cannot be parsed
    """
    body = catalog.lookup(name)
    return body_position_at(body, date)


def positions_at(date: str, catalog: Catalog = CATALOG) -> Dict[str, float]:
    """Positions of every catalog body on a date, in catalog order."""
    return {name: body_position_at(body, date) for name, body in catalog.items()}
