"""Approximate heliocentric longitudes of the planets from mean motion."""

from .constants import EPOCH
from .errors import ErrorKind, OrreryError, UnknownBodyError, InvalidDateError
from .planet import Planet
from .orbit import CelestialBody, Catalog, CATALOG, position_at, positions_at
from .space_time import days_between, to_utc_instant

__all__ = [
    "EPOCH",
    "ErrorKind",
    "OrreryError",
    "UnknownBodyError",
    "InvalidDateError",
    "Planet",
    "CelestialBody",
    "Catalog",
    "CATALOG",
    "position_at",
    "positions_at",
    "days_between",
    "to_utc_instant",
]
