"""Orbital model: bodies, the catalog, and position propagation."""

from .body import CelestialBody, au_to_km
from .catalog import Catalog, CATALOG
from .position import position_at, positions_at, body_position_at

__all__ = [
    "CelestialBody",
    "au_to_km",
    "Catalog",
    "CATALOG",
    "position_at",
    "positions_at",
    "body_position_at",
]
