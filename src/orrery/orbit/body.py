"""Orbital properties of a single body."""

from dataclasses import dataclass

from ..constants import DAYS_PER_YEAR, KM_PER_AU


def au_to_km(au: float) -> float:
    """Convert astronomical units to kilometers."""
    return au * KM_PER_AU


@dataclass(frozen=True)
class CelestialBody:
    """Mean orbital elements of a body orbiting the sun.

    Attributes:
        name: Catalog key of the body
        mean_longitude: Location around the sun at the epoch, in degrees
        period: Orbital period in days
        angular_speed: Mean degrees travelled around the sun per day
        eccentricity: Eccentricity of the elliptical orbit
    """

    name: str
    mean_longitude: float
    period: float
    angular_speed: float
    eccentricity: float

    def __post_init__(self) -> None:
        if not 0 <= self.mean_longitude < 360:
            raise ValueError(
                f"Mean longitude of {self.name} must be in [0, 360): {self.mean_longitude}"
            )
        if self.period <= 0:
            raise ValueError(f"Orbital period of {self.name} must be positive: {self.period}")
        if self.angular_speed <= 0:
            raise ValueError(
                f"Angular speed of {self.name} must be positive: {self.angular_speed}"
            )
        if not 0 <= self.eccentricity < 1:
            raise ValueError(
                f"Eccentricity of {self.name} must be in [0, 1): {self.eccentricity}"
            )

    @property
    def years(self) -> float:
        """Orbital period in Earth years."""
        return self.period / DAYS_PER_YEAR

    @property
    def au(self) -> float:
        """Semi-major axis in astronomical units, from Kepler's third law."""
        return (self.years**2) ** (1 / 3)

    @property
    def km(self) -> float:
        """Semi-major axis in kilometers."""
        return au_to_km(self.au)

    @property
    def mean_angular_speed(self) -> float:
        """Degrees per day implied by the orbital period alone."""
        return 360.0 / self.period
