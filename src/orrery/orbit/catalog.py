"""The fixed table of tracked bodies."""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Union

from ..errors import UnknownBodyError
from ..logging import get_logger
from ..planet import Planet
from .body import CelestialBody

logger = get_logger(__name__)


class Catalog(Mapping[str, CelestialBody]):
    """Read-only mapping from lowercase body name to its orbital elements.

    Iteration follows insertion order. The underlying table is copied and
    frozen on construction, so a catalog never changes once built.
    """

    def __init__(self, bodies: Mapping[str, CelestialBody]) -> None:
        self._bodies: Mapping[str, CelestialBody] = MappingProxyType(dict(bodies))

    def __getitem__(self, name: str) -> CelestialBody:
        return self._bodies[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def __repr__(self) -> str:
        return f"Catalog({list(self._bodies)})"

    def lookup(self, name: Union[str, Planet]) -> CelestialBody:
        """Find a body by its exact, case-sensitive catalog key.

        Args:
            name: Lowercase body name, or a Planet member

        Returns:
            The body's orbital elements

        Raises:
            UnknownBodyError: If the name is not in the catalog
        """
        key = name.value if isinstance(name, Planet) else name
        try:
            body = self._bodies[key]
        except (KeyError, TypeError):
            raise UnknownBodyError(key) from None
        logger.debug(f"Looked up {key}: {body}")
        return body


def _build_catalog() -> Catalog:
    # Values from Singal & Singal (2009), referenced to 2000-01-01
    elements: Dict[Planet, tuple] = {
        Planet.MERCURY: (250.2, 87.969, 4.09235, 0.2056),
        Planet.VENUS: (181.2, 224.701, 1.60213, 0.0068),
        Planet.EARTH: (100.0, 365.256, 0.98561, 0.0167),
        Planet.MARS: (355.2, 686.98, 0.52403, 0.0934),
        Planet.JUPITER: (34.3, 4332.59, 0.08309, 0.0485),
        Planet.SATURN: (50.1, 10759.2, 0.03346, 0.0555),
    }
    return Catalog(
        {
            planet.value: CelestialBody(planet.value, *values)
            for planet, values in elements.items()
        }
    )


CATALOG = _build_catalog()
