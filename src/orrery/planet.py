from enum import Enum


class Planet(Enum):
    """Bodies tracked by the orrery, in catalog order."""

    MERCURY = "mercury"
    VENUS = "venus"
    EARTH = "earth"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
