"""Common type aliases and enumerations.

``Heading`` is the compass direction a rover faces; its single-letter values
match the serialized position records (``"N"``, ``"S"``, ``"E"``, ``"W"``).
"""

from enum import StrEnum
from typing import Callable, TYPE_CHECKING


# Forward declaration for MoveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from pluto_rover.components import RoverPosition

Coordinate = tuple[int, int]

MoveFn = Callable[["RoverPosition"], "RoverPosition"]


class Heading(StrEnum):
    """Compass heading of the rover."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


# Clockwise order; index is used by observation encodings.
HEADINGS = [Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST]
