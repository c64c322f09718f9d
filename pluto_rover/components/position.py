"""Rover position component.

Immutable integer grid coordinates plus heading. This is the record that the
position store persists after every command.
"""

from dataclasses import dataclass

from pluto_rover.types import Coordinate, Heading


@dataclass(frozen=True)
class RoverPosition:
    """Grid coordinate and heading.

    Attributes:
        x: Column index (0 at the western edge, grows east).
        y: Row index (0 at the southern edge, grows north).
        heading: Direction the rover is facing.
    """

    x: int = 0
    y: int = 0
    heading: Heading = Heading.NORTH

    @property
    def coordinate(self) -> Coordinate:
        return (self.x, self.y)
