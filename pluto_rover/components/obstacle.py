"""Obstacle component.

A fixed blocked coordinate. Hashable so obstacle fields can be stored in a
``PSet`` with O(1) membership checks.
"""

from dataclasses import dataclass

from pluto_rover.types import Coordinate


@dataclass(frozen=True)
class Obstacle:
    """Blocked tile.

    Attributes:
        x: Column index.
        y: Row index.
    """

    x: int
    y: int

    @property
    def coordinate(self) -> Coordinate:
        return (self.x, self.y)
