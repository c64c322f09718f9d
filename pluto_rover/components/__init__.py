"""pluto_rover.components
=================================

Aggregate import surface for the value objects the rover engine works with.

All component classes are frozen ``@dataclass`` value objects; they carry no
behavior beyond their fields and are replaced (never mutated) by systems
during the step pipeline::

    from pluto_rover.components import Obstacle, RoverPosition
"""

from pluto_rover.types import Heading

from .obstacle import Obstacle
from .position import RoverPosition

__all__ = [
    "Heading",
    "Obstacle",
    "RoverPosition",
]
