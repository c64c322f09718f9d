"""Grid bounds and the wrap rule.

The grid spans ``0..max_x`` by ``0..max_y`` (both bounds inclusive). Stepping
past either edge re-enters at the opposite edge: values above the bound become
``0`` and negative values become the bound. Wrapping is silent; nothing here
raises for out-of-range input.
"""

from dataclasses import dataclass

from pluto_rover.components import RoverPosition

DEFAULT_MAX_X = 100
DEFAULT_MAX_Y = 100


@dataclass(frozen=True)
class Grid:
    """Bounded coordinate space.

    Attributes:
        max_x: Largest valid x coordinate.
        max_y: Largest valid y coordinate.
    """

    max_x: int = DEFAULT_MAX_X
    max_y: int = DEFAULT_MAX_Y

    def wrap(self, position: RoverPosition) -> RoverPosition:
        """Return ``position`` with both axes wrapped onto the grid."""
        return wrap_position(position, self.max_x, self.max_y)


def wrap_axis(value: int, upper: int) -> int:
    """Wrap a single axis value into ``0..upper``."""
    if value > upper:
        return 0
    if value < 0:
        return upper
    return value


def wrap_position(position: RoverPosition, max_x: int, max_y: int) -> RoverPosition:
    """Edge wrap for a rover position (heading is preserved)."""
    x = wrap_axis(position.x, max_x)
    y = wrap_axis(position.y, max_y)
    if (x, y) == (position.x, position.y):
        return position
    return RoverPosition(x, y, position.heading)
