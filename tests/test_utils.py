from pyrsistent import pset

from pluto_rover.components import Obstacle, RoverPosition
from pluto_rover.grid import Grid
from pluto_rover.rover import Rover
from pluto_rover.state import State
from pluto_rover.storage import MemoryObstacleStore, MemoryPositionStore
from pluto_rover.types import Heading


def make_rover_state(
    *,
    rover_pos: tuple[int, int] = (0, 0),
    heading: Heading = Heading.NORTH,
    obstacle_positions: list[tuple[int, int]] | None = None,
    max_x: int = 100,
    max_y: int = 100,
) -> State:
    """Rover state at ``rover_pos`` with obstacles at the given tiles."""
    return State(
        position=RoverPosition(*rover_pos, heading),
        grid=Grid(max_x, max_y),
        obstacles=pset(Obstacle(*pos) for pos in obstacle_positions or []),
    )


def make_memory_rover(
    *,
    rover_pos: tuple[int, int] | None = None,
    heading: Heading = Heading.NORTH,
    obstacle_positions: list[tuple[int, int]] | None = None,
) -> Rover:
    """Rover backed by in-memory stores, optionally pre-seeded."""
    position = RoverPosition(*rover_pos, heading) if rover_pos is not None else None
    obstacles = (
        [Obstacle(*pos) for pos in obstacle_positions]
        if obstacle_positions is not None
        else None
    )
    return Rover(
        position_store=MemoryPositionStore(position),
        obstacle_store=MemoryObstacleStore(obstacles),
    )


def assert_rover_position(
    actual: RoverPosition, expected: tuple[str, int, int],
) -> None:
    """Check a position against ``(heading, x, y)``."""
    heading, x, y = expected
    assert (actual.heading, actual.x, actual.y) == (Heading(heading), x, y), (
        f"Rover expected at {expected}, got {actual}"
    )
