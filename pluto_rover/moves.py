"""Built-in movement and rotation functions.

Each *move function* maps a ``RoverPosition`` to the candidate position the
rover will attempt for a single translation command. Candidates are returned
*unwrapped*: the movement system checks them against the obstacle field first
and only wraps a move it commits.

Contract (``MoveFn``):

* Must not change the heading.
* Must move exactly one tile along one axis.
"""

from typing import Dict

from pluto_rover.actions import Command
from pluto_rover.components import RoverPosition
from pluto_rover.types import Heading, MoveFn

# Unit step for a forward move in each heading.
HEADING_DELTAS: Dict[Heading, tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.SOUTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.WEST: (-1, 0),
}

LEFT_OF: Dict[Heading, Heading] = {
    Heading.NORTH: Heading.WEST,
    Heading.WEST: Heading.SOUTH,
    Heading.SOUTH: Heading.EAST,
    Heading.EAST: Heading.NORTH,
}

RIGHT_OF: Dict[Heading, Heading] = {
    Heading.NORTH: Heading.EAST,
    Heading.EAST: Heading.SOUTH,
    Heading.SOUTH: Heading.WEST,
    Heading.WEST: Heading.NORTH,
}


def forward_move_fn(position: RoverPosition) -> RoverPosition:
    """Adjacent tile in the direction of the heading (no wrapping)."""
    dx, dy = HEADING_DELTAS[position.heading]
    return RoverPosition(position.x + dx, position.y + dy, position.heading)


def backward_move_fn(position: RoverPosition) -> RoverPosition:
    """Adjacent tile opposite the heading (no wrapping)."""
    dx, dy = HEADING_DELTAS[position.heading]
    return RoverPosition(position.x - dx, position.y - dy, position.heading)


def turn_left(heading: Heading) -> Heading:
    """Rotate counter-clockwise."""
    return LEFT_OF[heading]


def turn_right(heading: Heading) -> Heading:
    """Rotate clockwise."""
    return RIGHT_OF[heading]


MOVE_FN_REGISTRY: Dict[Command, MoveFn] = {
    Command.FORWARD: forward_move_fn,
    Command.BACKWARD: backward_move_fn,
}
"""Translation command to candidate function."""
