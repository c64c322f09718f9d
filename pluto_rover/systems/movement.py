"""Rover translation system.

Attempts to move the rover to ``next_pos``:

1. The unwrapped candidate is checked against the obstacle field. If an
    obstacle sits there the move is rejected, the obstacle is recorded as
    ``encountered_obstacle`` and the position is left as it was.
2. Otherwise the candidate is committed and wrapped onto the grid.

A candidate that lies just past an edge is never matched against the tile it
would wrap to, so an obstacle on the opposite edge does not block the move.
"""

import logging
from dataclasses import replace

from pluto_rover.components import RoverPosition
from pluto_rover.state import State
from pluto_rover.systems.obstacle import obstacle_at

logger = logging.getLogger(__name__)


def movement_system(state: State, next_pos: RoverPosition) -> State:
    """Move the rover one tile if allowed.

    Args:
        state (State): Current state.
        next_pos (RoverPosition): Unwrapped candidate destination.

    Returns:
        State: Updated state. ``blocked`` is True and ``encountered_obstacle``
            is set when the move was rejected.
    """
    obstacle = obstacle_at(state, next_pos.x, next_pos.y)
    if obstacle is not None:
        logger.info(
            "Obstacle at (%d, %d) blocks move from (%d, %d)",
            obstacle.x,
            obstacle.y,
            state.position.x,
            state.position.y,
        )
        return replace(state, encountered_obstacle=obstacle, blocked=True)

    return replace(state, position=state.grid.wrap(next_pos), blocked=False)
