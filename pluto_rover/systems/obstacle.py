"""Obstacle field system.

Membership queries and wholesale replacement of the obstacle set. The field is
a ``PSet`` so lookups hash the coordinate instead of scanning.
"""

from dataclasses import replace
from typing import Iterable, Optional

from pyrsistent import pset

from pluto_rover.components import Obstacle
from pluto_rover.state import State


def obstacle_at(state: State, x: int, y: int) -> Optional[Obstacle]:
    """Return the obstacle occupying ``(x, y)`` or ``None``."""
    candidate = Obstacle(x, y)
    return candidate if candidate in state.obstacles else None


def replace_obstacles(state: State, obstacles: Optional[Iterable[Obstacle]]) -> State:
    """Replace the whole obstacle field.

    Args:
        state (State): Current state.
        obstacles (Iterable[Obstacle] | None): New field. ``None`` keeps the
            existing obstacles unchanged.

    Returns:
        State: Same state when ``obstacles`` is ``None``, otherwise a new state
            holding exactly the given obstacles.
    """
    if obstacles is None:
        return state
    return replace(state, obstacles=pset(obstacles))
