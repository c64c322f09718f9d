"""Rover rotation system.

Turns never move the rover and are never blocked, so they still apply after
a translation in the same batch was stopped by an obstacle.
"""

from dataclasses import replace

from pluto_rover.actions import Command
from pluto_rover.components import RoverPosition
from pluto_rover.moves import turn_left, turn_right
from pluto_rover.state import State


def turn_system(state: State, command: Command) -> State:
    """Rotate the rover 90 degrees.

    Args:
        state (State): Current state.
        command (Command): ``Command.LEFT`` or ``Command.RIGHT``.

    Returns:
        State: New state with the rotated heading.

    Raises:
        ValueError: If ``command`` is not a turn command.
    """
    if command == Command.LEFT:
        heading = turn_left(state.position.heading)
    elif command == Command.RIGHT:
        heading = turn_right(state.position.heading)
    else:
        raise ValueError(f"Not a turn command: {command!r}")
    position = RoverPosition(state.position.x, state.position.y, heading)
    return replace(state, position=position, blocked=False)
