"""State reducer and command interpretation.

This module wires the systems together for a single command and folds a
command string over a state. Both exported functions are pure: they return
a *new* :class:`pluto_rover.state.State`.

Ordering within one command:

1. Translation commands ask their move function for an unwrapped candidate.
2. ``movement_system`` checks the candidate against the obstacle field and
    either records the obstacle or commits the wrapped move.
3. Turn commands go to ``turn_system``.
4. The ``turn`` counter is bumped for every recognized command.

Commands within a batch apply strictly left to right and nothing is rolled
back: a blocked translation leaves the rover where it was and the remaining
commands continue from there.
"""

from dataclasses import replace

from pluto_rover.actions import Command, MOVE_COMMANDS, TURN_COMMANDS, parse_commands
from pluto_rover.moves import MOVE_FN_REGISTRY
from pluto_rover.state import State
from pluto_rover.systems.movement import movement_system
from pluto_rover.systems.turn import turn_system
from pluto_rover.types import MoveFn


def step(state: State, command: Command) -> State:
    """Apply one command.

    Args:
        state (State): Previous immutable rover state.
        command (Command): Command to apply.

    Returns:
        State: Next state snapshot.

    Raises:
        ValueError: If the command is not recognized.
    """
    if command in MOVE_COMMANDS:
        state = _step_move(state, command)
    elif command in TURN_COMMANDS:
        state = turn_system(state, command)
    else:
        raise ValueError("Command is not valid")

    return replace(state, turn=state.turn + 1)


def interpret(state: State, commands: str) -> State:
    """Apply every recognized command in ``commands`` in order.

    Unrecognized characters are skipped without touching the state, so a
    string with no recognized commands returns ``state`` itself.
    """
    for command in parse_commands(commands):
        state = step(state, command)
    return state


def _step_move(state: State, command: Command) -> State:
    move_fn: MoveFn = MOVE_FN_REGISTRY[command]
    next_pos = move_fn(state.position)
    return movement_system(state, next_pos)
