"""Command enumerations and parsing.

Defines the :class:`Command` string enum whose values are the single
characters a rover accepts, and :func:`parse_commands` which turns an
arbitrary string into the recognized command sequence.

``MOVE_COMMANDS`` / ``TURN_COMMANDS`` are the canonical groupings; checks like
``if command in MOVE_COMMANDS`` are preferred over comparing characters.
"""

from enum import StrEnum
from typing import Optional


class Command(StrEnum):
    """Rover commands (case-sensitive single characters).

    Members:
        FORWARD, BACKWARD: Translate one tile along the current heading.
        LEFT, RIGHT: Rotate the heading by 90 degrees in place.
    """

    FORWARD = "F"
    BACKWARD = "B"
    LEFT = "L"
    RIGHT = "R"


MOVE_COMMANDS = [Command.FORWARD, Command.BACKWARD]
TURN_COMMANDS = [Command.LEFT, Command.RIGHT]

_BY_CHAR = {command.value: command for command in Command}


def to_command(char: str) -> Optional[Command]:
    """Return the command for ``char`` or ``None`` if it is not recognized."""
    return _BY_CHAR.get(char)


def parse_commands(text: str) -> tuple[Command, ...]:
    """Extract recognized commands from ``text`` in order.

    Unrecognized characters (including lowercase letters) are dropped.

    >>> parse_commands("F%f-R")
    (<Command.FORWARD: 'F'>, <Command.RIGHT: 'R'>)
    """
    return tuple(_BY_CHAR[char] for char in text if char in _BY_CHAR)
