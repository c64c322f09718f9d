import pytest

from pluto_rover.actions import Command, parse_commands, to_command
from pluto_rover.components import RoverPosition
from pluto_rover.moves import backward_move_fn, forward_move_fn, turn_left, turn_right
from pluto_rover.types import Heading


@pytest.mark.parametrize(
    "heading, expected",
    [
        (Heading.NORTH, (5, 6)),
        (Heading.SOUTH, (5, 4)),
        (Heading.EAST, (6, 5)),
        (Heading.WEST, (4, 5)),
    ],
)
def test_forward_move_fn(heading: Heading, expected: tuple[int, int]) -> None:
    candidate = forward_move_fn(RoverPosition(5, 5, heading))
    assert candidate.coordinate == expected
    assert candidate.heading == heading


@pytest.mark.parametrize(
    "heading, expected",
    [
        (Heading.NORTH, (5, 4)),
        (Heading.SOUTH, (5, 6)),
        (Heading.EAST, (4, 5)),
        (Heading.WEST, (6, 5)),
    ],
)
def test_backward_move_fn(heading: Heading, expected: tuple[int, int]) -> None:
    assert backward_move_fn(RoverPosition(5, 5, heading)).coordinate == expected


def test_candidates_are_not_wrapped() -> None:
    assert forward_move_fn(RoverPosition(0, 0, Heading.WEST)).coordinate == (-1, 0)
    assert forward_move_fn(RoverPosition(100, 0, Heading.EAST)).coordinate == (101, 0)


def test_turn_left_cycle() -> None:
    headings = [Heading.NORTH]
    for _ in range(4):
        headings.append(turn_left(headings[-1]))
    assert headings == [
        Heading.NORTH,
        Heading.WEST,
        Heading.SOUTH,
        Heading.EAST,
        Heading.NORTH,
    ]


def test_turn_right_cycle() -> None:
    headings = [Heading.NORTH]
    for _ in range(4):
        headings.append(turn_right(headings[-1]))
    assert headings == [
        Heading.NORTH,
        Heading.EAST,
        Heading.SOUTH,
        Heading.WEST,
        Heading.NORTH,
    ]


def test_parse_commands_keeps_only_recognized() -> None:
    assert parse_commands("ZYZDBDD%B0919$$") == (Command.BACKWARD, Command.BACKWARD)
    assert parse_commands("FLRB") == (
        Command.FORWARD,
        Command.LEFT,
        Command.RIGHT,
        Command.BACKWARD,
    )


def test_parse_commands_is_case_sensitive() -> None:
    assert parse_commands("flrb") == ()


def test_to_command() -> None:
    assert to_command("F") is Command.FORWARD
    assert to_command("x") is None
    assert to_command("") is None
