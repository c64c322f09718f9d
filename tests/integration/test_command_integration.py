from contextlib import contextmanager
from typing import Iterator, List, Optional, Union

from pluto_rover.actions import Command
from pluto_rover.commands import DispatchResult, dispatch_commands
from pluto_rover.components import Obstacle, RoverPosition
from pluto_rover.rover import Rover
from pluto_rover.storage import MemoryPositionStore
from tests.test_utils import assert_rover_position, make_memory_rover


class RecordingRover:
    """Rover double that records every ``move`` call."""

    def __init__(self, fail_on: Optional[int] = None) -> None:
        self.moves: List[str] = []
        self.fail_on = fail_on
        self.in_batch = False

    @contextmanager
    def batch(self) -> Iterator["RecordingRover"]:
        self.in_batch = True
        try:
            yield self
        finally:
            self.in_batch = False

    def get_position(self) -> RoverPosition:
        return RoverPosition()

    def set_position(self, position: RoverPosition) -> None:
        pass

    def move(self, command: Union[Command, str]) -> None:
        assert self.in_batch
        self.moves.append(str(command))
        if self.fail_on is not None and len(self.moves) == self.fail_on:
            raise TimeoutError("signal did not reach the rover")

    def set_obstacles(self, obstacles: object) -> None:
        pass

    def encountered_obstacle(self) -> Optional[Obstacle]:
        return None


def test_dispatch_sends_each_recognized_command() -> None:
    rover = RecordingRover()
    result = dispatch_commands(rover, "FFFF")
    assert rover.moves == ["F", "F", "F", "F"]
    assert result == DispatchResult(applied=4)


def test_dispatch_never_sends_garbage() -> None:
    rover = RecordingRover()
    result = dispatch_commands(rover, "ZYZDDD%0919$$")
    assert rover.moves == []
    assert result == DispatchResult(skipped=13)


def test_dispatch_continues_after_failed_command() -> None:
    rover = RecordingRover(fail_on=2)
    result = dispatch_commands(rover, "FBxL")
    assert rover.moves == ["F", "B", "L"]
    assert result == DispatchResult(applied=2, skipped=1, failed=1)


def test_junk_commands_leave_rover_in_place() -> None:
    rover = make_memory_rover()
    rover.set_position(RoverPosition(0, 0))
    dispatch_commands(rover, "ZYZDDD%0919$$")
    assert_rover_position(rover.get_position(), ("N", 0, 0))


def test_junk_commands_with_backward_moves() -> None:
    rover = make_memory_rover(rover_pos=(10, 10))
    dispatch_commands(rover, "ZYZDBDD%B0919$$")
    assert_rover_position(rover.get_position(), ("N", 10, 8))


def test_forward_then_back_returns_home() -> None:
    rover = make_memory_rover(rover_pos=(0, 0))
    dispatch_commands(rover, "FFBBFB")
    assert_rover_position(rover.get_position(), ("N", 0, 0))


def test_backward_wrap_through_rover() -> None:
    rover = make_memory_rover(rover_pos=(0, 0))
    dispatch_commands(rover, "BB")
    assert_rover_position(rover.get_position(), ("N", 0, 99))


def test_obstacle_met_moving_forward() -> None:
    rover = make_memory_rover()
    rover.set_obstacles([Obstacle(24, 30), Obstacle(22, 30)])
    rover.set_position(RoverPosition(22, 28))
    dispatch_commands(rover, "FFFF")
    assert_rover_position(rover.get_position(), ("N", 22, 29))
    assert rover.encountered_obstacle() == Obstacle(22, 30)


def test_obstacle_met_moving_backward() -> None:
    rover = make_memory_rover()
    rover.set_obstacles([Obstacle(24, 30), Obstacle(22, 30)])
    rover.set_position(RoverPosition(24, 32))
    dispatch_commands(rover, "BBBB")
    assert_rover_position(rover.get_position(), ("N", 24, 31))
    assert rover.encountered_obstacle() == Obstacle(24, 30)


def test_obstacles_met_in_all_directions_with_garbage() -> None:
    rover = make_memory_rover(rover_pos=(3, 5), obstacle_positions=[(5, 5), (7, 7)])

    dispatch_commands(rover, "&ZRUYFF98F1F")
    assert_rover_position(rover.get_position(), ("E", 4, 5))
    assert rover.encountered_obstacle() == Obstacle(5, 5)

    dispatch_commands(rover, "<<L)(%F^^F8R817FF££FF")
    assert_rover_position(rover.get_position(), ("E", 6, 7))
    assert rover.encountered_obstacle() == Obstacle(7, 7)


class FlakyPositionStore(MemoryPositionStore):
    """Position store whose n-th save raises."""

    def __init__(self, fail_on: int) -> None:
        super().__init__(RoverPosition(0, 0))
        self.saves = 0
        self.fail_on = fail_on

    def save(self, position: RoverPosition) -> None:
        self.saves += 1
        if self.saves == self.fail_on:
            raise TimeoutError("write timed out")
        super().save(position)


def test_store_failure_does_not_abort_batch() -> None:
    rover = Rover(position_store=FlakyPositionStore(fail_on=2))
    result = dispatch_commands(rover, "FFF")
    # The second move's result was lost, the third continues from (0, 1).
    assert result == DispatchResult(applied=2, failed=1)
    assert_rover_position(rover.get_position(), ("N", 0, 2))
