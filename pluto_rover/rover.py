"""Stateful rover facade.

:class:`Rover` is the one mutable object in the package. It owns a position
store, an obstacle store and a grid, and applies commands by loading the
persisted state, running the pure reducer and saving the result. The last
encountered obstacle lives only in memory.

All public methods take the rover's re-entrant lock. :meth:`Rover.batch`
holds the same lock for the duration of a command batch, so a concurrent
``get_position`` sees either the state before the batch or the state after
it, never a partial update.

Example:

``rover = Rover(JsonPositionStore("pos.json"), JsonObstacleStore("obs.json"))``
``rover.move("F")``
"""

import logging
import threading
from contextlib import contextmanager
from typing import ContextManager, Iterable, Iterator, Optional, Protocol, Union

from pyrsistent import pset

from pluto_rover.actions import Command, to_command
from pluto_rover.components import Obstacle, RoverPosition
from pluto_rover.grid import Grid
from pluto_rover.state import State
from pluto_rover.step import step
from pluto_rover.storage import (
    MemoryObstacleStore,
    MemoryPositionStore,
    ObstacleStore,
    PositionStore,
)
from pluto_rover.systems.obstacle import replace_obstacles

logger = logging.getLogger(__name__)

DEFAULT_POSITION = RoverPosition(0, 0)


class RoverInterface(Protocol):
    """Capability set shared by real and simulated rovers."""

    def get_position(self) -> RoverPosition: ...

    def set_position(self, position: RoverPosition) -> None: ...

    def move(self, command: Union[Command, str]) -> None: ...

    def set_obstacles(self, obstacles: Optional[Iterable[Obstacle]]) -> None: ...

    def encountered_obstacle(self) -> Optional[Obstacle]: ...

    def batch(self) -> ContextManager[object]: ...


class Rover:
    """Single rover backed by position and obstacle stores.

    Args:
        position_store: Where the position is persisted. Defaults to memory.
        obstacle_store: Where the obstacle field is persisted. Defaults to memory.
        grid: Bounds and wrap rule. Defaults to ``Grid()``.
    """

    def __init__(
        self,
        position_store: Optional[PositionStore] = None,
        obstacle_store: Optional[ObstacleStore] = None,
        grid: Optional[Grid] = None,
    ) -> None:
        self.position_store: PositionStore = position_store or MemoryPositionStore()
        self.obstacle_store: ObstacleStore = obstacle_store or MemoryObstacleStore()
        self.grid = grid or Grid()
        self._encountered: Optional[Obstacle] = None
        self._lock = threading.RLock()

    @contextmanager
    def batch(self) -> Iterator["Rover"]:
        """Hold the rover exclusively while a command batch runs."""
        with self._lock:
            yield self

    def get_position(self) -> RoverPosition:
        """Return the persisted position, or ``(N, 0, 0)`` if there is none."""
        with self._lock:
            return self._load_position()

    def set_position(self, position: RoverPosition) -> None:
        """Overwrite the persisted position (setup and testing)."""
        with self._lock:
            self.position_store.save(position)

    def move(self, command: Union[Command, str]) -> None:
        """Apply a single command and persist the resulting position.

        The position is saved whether the move succeeded or was blocked.
        Unrecognized characters leave the position unchanged.
        """
        with self._lock:
            state = self.state()
            recognized = command if isinstance(command, Command) else to_command(command)
            if recognized is not None:
                state = step(state, recognized)
                self._encountered = state.encountered_obstacle
                logger.debug("Applied %s -> %s", recognized.value, state.position)
            self.position_store.save(state.position)

    def set_obstacles(self, obstacles: Optional[Iterable[Obstacle]]) -> None:
        """Replace the obstacle field. ``None`` keeps the current field."""
        if obstacles is None:
            return
        with self._lock:
            obstacle_field = pset(obstacles)
            self.obstacle_store.save(obstacle_field)
            logger.info("Obstacle field replaced with %d obstacle(s)", len(obstacle_field))

    def encountered_obstacle(self) -> Optional[Obstacle]:
        """Return the last obstacle that blocked a move, if any."""
        with self._lock:
            return self._encountered

    def state(self) -> State:
        """Build the pure state snapshot from the stores."""
        with self._lock:
            state = State(
                position=self._load_position(),
                grid=self.grid,
                encountered_obstacle=self._encountered,
            )
            return replace_obstacles(state, self.obstacle_store.load())

    def _load_position(self) -> RoverPosition:
        position = self.position_store.load()
        return position if position is not None else DEFAULT_POSITION
