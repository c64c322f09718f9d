"""Gymnasium environment wrapper for the rover.

Each episode starts a fresh in-memory :class:`pluto_rover.state.State` and
steps it with the same reducer the stateful rover uses, so obstacle and wrap
behavior is identical.

Observation: ``np.ndarray([x, y, heading_index, blocked], dtype=int64)``
where ``heading_index`` follows :data:`pluto_rover.types.HEADINGS`.

Reward: ``1.0`` on reaching ``goal`` (terminates the episode), ``-1.0`` for a
blocked move, ``0.0`` otherwise. ``truncated`` once ``max_steps`` commands
have been applied.

Requires the ``rl`` extra (gymnasium, numpy).

Usage:

``env = RoverEnv(obstacles=[Obstacle(2, 2)], goal=(5, 5), max_steps=200)``
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from pluto_rover.actions import Command
from pluto_rover.components import Obstacle, RoverPosition
from pluto_rover.grid import Grid
from pluto_rover.state import State
from pluto_rover.step import step
from pluto_rover.systems.obstacle import replace_obstacles
from pluto_rover.types import HEADINGS, Coordinate

ObsType = np.ndarray

# Discrete action index -> command
ACTIONS: List[Command] = [Command.FORWARD, Command.BACKWARD, Command.LEFT, Command.RIGHT]

GLYPHS = {"rover": "^>v<", "obstacle": "#", "goal": "G", "floor": "."}


class RoverEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` driving a single rover.

    The action space is ``Discrete(4)``; see :data:`ACTIONS`.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        grid: Optional[Grid] = None,
        obstacles: Optional[Iterable[Obstacle]] = None,
        start: RoverPosition = RoverPosition(),
        goal: Optional[Coordinate] = None,
        max_steps: int = 500,
        render_mode: str = "ansi",
        view_radius: int = 5,
    ):
        """Create a new environment instance.

        Arguments:
            grid: Bounds and wrap rule. Defaults to ``Grid()``.
            obstacles: Obstacle field, fixed for every episode.
            start: Position (and heading) each episode begins at.
            goal: Tile that ends the episode with reward 1.0. ``None`` disables it.
            max_steps: Commands per episode before truncation.
            render_mode: Only ``"ansi"`` is supported.
            view_radius: Half-width of the window drawn by :meth:`render`.
        """
        self.grid = grid or Grid()
        self.obstacles = list(obstacles or [])
        self.start = start
        self.goal = goal
        self.max_steps = max_steps
        self.render_mode = render_mode
        self.view_radius = view_radius

        self.state: Optional[State] = None

        high = max(self.grid.max_x, self.grid.max_y)
        self.observation_space = spaces.Box(
            low=np.array([0, 0, 0, 0], dtype=np.int64),
            high=np.array([high, high, len(HEADINGS) - 1, 1], dtype=np.int64),
            dtype=np.int64,
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode at ``start`` with the configured obstacles."""
        super().reset(seed=seed)
        self.state = replace_obstacles(
            State(position=self.start, grid=self.grid), self.obstacles
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one command.

        Arguments:
            action: Index into :data:`ACTIONS`.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None, "Call reset() before step()"
        if not 0 <= int(action) < len(ACTIONS):
            raise ValueError(f"Invalid action: {action}")

        self.state = step(self.state, ACTIONS[int(action)])

        terminated = self.goal is not None and self.state.position.coordinate == tuple(self.goal)
        if terminated:
            reward = 1.0
        elif self.state.blocked:
            reward = -1.0
        else:
            reward = 0.0
        truncated = not terminated and self.state.turn >= self.max_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[str]:  # type: ignore[override]
        """Return a text window centred on the rover, north at the top."""
        assert self.state is not None
        if self.render_mode != "ansi":
            raise NotImplementedError(f"Render mode '{self.render_mode}' not supported.")
        position = self.state.position
        obstacles = {o.coordinate for o in self.state.obstacles}
        r = self.view_radius
        rows: List[str] = []
        for y in range(min(self.grid.max_y, position.y + r), max(0, position.y - r) - 1, -1):
            row = []
            for x in range(max(0, position.x - r), min(self.grid.max_x, position.x + r) + 1):
                if (x, y) == position.coordinate:
                    row.append(GLYPHS["rover"][HEADINGS.index(position.heading)])
                elif (x, y) in obstacles:
                    row.append(GLYPHS["obstacle"])
                elif self.goal is not None and (x, y) == tuple(self.goal):
                    row.append(GLYPHS["goal"])
                else:
                    row.append(GLYPHS["floor"])
            rows.append("".join(row))
        return "\n".join(rows)

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        position = self.state.position
        return np.array(
            [position.x, position.y, HEADINGS.index(position.heading), int(self.state.blocked)],
            dtype=np.int64,
        )

    def _get_info(self) -> Dict[str, Any]:
        assert self.state is not None
        encountered = self.state.encountered_obstacle
        return {
            "heading": self.state.position.heading.value,
            "turn": self.state.turn,
            "encountered_obstacle": encountered.coordinate if encountered else None,
        }
