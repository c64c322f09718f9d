"""Runtime configuration.

:class:`RoverConfig` collects the grid bounds, the record locations and the
log level. Values come from keyword arguments or from ``PLUTO_ROVER_*``
environment variables via :meth:`RoverConfig.from_env`.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pluto_rover.errors import ConfigError
from pluto_rover.grid import DEFAULT_MAX_X, DEFAULT_MAX_Y, Grid
from pluto_rover.rover import Rover
from pluto_rover.storage import JsonObstacleStore, JsonPositionStore
from pluto_rover.utils.log import setup_logging

ENV_PREFIX = "PLUTO_ROVER_"


@dataclass(frozen=True)
class RoverConfig:
    """Rover settings.

    Attributes:
        max_x: Largest x coordinate before wrapping.
        max_y: Largest y coordinate before wrapping.
        position_path: JSON file holding the position record.
        obstacles_path: JSON file holding the obstacle record.
        log_level: Level name passed to :func:`pluto_rover.utils.log.setup_logging`.
    """

    max_x: int = DEFAULT_MAX_X
    max_y: int = DEFAULT_MAX_Y
    position_path: str = "roverposition.json"
    obstacles_path: str = "plutoobstacles.json"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_x < 0 or self.max_y < 0:
            raise ConfigError(f"Grid bounds must be non-negative, got {self.max_x}x{self.max_y}")

    @property
    def grid(self) -> Grid:
        return Grid(self.max_x, self.max_y)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RoverConfig":
        """Build a config from ``PLUTO_ROVER_*`` variables, defaulting the rest.

        Raises:
            ConfigError: If a bound is not an integer.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            max_x=_int_from_env(env, "MAX_X", defaults.max_x),
            max_y=_int_from_env(env, "MAX_Y", defaults.max_y),
            position_path=env.get(ENV_PREFIX + "POSITION_PATH", defaults.position_path),
            obstacles_path=env.get(ENV_PREFIX + "OBSTACLES_PATH", defaults.obstacles_path),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def build_rover(config: RoverConfig) -> Rover:
    """Rover wired to the JSON stores and grid named by ``config``.

    Also applies ``config.log_level`` to the package logger.
    """
    setup_logging(config.log_level)
    return Rover(
        position_store=JsonPositionStore(config.position_path),
        obstacle_store=JsonObstacleStore(config.obstacles_path),
        grid=config.grid,
    )
