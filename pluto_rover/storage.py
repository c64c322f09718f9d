"""Persistence ports for rover position and obstacle field.

Two independent records are stored, each overwritten wholesale on save:

* position: ``{"direction": "N", "x": 0, "y": 0}``
* obstacles: ``[{"x": 22, "y": 30}, ...]``

Readers treat every failure (missing file, unreadable file, malformed JSON,
unexpected shape) as *no data* and return ``None``; the failure is logged so
it stays visible. Writers raise :class:`pluto_rover.errors.StorageError`.

The in-memory stores implement the same protocols for tests and simulations
that should not touch the filesystem.
"""

import json
import logging
import os
from typing import Any, Iterable, Optional, Protocol

from pyrsistent import PSet, pset

from pluto_rover.components import Obstacle, RoverPosition
from pluto_rover.errors import StorageError
from pluto_rover.types import Heading

logger = logging.getLogger(__name__)


class PositionStore(Protocol):
    def load(self) -> Optional[RoverPosition]: ...

    def save(self, position: RoverPosition) -> None: ...


class ObstacleStore(Protocol):
    def load(self) -> Optional[PSet[Obstacle]]: ...

    def save(self, obstacles: Iterable[Obstacle]) -> None: ...


def position_to_dict(position: RoverPosition) -> dict[str, Any]:
    return {
        "direction": position.heading.value,
        "x": position.x,
        "y": position.y,
    }


def position_from_dict(data: Any) -> RoverPosition:
    """Decode a position record.

    Raises:
        ValueError: If the record is not a mapping with an integer ``x``/``y``
            and a known ``direction``.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Position record must be an object, got {type(data).__name__}")
    try:
        heading = Heading(data["direction"])
        x, y = data["x"], data["y"]
    except KeyError as exc:
        raise ValueError(f"Position record is missing {exc}") from exc
    if not _is_int(x) or not _is_int(y):
        raise ValueError(f"Position coordinates must be integers, got {x!r}, {y!r}")
    return RoverPosition(x, y, heading)


def obstacles_to_list(obstacles: Iterable[Obstacle]) -> list[dict[str, int]]:
    # Sorted so the file contents are stable for identical fields.
    return [{"x": o.x, "y": o.y} for o in sorted(obstacles, key=lambda o: (o.x, o.y))]


def obstacles_from_list(data: Any) -> PSet[Obstacle]:
    """Decode an obstacle record.

    Raises:
        ValueError: If the record is not a list of ``{"x": int, "y": int}``.
    """
    if not isinstance(data, list):
        raise ValueError(f"Obstacle record must be a list, got {type(data).__name__}")
    obstacles: list[Obstacle] = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"Obstacle entry must be an object, got {item!r}")
        x, y = item.get("x"), item.get("y")
        if not _is_int(x) or not _is_int(y):
            raise ValueError(f"Obstacle coordinates must be integers, got {item!r}")
        obstacles.append(Obstacle(x, y))
    return pset(obstacles)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _read_json(path: str) -> Any:
    """Return parsed JSON from ``path`` or ``None`` if it cannot be read."""
    if not os.path.exists(path):
        logger.debug("No record at %s", path)
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable record %s: %s", path, exc)
        return None


def _write_json(path: str, data: Any) -> None:
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
    except OSError as exc:
        raise StorageError(f"Could not write {path}: {exc}") from exc


class JsonPositionStore:
    """Position record kept in a JSON file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> Optional[RoverPosition]:
        data = _read_json(self.path)
        if data is None:
            return None
        try:
            return position_from_dict(data)
        except ValueError as exc:
            logger.warning("Ignoring malformed position record %s: %s", self.path, exc)
            return None

    def save(self, position: RoverPosition) -> None:
        _write_json(self.path, position_to_dict(position))


class JsonObstacleStore:
    """Obstacle field kept in a JSON file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> Optional[PSet[Obstacle]]:
        data = _read_json(self.path)
        if data is None:
            return None
        try:
            return obstacles_from_list(data)
        except ValueError as exc:
            logger.warning("Ignoring malformed obstacle record %s: %s", self.path, exc)
            return None

    def save(self, obstacles: Iterable[Obstacle]) -> None:
        _write_json(self.path, obstacles_to_list(obstacles))


class MemoryPositionStore:
    def __init__(self, position: Optional[RoverPosition] = None) -> None:
        self.position = position

    def load(self) -> Optional[RoverPosition]:
        return self.position

    def save(self, position: RoverPosition) -> None:
        self.position = position


class MemoryObstacleStore:
    def __init__(self, obstacles: Optional[Iterable[Obstacle]] = None) -> None:
        self.obstacles: Optional[PSet[Obstacle]] = (
            pset(obstacles) if obstacles is not None else None
        )

    def load(self) -> Optional[PSet[Obstacle]]:
        return self.obstacles

    def save(self, obstacles: Iterable[Obstacle]) -> None:
        self.obstacles = pset(obstacles)
