"""Core immutable rover ``State`` dataclass.

This module defines the frozen :class:`State` object that captures everything
the command interpreter needs for one rover at a single point in time. All
systems are pure functions that take a previous ``State`` plus an input (a
:class:`pluto_rover.actions.Command`) and return a *new* ``State``; no
mutation happens in-place.

Design notes:

* ``obstacles`` is a persistent set (``pyrsistent.PSet``) of
    :class:`pluto_rover.components.Obstacle` so membership checks are hash
    lookups regardless of field size.
* ``encountered_obstacle`` is the most recent obstacle that blocked a move. It
    is only ever overwritten by a later collision, never cleared by a
    successful move or a turn.
* ``blocked`` reports whether the *last* applied command was blocked. Unlike
    ``encountered_obstacle`` it is reset by every step.

See :mod:`pluto_rover.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pyrsistent import PMap, PSet, pmap, pset

from pluto_rover.components import Obstacle, RoverPosition
from pluto_rover.grid import Grid


@dataclass(frozen=True)
class State:
    """Immutable rover state.

    Instances are *value objects*; every transition creates a new ``State``.
    Only include serializable data here (no stores or locks).

    Attributes:
        position (RoverPosition): Current committed position and heading.
        grid (Grid): Bounds and wrap rule.
        obstacles (PSet[Obstacle]): Blocked tiles.
        encountered_obstacle (Obstacle | None): Last obstacle that blocked a move.
        blocked (bool): True if the last applied command was blocked.
        turn (int): Number of recognized commands applied.
    """

    position: RoverPosition = RoverPosition()
    grid: Grid = Grid()
    obstacles: PSet[Obstacle] = field(default_factory=pset)
    encountered_obstacle: Optional[Obstacle] = None
    blocked: bool = False
    turn: int = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns a persistent map of field name to value, skipping empty
        obstacle sets and ``None`` values. Useful for log lines.
        """
        description: PMap[str, Any] = pmap()
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, type(pset())) and len(value) == 0:
                continue
            description = description.set(name, value)
        return description
