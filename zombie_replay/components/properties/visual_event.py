"""Visual event annotations.

The simulation attaches these to an entity snapshot for the tick in which the
event happened. They carry no game logic; the renderer turns them into
effects (a slide for ``Moving``, the dead sprite for ``Destructured``).
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from zombie_replay.components.properties.position import Position
from zombie_replay.types import VisualEventType


@dataclass(frozen=True)
class Moving:
    """Entity moved from one grid cell to another during this tick.

    Attributes:
        from_: Cell occupied before the move.
        to: Cell occupied after the move.
    """

    kind: ClassVar[VisualEventType] = VisualEventType.MOVING

    from_: Position
    to: Position

    @property
    def leftward(self) -> bool:
        # Vertical moves count as leftward, matching the sprite's facing.
        return self.from_.x >= self.to.x


@dataclass(frozen=True)
class Destructured:
    """Entity was destroyed during this tick."""

    kind: ClassVar[VisualEventType] = VisualEventType.DESTRUCTURED


VisualEvent = Union[Moving, Destructured]
