"""Entity snapshots produced by the external combat simulation.

An :class:`Entity` is an immutable view of one simulated object at one tick:
its kind, grid position, health, stable token and the visual events that
happened to it during the tick. The renderer reads snapshots and never
mutates them; a new list of entities arrives with every ``render()`` call.

Examples
--------
>>> from zombie_replay.components import Moving, Position
>>> zombie = Entity.create(
...     EntityType.ZOMBIE,
...     Position(2, 1),
...     token="Z0",
...     events=[Moving(Position(3, 1), Position(2, 1))],
... )
>>> zombie.has_visual_event(VisualEventType.MOVING)
True
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from zombie_replay.components.properties import Position, VisualEvent
from zombie_replay.types import EntityType, Token, VisualEventType


MAX_HEALTH: Dict[EntityType, int] = {
    EntityType.BOX: 2,
    EntityType.LANDMINE: 1,
    EntityType.PLAYER: 1,
    EntityType.ROCK: 1,
    EntityType.ZOMBIE: 2,
}


@dataclass(frozen=True)
class Entity:
    """Snapshot of one simulated object.

    Attributes:
        type: Entity kind.
        position: Grid cell occupied at the end of the tick.
        health: Remaining hit points; zero or less means dead.
        token: Stable identity across snapshots (used for labels).
        visual_events: Events of this tick keyed by kind.
        display_name: Optional label supplied by the simulation.
    """

    type: EntityType
    position: Position
    health: int
    token: Token
    visual_events: PMap[VisualEventType, VisualEvent] = pmap()
    display_name: Optional[str] = None

    @classmethod
    def create(
        cls,
        type: EntityType,
        position: Position,
        token: Token,
        health: Optional[int] = None,
        events: Iterable[VisualEvent] = (),
        display_name: Optional[str] = None,
    ) -> "Entity":
        """Build a snapshot, defaulting ``health`` to the type's maximum."""
        if health is None:
            health = MAX_HEALTH.get(type, 1)
        return cls(
            type=type,
            position=position,
            health=health,
            token=token,
            visual_events=pmap({event.kind: event for event in events}),
            display_name=display_name,
        )

    def dead(self) -> bool:
        return self.health <= 0

    def has_visual_event(self, kind: VisualEventType) -> bool:
        return kind in self.visual_events

    def get_visual_event(self, kind: VisualEventType) -> VisualEvent:
        return self.visual_events[kind]

    def has_visual_events(self) -> bool:
        return len(self.visual_events) > 0

    def has_display_name(self) -> bool:
        return self.display_name is not None

    def get_display_name(self) -> Optional[str]:
        return self.display_name
