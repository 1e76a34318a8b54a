from dataclasses import dataclass
from typing import ClassVar

from zombie_replay.components.properties.position import Point
from zombie_replay.types import Milliseconds, RendererEffectType


@dataclass(frozen=True)
class PositionTo:
    """Slide the item linearly from its own position to ``to``.

    Progress is measured in wall-clock time since ``started_at`` so two
    renders separated by more or less real time animate at different apparent
    speeds.

    Attributes:
        to: Target pixel coordinate.
        started_at: Wall-clock milliseconds when the effect was attached.
        duration: Milliseconds the slide takes to reach ``to``.
    """

    type: ClassVar[RendererEffectType] = RendererEffectType.POSITION_TO

    to: Point
    started_at: Milliseconds
    duration: Milliseconds

    @property
    def expires_at(self) -> Milliseconds:
        return self.started_at + self.duration

    def active(self, now: Milliseconds) -> bool:
        return now < self.expires_at
