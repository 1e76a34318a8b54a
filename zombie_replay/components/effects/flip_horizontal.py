from dataclasses import dataclass
from typing import ClassVar

from zombie_replay.types import RendererEffectType


@dataclass(frozen=True)
class FlipHorizontal:
    """Marker effect: mirror the image left-to-right before painting."""

    type: ClassVar[RendererEffectType] = RendererEffectType.FLIP_HORIZONTAL
