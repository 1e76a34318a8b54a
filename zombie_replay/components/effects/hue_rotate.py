from dataclasses import dataclass
from typing import ClassVar

from zombie_replay.types import RendererEffectType


@dataclass(frozen=True)
class HueRotate:
    """Shift the hue of every visible pixel.

    Transparent padding stays transparent; only colour is changed.

    Attributes:
        degree: Rotation around the colour wheel, in degrees.
    """

    type: ClassVar[RendererEffectType] = RendererEffectType.HUE_ROTATE

    degree: float
