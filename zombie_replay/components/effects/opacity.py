from dataclasses import dataclass
from typing import ClassVar

from zombie_replay.types import RendererEffectType


@dataclass(frozen=True)
class Opacity:
    """Paint the item translucently.

    Attributes:
        value: Opacity percentage in ``[0, 100]``; 100 is fully opaque.
    """

    type: ClassVar[RendererEffectType] = RendererEffectType.OPACITY

    value: int
