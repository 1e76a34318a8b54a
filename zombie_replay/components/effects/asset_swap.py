from dataclasses import dataclass
from typing import ClassVar, Tuple

from PIL.Image import Image

from zombie_replay.types import Milliseconds, RendererEffectType


@dataclass(frozen=True, eq=False)
class AssetSwap:
    """Cycle the item's image through alternate frames.

    The item's own image is frame 0 and ``steps`` follow it; a new frame is
    shown every ``every`` milliseconds and the cycle wraps around. The effect
    keeps the draw loop alive until ``duration`` has elapsed.

    Attributes:
        steps: Alternate frames shown after the base image.
        every: Milliseconds each frame stays on screen.
        started_at: Wall-clock milliseconds when the effect was attached.
        duration: Milliseconds during which the cycle keeps animating.
    """

    type: ClassVar[RendererEffectType] = RendererEffectType.ASSET_SWAP

    steps: Tuple[Image, ...]
    every: Milliseconds
    started_at: Milliseconds
    duration: Milliseconds

    @property
    def expires_at(self) -> Milliseconds:
        return self.started_at + self.duration

    def active(self, now: Milliseconds) -> bool:
        return now < self.expires_at
