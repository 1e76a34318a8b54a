"""Drawable items and the time-based maths applied to them.

A :class:`RendererItem` is the renderer's unit of painting: a source (flat
colour string or image), a pixel position and size, an optional label and an
ordered list of effects. Items are rebuilt from scratch on every
``Renderer.render`` call and never reused.

Effect lookup is typed: ``item.get_effect(PositionTo)`` returns the attached
``PositionTo`` (or ``None``). The helpers below turn the current wall-clock
time into an interpolated position or the frame an ``AssetSwap`` shows.
"""

import math
from typing import List, Optional, Sequence, Type, TypeVar, Union

from PIL.Image import Image

from zombie_replay.components import AssetSwap, Effect, Point, PositionTo
from zombie_replay.types import Milliseconds

Source = Union[str, Image]
E = TypeVar("E", bound=Effect)


class RendererItem:
    data: Source
    position: Point
    width: float
    height: float
    display_name: Optional[str]
    effects: List[Effect]

    def __init__(
        self,
        data: Source,
        position: Point,
        width: float,
        height: float,
        display_name: Optional[str] = None,
    ):
        self.data = data
        self.position = position
        self.width = width
        self.height = height
        self.display_name = display_name
        self.effects = []

    def __repr__(self) -> str:
        source = self.data if isinstance(self.data, str) else "<image>"
        kinds = ",".join(effect.type for effect in self.effects)
        return (
            f"RendererItem({source}, {self.position}, {self.width}x{self.height}, "
            f"effects=[{kinds}])"
        )

    def add_effect(self, effect: Effect) -> None:
        self.effects.append(effect)

    def has_effect(self, effect_cls: Type[Effect]) -> bool:
        return any(isinstance(effect, effect_cls) for effect in self.effects)

    def get_effect(self, effect_cls: Type[E]) -> Optional[E]:
        """Return the first attached effect of ``effect_cls``, if any."""
        for effect in self.effects:
            if isinstance(effect, effect_cls):
                return effect
        return None


def interpolate_position(
    item: RendererItem, now: Milliseconds, clamp: bool = False
) -> Point:
    """Current pixel position of ``item``.

    Linear from ``item.position`` to the ``PositionTo`` target. Progress is
    ``(now - started_at) / duration`` and is left unclamped unless ``clamp``
    is set, so a paint pass after the duration overshoots the target.
    """
    effect = item.get_effect(PositionTo)
    if effect is None:
        return item.position

    delta = (now - effect.started_at) / effect.duration
    if clamp:
        delta = min(1.0, max(0.0, delta))

    x, y = item.position.x, item.position.y
    return Point(x + (effect.to.x - x) * delta, y + (effect.to.y - y) * delta)


def frame_index(effect: AssetSwap, now: Milliseconds, frame_count: int) -> int:
    """Index of the frame shown at ``now`` in a cycle of ``frame_count``."""
    elapsed = now - effect.started_at
    return math.floor((elapsed / effect.every) % frame_count)


def select_frame(base: Image, effect: AssetSwap, now: Milliseconds) -> Image:
    frames: Sequence[Image] = [base, *effect.steps]
    return frames[frame_index(effect, now, len(frames))]
