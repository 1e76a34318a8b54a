"""Renderer effect components.

Effects are time- or state-bound visual modifiers attached to a drawable item
at registration time. They are plain immutable data; the renderer interprets
them during each paint pass and never removes them. Time-bound effects
(:class:`PositionTo`, :class:`AssetSwap`) simply stop mattering once their
``expires_at`` lies in the past.

``Effect`` is the closed union of all variants; ``TimedEffect`` narrows it to
the ones that keep the draw loop running.

Importing::

    from zombie_replay.components.effects import Effect, PositionTo

"""

from typing import Union

from .asset_swap import AssetSwap
from .flip_horizontal import FlipHorizontal
from .hue_rotate import HueRotate
from .opacity import Opacity
from .position_to import PositionTo

Effect = Union[Opacity, PositionTo, AssetSwap, FlipHorizontal, HueRotate]
TimedEffect = Union[PositionTo, AssetSwap]

__all__ = [
    "AssetSwap",
    "Effect",
    "FlipHorizontal",
    "HueRotate",
    "Opacity",
    "PositionTo",
    "TimedEffect",
]
