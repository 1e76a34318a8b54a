"""zombie_replay.components
=================================

Aggregate import surface for the value objects shared by the snapshot model
and the renderer.

*Properties* describe what the simulation reports about an entity (grid
position, visual events). *Effects* are the renderer's own modifiers attached
to drawable items (fades, slides, frame cycling, mirroring, recolouring).

    from zombie_replay.components import Position, Moving, PositionTo

"""

# Effects
from .effects import AssetSwap
from .effects import Effect
from .effects import FlipHorizontal
from .effects import HueRotate
from .effects import Opacity
from .effects import PositionTo
from .effects import TimedEffect

# Properties
from .properties import Destructured
from .properties import Moving
from .properties import Point
from .properties import Position
from .properties import VisualEvent

__all__ = [
    "AssetSwap",
    "Destructured",
    "Effect",
    "FlipHorizontal",
    "HueRotate",
    "Moving",
    "Opacity",
    "Point",
    "Position",
    "PositionTo",
    "TimedEffect",
    "VisualEvent",
]
