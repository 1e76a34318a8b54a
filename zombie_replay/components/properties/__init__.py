"""Property value objects read from simulation snapshots.

Positions (grid and pixel) and the visual event annotations attached to
entities. All are immutable dataclasses.
"""

from .position import Point, Position
from .visual_event import Destructured, Moving, VisualEvent

__all__ = [
    "Destructured",
    "Moving",
    "Point",
    "Position",
    "VisualEvent",
]
