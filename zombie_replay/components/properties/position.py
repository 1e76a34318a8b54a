"""Coordinate value objects.

``Position`` is the simulation's integer grid coordinate. ``Point`` is the
renderer's pixel coordinate; it may be fractional while an item is sliding
between cells.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Point:
    """Pixel coordinate on the drawing surface."""

    x: float
    y: float

    @staticmethod
    def from_position(position: Position, cell_size: int) -> "Point":
        """Top-left pixel of the cell at ``position``."""
        return Point(position.x * cell_size, position.y * cell_size)
