"""Common type aliases and enumerations.

``EntityType`` and ``VisualEventType`` mirror the vocabulary of the external
combat simulation; the renderer only ever reads them.
"""

from enum import StrEnum, auto
from typing import Sequence


Token = str
"""Stable identity of an entity across simulation snapshots."""

Grid = Sequence[Sequence[str]]
"""Tile grid: ``grid[y][x]`` is a single-character cell code."""

Milliseconds = float


class EntityType(StrEnum):
    """Kinds of simulated objects that can appear on the board."""

    BOX = auto()
    LANDMINE = auto()
    PLAYER = auto()
    ROCK = auto()
    ZOMBIE = auto()


class VisualEventType(StrEnum):
    """Per-tick annotations that exist only to drive animation."""

    MOVING = auto()
    DESTRUCTURED = auto()


class RendererEffectType(StrEnum):
    """Closed set of visual effects a drawable item can carry."""

    OPACITY = auto()
    POSITION_TO = auto()
    ASSET_SWAP = auto()
    FLIP_HORIZONTAL = auto()
    HUE_ROTATE = auto()
