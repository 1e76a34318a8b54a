"""Tile grid helpers.

The renderer only needs the board's dimensions from the grid; the parser is a
convenience for building initial snapshots from a level layout (tests, offline
recording).
"""

from typing import Dict, List

from zombie_replay.components import Position
from zombie_replay.entity import Entity
from zombie_replay.types import EntityType, Grid


TILE_CODES: Dict[str, EntityType] = {
    "B": EntityType.BOX,
    "L": EntityType.LANDMINE,
    "P": EntityType.PLAYER,
    "R": EntityType.ROCK,
    "Z": EntityType.ZOMBIE,
}


def board_width(grid: Grid) -> int:
    """Number of columns (length of the first row, 0 for an empty grid)."""
    if len(grid) == 0:
        return 0
    return len(grid[0])


def board_height(grid: Grid) -> int:
    return len(grid)


def parse_entities(grid: Grid) -> List[Entity]:
    """Return full-health entities for every recognised tile code.

    Entities are listed row by row; tokens are the tile code followed by a
    per-code counter (``"Z0"``, ``"Z1"``, ``"P0"``). Unknown codes are floor.
    """
    counters: Dict[str, int] = {}
    entities: List[Entity] = []
    for y, row in enumerate(grid):
        for x, code in enumerate(row):
            entity_type = TILE_CODES.get(code)
            if entity_type is None:
                continue
            index = counters.get(code, 0)
            counters[code] = index + 1
            entities.append(
                Entity.create(entity_type, Position(x, y), token=f"{code}{index}")
            )
    return entities
