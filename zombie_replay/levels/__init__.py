"""Level grid helpers: board sizing and tile-code parsing."""

from .grid import TILE_CODES, board_height, board_width, parse_entities

__all__ = [
    "TILE_CODES",
    "board_height",
    "board_width",
    "parse_entities",
]
