"""Board background synthesis.

The background is composed once per board and cached by the renderer. Every
cell receives the floor texture; without one, the board falls back to a
two-tone checkerboard so the grid stays readable.
"""

import logging
from typing import Awaitable, Callable, Optional, Tuple

from PIL import Image

from zombie_replay.levels import board_height, board_width
from zombie_replay.renderer.assets import AssetName, AssetRegistry, assets
from zombie_replay.types import Grid

logger = logging.getLogger(__name__)

CHECKER_COLORS: Tuple[Tuple[int, int, int, int], Tuple[int, int, int, int]] = (
    (72, 84, 60, 255),
    (62, 74, 52, 255),
)

BackgroundFn = Callable[[Grid, int, AssetRegistry], Awaitable[Image.Image]]


async def generate_background(
    grid: Grid, cell_size: int, registry: Optional[AssetRegistry] = None
) -> Image.Image:
    """Compose one board-sized RGBA image for ``grid``."""
    if registry is None:
        registry = assets

    width, height = board_width(grid), board_height(grid)
    img = Image.new("RGBA", (width * cell_size, height * cell_size), CHECKER_COLORS[0])

    floor = registry.get(AssetName.FLOOR)
    if floor is not None and floor.size != (cell_size, cell_size):
        floor = floor.resize((cell_size, cell_size))

    for y in range(height):
        for x in range(width):
            x0, y0 = x * cell_size, y * cell_size
            if floor is not None:
                img.alpha_composite(floor, (x0, y0))
            elif (x + y) % 2 == 1:
                img.paste(CHECKER_COLORS[1], (x0, y0, x0 + cell_size, y0 + cell_size))

    logger.debug("Generated %dx%d background", img.width, img.height)
    return img
