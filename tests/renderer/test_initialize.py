import asyncio
from typing import List

import pytest
from PIL import Image

from zombie_replay.renderer.animation import Renderer
from zombie_replay.renderer.assets import AssetRegistry
from zombie_replay.renderer.canvas import Canvas
from zombie_replay.renderer.scheduler import ManualFrameScheduler
from zombie_replay.types import Grid
from tests.test_utils import CELL_SIZE, REPLAY_SPEED, make_grid, make_registry


def make_counting_background(calls: List[Grid]):
    async def background(grid: Grid, cell_size: int, registry: AssetRegistry):
        calls.append(grid)
        return Image.new("RGBA", (len(grid[0]) * cell_size, len(grid) * cell_size))

    return background


def build(registry: AssetRegistry, calls: List[Grid]) -> Renderer:
    return Renderer(
        make_grid(4, 3),
        Canvas(),
        CELL_SIZE,
        REPLAY_SPEED,
        registry=registry,
        background_fn=make_counting_background(calls),
        scheduler=ManualFrameScheduler(),
    )


def test_board_size_derived_from_grid() -> None:
    canvas = Canvas()
    renderer = Renderer(
        make_grid(4, 3), canvas, CELL_SIZE, REPLAY_SPEED, registry=make_registry()
    )
    assert (renderer.width, renderer.height) == (4 * CELL_SIZE, 3 * CELL_SIZE)
    assert canvas.image.size == (4 * CELL_SIZE, 3 * CELL_SIZE)


@pytest.mark.parametrize("cell_size, replay_speed", [(0, 500), (-4, 500), (32, 0)])
def test_invalid_construction_rejected(cell_size: int, replay_speed: float) -> None:
    with pytest.raises(ValueError):
        Renderer(make_grid(), Canvas(), cell_size, replay_speed)


def test_initialize_waits_for_assets() -> None:
    calls: List[Grid] = []
    registry = make_registry(loaded=False)
    renderer = build(registry, calls)

    async def main() -> None:
        task = asyncio.create_task(renderer.initialize())
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert not renderer.is_initialized()
        assert calls == []
        registry.mark_loaded()
        await task

    asyncio.run(main())
    assert renderer.is_initialized()
    assert len(calls) == 1


def test_initialize_is_idempotent() -> None:
    calls: List[Grid] = []
    renderer = build(make_registry(), calls)

    async def main() -> None:
        await renderer.initialize()
        await renderer.initialize()

    asyncio.run(main())
    assert renderer.is_initialized()
    assert len(calls) == 1


def test_initialize_stalls_until_caller_times_out() -> None:
    renderer = build(make_registry(loaded=False), [])

    async def main() -> None:
        await asyncio.wait_for(renderer.initialize(), timeout=0.01)

    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(main())
    assert not renderer.is_initialized()
