import asyncio
from pathlib import Path

from PIL import Image

from zombie_replay.components import Moving, Position
from zombie_replay.entity import Entity
from zombie_replay.renderer.animation import Renderer
from zombie_replay.renderer.assets import AssetName
from zombie_replay.renderer.canvas import Canvas
from zombie_replay.renderer.scheduler import AsyncioFrameScheduler
from zombie_replay.replay import play_replay, record_replay, save_gif
from zombie_replay.types import EntityType
from tests.test_utils import SPRITE_COLORS, make_grid, make_registry

CELL = 16


def two_tick_replay() -> list[list[Entity]]:
    start = Entity.create(EntityType.PLAYER, Position(0, 0), token="P0")
    moved = Entity.create(
        EntityType.PLAYER,
        Position(2, 0),
        token="P0",
        events=[Moving(Position(0, 0), Position(2, 0))],
    )
    return [[start], [moved]]


def test_record_replay_captures_motion() -> None:
    frames = asyncio.run(
        record_replay(
            make_grid(3, 1),
            two_tick_replay(),
            CELL,
            replay_speed=500,
            fps=10,
            registry=make_registry(),
        )
    )

    assert len(frames) == 10
    assert all(frame.size == (3 * CELL, CELL) for frame in frames)

    color = SPRITE_COLORS[AssetName.PLAYER]
    # First tick is static: every frame shows the player on cell 0.
    assert all(frame.getpixel((4, 8)) == color for frame in frames[:5])
    # Second tick slides from x=0 to x=32 over five frames.
    xs = [
        next(x for x in range(3 * CELL) if frame.getpixel((x, 8)) == color)
        for frame in frames[5:]
    ]
    assert xs == sorted(xs)
    assert xs[0] == 0 and xs[-1] > xs[0]


def test_save_gif_writes_all_frames(tmp_path: Path) -> None:
    frames = [Image.new("RGBA", (4, 4), (i * 60, 0, 0, 255)) for i in range(3)]
    path = tmp_path / "replay.gif"
    save_gif(frames, str(path), fps=10)

    with Image.open(path) as gif:
        assert gif.n_frames == 3


def test_play_replay_runs_in_real_time() -> None:
    renderer = Renderer(
        make_grid(3, 1),
        Canvas(),
        CELL,
        20,
        registry=make_registry(),
        scheduler=AsyncioFrameScheduler(fps=200),
    )

    ticks = asyncio.run(play_replay(renderer, two_tick_replay()))

    assert ticks == 2
    assert renderer.is_initialized()
    assert renderer.pending_frame is None
    # Background is the first item of the final tick.
    assert renderer.items[0].width == 3 * CELL
