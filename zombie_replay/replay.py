"""Replay drivers.

A replay is an ordered sequence of entity snapshots, one per simulation tick.
:func:`play_replay` feeds them to a live :class:`Renderer` in real time, one
tick every ``replay_speed`` milliseconds. :func:`record_replay` renders the
same sequence offline against a manual clock and scheduler, producing a list
of frames that :func:`save_gif` can write out.
"""

import asyncio
import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from PIL import Image

from zombie_replay.entity import Entity
from zombie_replay.renderer.animation import Renderer
from zombie_replay.renderer.assets import AssetRegistry
from zombie_replay.renderer.background import BackgroundFn
from zombie_replay.renderer.canvas import Canvas
from zombie_replay.renderer.scheduler import ManualFrameScheduler
from zombie_replay.renderer.style import RenderStyle
from zombie_replay.types import Grid, Milliseconds, Token

logger = logging.getLogger(__name__)

DEFAULT_RECORD_FPS = 30

Snapshot = Sequence[Entity]


class ManualClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: Milliseconds = 0.0):
        self.now = start

    def __call__(self) -> Milliseconds:
        return self.now

    def advance(self, ms: Milliseconds) -> None:
        self.now += ms


async def play_replay(
    renderer: Renderer,
    snapshots: Iterable[Snapshot],
    replay_speed: Optional[Milliseconds] = None,
) -> int:
    """Render one snapshot per tick in real time; return the ticks played."""
    await renderer.initialize()
    speed = renderer.replay_speed if replay_speed is None else replay_speed

    ticks = 0
    try:
        for entities in snapshots:
            renderer.render(entities)
            ticks += 1
            await asyncio.sleep(speed / 1000)
    finally:
        renderer.stop()

    logger.debug("Replay finished after %d ticks", ticks)
    return ticks


async def record_replay(
    grid: Grid,
    snapshots: Iterable[Snapshot],
    cell_size: int,
    replay_speed: Milliseconds,
    fps: int = DEFAULT_RECORD_FPS,
    *,
    registry: Optional[AssetRegistry] = None,
    player_labels: Optional[Mapping[Token, str]] = None,
    background_fn: Optional[BackgroundFn] = None,
    style: Optional[RenderStyle] = None,
) -> List[Image.Image]:
    """Capture every frame of a replay at ``fps`` without waiting in real time.

    Each tick yields ``round(replay_speed * fps / 1000)`` frames (at least
    one): the frame painted by ``render()`` itself followed by the frames of
    the draw loop as the clock advances.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")

    clock = ManualClock()
    scheduler = ManualFrameScheduler()
    canvas = Canvas()
    renderer = Renderer(
        grid,
        canvas,
        cell_size,
        replay_speed,
        player_labels,
        registry=registry,
        background_fn=background_fn,
        scheduler=scheduler,
        clock=clock,
        style=style,
    )
    await renderer.initialize()

    frame_ms = 1000 / fps
    frames_per_tick = max(1, round(replay_speed * fps / 1000))
    frames: List[Image.Image] = []

    for entities in snapshots:
        renderer.render(entities)
        frames.append(canvas.to_image())
        for _ in range(frames_per_tick - 1):
            clock.advance(frame_ms)
            scheduler.run_pending()
            frames.append(canvas.to_image())
        clock.advance(frame_ms)

    renderer.stop()
    logger.debug("Recorded %d frames", len(frames))
    return frames


def save_gif(
    frames: Sequence[Image.Image], path: str, fps: int = DEFAULT_RECORD_FPS
) -> None:
    """Write ``frames`` as a looping animated GIF."""
    if len(frames) == 0:
        raise ValueError("No frames to save")
    rgb = [frame.convert("RGB") for frame in frames]
    rgb[0].save(
        path,
        save_all=True,
        append_images=rgb[1:],
        duration=round(1000 / fps),
        loop=0,
    )
