from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from PIL import Image

from zombie_replay.components import Effect, Position, VisualEvent
from zombie_replay.entity import Entity
from zombie_replay.renderer.animation import Renderer
from zombie_replay.renderer.assets import AssetName, AssetRegistry
from zombie_replay.renderer.canvas import Canvas
from zombie_replay.renderer.scheduler import ManualFrameScheduler
from zombie_replay.renderer.style import RenderStyle
from zombie_replay.replay import ManualClock
from zombie_replay.types import EntityType, Grid, Token

CELL_SIZE = 32
REPLAY_SPEED = 500

RGBA = Tuple[int, int, int, int]

# One distinct opaque colour per sprite so frames can be told apart by pixel.
SPRITE_COLORS: Dict[AssetName, RGBA] = {
    name: (20 * idx % 256, 255 - 15 * idx, 40 + 10 * idx, 255)
    for idx, name in enumerate(AssetName)
}

OPTIONAL_FRAMES = (
    AssetName.ZOMBIE_IDLE_FRAME2,
    AssetName.ZOMBIE_IDLE_FRAME3,
    AssetName.ZOMBIE_IDLE_FRAME4,
    AssetName.ZOMBIE_WALKING_FRAME2,
    AssetName.ZOMBIE_WALKING_FRAME3,
    AssetName.ZOMBIE_WALKING_FRAME4,
)


def solid_sprite(color: RGBA, size: int = CELL_SIZE) -> Image.Image:
    return Image.new("RGBA", (size, size), color)


def split_sprite(
    left: RGBA = (255, 0, 0, 255),
    right: RGBA = (0, 0, 255, 255),
    size: int = CELL_SIZE,
) -> Image.Image:
    """Sprite whose left half and right half differ (detects mirroring)."""
    img = Image.new("RGBA", (size, size), left)
    img.paste(right, (size // 2, 0, size, size))
    return img


def make_registry(
    with_frames: bool = True,
    overrides: Optional[Mapping[AssetName, Optional[Image.Image]]] = None,
    loaded: bool = True,
) -> AssetRegistry:
    """Registry with a solid sprite per name, optionally missing the cycle frames."""
    registry = AssetRegistry()
    for name in AssetName:
        if name == AssetName.FLOOR:
            registry.set(name, None)
        elif not with_frames and name in OPTIONAL_FRAMES:
            registry.set(name, None)
        else:
            registry.set(name, solid_sprite(SPRITE_COLORS[name]))
    for name, image in (overrides or {}).items():
        registry.set(name, image)
    if loaded:
        registry.mark_loaded()
    return registry


def make_grid(width: int = 5, height: int = 5) -> Grid:
    return [[" "] * width for _ in range(height)]


def make_entity(
    entity_type: EntityType,
    pos: Tuple[int, int] = (0, 0),
    health: Optional[int] = None,
    events: Iterable[VisualEvent] = (),
    token: Token = "E0",
) -> Entity:
    return Entity.create(
        entity_type, Position(*pos), token=token, health=health, events=events
    )


def make_renderer(
    grid: Optional[Grid] = None,
    registry: Optional[AssetRegistry] = None,
    player_labels: Optional[Mapping[Token, str]] = None,
    token_effects: Optional[Mapping[Token, Sequence[Effect]]] = None,
    style: Optional[RenderStyle] = None,
    start: float = 0.0,
) -> Tuple[Renderer, ManualClock, ManualFrameScheduler]:
    """Renderer wired to a manual clock and scheduler (no event loop needed)."""
    clock = ManualClock(start)
    scheduler = ManualFrameScheduler()
    renderer = Renderer(
        grid if grid is not None else make_grid(),
        Canvas(),
        CELL_SIZE,
        REPLAY_SPEED,
        player_labels,
        token_effects=token_effects,
        registry=registry if registry is not None else make_registry(),
        scheduler=scheduler,
        clock=clock,
        style=style,
    )
    return renderer, clock, scheduler


def pixel(renderer: Renderer, x: int, y: int) -> RGBA:
    return renderer.canvas.image.getpixel((x, y))  # type: ignore[return-value]


def assert_close_color(actual: Sequence[int], expected: Sequence[int], tol: int = 2) -> None:
    assert len(actual) == len(expected)
    assert all(abs(a - e) <= tol for a, e in zip(actual, expected)), (
        f"{tuple(actual)} != {tuple(expected)}"
    )
