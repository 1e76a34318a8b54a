"""Animated board renderer.

:class:`Renderer` turns one simulation snapshot (a list of
:class:`~zombie_replay.entity.Entity`) into a continuously animated scene on a
:class:`~zombie_replay.renderer.canvas.Canvas`:

1. ``render(entities)`` cancels any frame still scheduled from the previous
   tick, rebuilds the whole item list (cached background, one sprite per
   visible entity, health bars for living zombies) and attaches effects
   derived from each entity's visual events.
2. A draw pass clears the canvas and paints every item in list order,
   applying its effects at the current wall-clock time.
3. While any slide or frame cycle is still running, the draw pass asks the
   host scheduler for one more frame; otherwise the loop stops.

At most one frame request is outstanding at any time. A ``render()`` that
arrives mid-animation abandons the previous tick's animation outright.
"""

import asyncio
import logging
import time
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from PIL.Image import Image

from zombie_replay.components import (
    AssetSwap,
    Effect,
    FlipHorizontal,
    HueRotate,
    Moving,
    Opacity,
    Point,
    PositionTo,
    TimedEffect,
)
from zombie_replay.entity import Entity
from zombie_replay.levels import board_height, board_width
from zombie_replay.renderer.assets import AssetName, AssetRegistry, assets
from zombie_replay.renderer.background import BackgroundFn, generate_background
from zombie_replay.renderer.canvas import Canvas, prepare_canvas
from zombie_replay.renderer.item import RendererItem, interpolate_position, select_frame
from zombie_replay.renderer.scheduler import AsyncioFrameScheduler, FrameScheduler
from zombie_replay.renderer.style import DEFAULT_STYLE, RenderStyle
from zombie_replay.types import EntityType, Grid, Milliseconds, Token, VisualEventType
from zombie_replay.utils.image import flip_horizontal, hue_rotate_image

logger = logging.getLogger(__name__)

Clock = Callable[[], Milliseconds]
SpriteLookup = Callable[[Entity, AssetRegistry], Optional[Image]]

ANIMATABLE_DEAD_ENTITIES = frozenset([EntityType.ZOMBIE])

ZOMBIE_WALKING_STEPS: Tuple[AssetName, ...] = (
    AssetName.ZOMBIE_WALKING_FRAME2,
    AssetName.ZOMBIE_WALKING_FRAME3,
    AssetName.ZOMBIE_WALKING_FRAME4,
)
ZOMBIE_IDLE_STEPS: Tuple[AssetName, ...] = (
    AssetName.ZOMBIE_IDLE_FRAME2,
    AssetName.ZOMBIE_IDLE_FRAME3,
    AssetName.ZOMBIE_IDLE_FRAME4,
)


def wall_clock_ms() -> Milliseconds:
    return time.time() * 1000


def _static_sprite(name: AssetName) -> SpriteLookup:
    return lambda entity, registry: registry.get(name)


def _zombie_sprite(entity: Entity, registry: AssetRegistry) -> Optional[Image]:
    if entity.has_visual_event(VisualEventType.DESTRUCTURED):
        return registry.get(AssetName.ZOMBIE_DEAD)
    if entity.has_visual_event(VisualEventType.MOVING):
        return registry.get(AssetName.ZOMBIE_WALKING_FRAME1)
    return registry.get(AssetName.ZOMBIE_IDLE_FRAME1)


# Rocks are part of the background art and draw nothing of their own.
ENTITY_SPRITES: Dict[EntityType, SpriteLookup] = {
    EntityType.BOX: _static_sprite(AssetName.BOX),
    EntityType.LANDMINE: _static_sprite(AssetName.LANDMINE),
    EntityType.PLAYER: _static_sprite(AssetName.PLAYER),
    EntityType.ROCK: lambda entity, registry: None,
    EntityType.ZOMBIE: _zombie_sprite,
}


class Renderer:
    """Animated renderer for one board.

    Arguments:
        grid: Tile grid; only its dimensions are used.
        canvas: Target surface, resized to the board.
        cell_size: Pixels per tile.
        replay_speed: Milliseconds one simulation step's animation lasts.
        player_labels: Optional token -> label mapping drawn above sprites.
        token_effects: Extra static effects (e.g. ``HueRotate``, ``Opacity``)
            attached to the sprite of the entity with the given token.
        registry: Sprite source (defaults to the shared registry).
        background_fn: Coroutine composing the board background.
        scheduler: Host frame scheduler (defaults to the asyncio loop).
        clock: Wall-clock milliseconds.
        style: Presentation settings.
    """

    def __init__(
        self,
        grid: Grid,
        canvas: Canvas,
        cell_size: int,
        replay_speed: Milliseconds,
        player_labels: Optional[Mapping[Token, str]] = None,
        *,
        token_effects: Optional[Mapping[Token, Sequence[Effect]]] = None,
        registry: Optional[AssetRegistry] = None,
        background_fn: Optional[BackgroundFn] = None,
        scheduler: Optional[FrameScheduler] = None,
        clock: Optional[Clock] = None,
        style: Optional[RenderStyle] = None,
    ):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        if replay_speed <= 0:
            raise ValueError(f"replay_speed must be positive, got {replay_speed}")

        self._cell_size = cell_size
        self._grid = grid
        self._replay_speed = replay_speed
        self._h = board_height(grid) * cell_size
        self._w = board_width(grid) * cell_size
        self._player_labels = player_labels
        self._token_effects = token_effects or {}

        self._registry = registry if registry is not None else assets
        self._background_fn = background_fn or generate_background
        self._scheduler = scheduler or AsyncioFrameScheduler()
        self._clock = clock or wall_clock_ms
        self._style = style or DEFAULT_STYLE

        self._ctx = prepare_canvas(canvas, self._w, self._h)
        self._ctx2 = prepare_canvas(Canvas(), cell_size, cell_size)

        self._bg_sprite: Optional[Image] = None
        self._initialized = False
        self._items: List[RendererItem] = []
        self._req: Optional[object] = None

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def replay_speed(self) -> Milliseconds:
        return self._replay_speed

    @property
    def canvas(self) -> Canvas:
        return self._ctx

    @property
    def items(self) -> Tuple[RendererItem, ...]:
        return tuple(self._items)

    @property
    def pending_frame(self) -> Optional[object]:
        """Handle of the scheduled draw pass, or ``None`` when idle."""
        return self._req

    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Wait for sprites, then compose and cache the board background.

        Safe to call repeatedly; only the first call does any work. There is
        no timeout: wrap the call in ``asyncio.wait_for`` if the asset source
        may never become ready.
        """
        if self._initialized:
            return

        if not self._registry.loaded:
            logger.debug("Waiting for asset registry")
            await self._registry.wait_loaded()

        if (
            isinstance(self._scheduler, AsyncioFrameScheduler)
            and self._scheduler.loop is None
        ):
            self._scheduler.bind(asyncio.get_running_loop())

        self._bg_sprite = await self._background_fn(
            self._grid, self._cell_size, self._registry
        )
        self._initialized = True
        logger.debug("Renderer initialized for %dx%d board", self._w, self._h)

    def render(self, entities: Iterable[Entity]) -> None:
        """Show one simulation tick, replacing whatever was animating."""
        self._cancel_frame()
        self._register(entities)
        self._draw()

    def stop(self) -> None:
        """Cancel the scheduled draw pass, leaving the last frame on screen."""
        self._cancel_frame()

    def should_animate(self) -> bool:
        now = self._clock()
        for item in self._items:
            for effect in item.effects:
                if isinstance(effect, TimedEffect) and effect.active(now):
                    return True
        return False

    # -------- Draw loop --------

    def _cancel_frame(self) -> None:
        if self._req is not None:
            self._scheduler.cancel_frame(self._req)
            self._req = None
            logger.debug("Cancelled pending frame")

    def _on_frame(self) -> None:
        self._req = None
        self._draw()

    def _draw(self) -> None:
        self._ctx.clear()

        now = self._clock()
        for item in self._items:
            self._draw_item(item, now)

        if self.should_animate():
            self._req = self._scheduler.request_frame(self._on_frame)

    def _draw_item(self, item: RendererItem, now: Milliseconds) -> None:
        opacity = item.get_effect(Opacity)
        if opacity is not None:
            self._ctx.global_alpha = opacity.value / 100

        position = interpolate_position(item, now, clamp=self._style.clamp_motion)

        if isinstance(item.data, str):
            self._ctx.fill_rect(
                item.data, position.x, position.y, item.width, item.height
            )
            self._ctx.global_alpha = 1.0
            return

        source: Image = item.data

        asset_swap = item.get_effect(AssetSwap)
        if asset_swap is not None:
            source = select_frame(item.data, asset_swap, now)

        if item.has_effect(FlipHorizontal):
            self._ctx2.clear()
            self._ctx2.draw_image(
                flip_horizontal(source), 0, 0, item.width, item.height
            )
            source = self._scratch_image(item)

        hue_rotate = item.get_effect(HueRotate)
        if hue_rotate is not None:
            self._ctx2.clear()
            self._ctx2.draw_image(
                hue_rotate_image(source, hue_rotate.degree),
                0,
                0,
                item.width,
                item.height,
            )
            source = self._scratch_image(item)

        self._ctx.draw_image(source, position.x, position.y, item.width, item.height)
        self._ctx.global_alpha = 1.0

        if item.display_name is not None:
            self._ctx.fill_text(
                item.display_name,
                position.x,
                position.y - self._style.label_offset,
                self._style.label_color,
                self._style.label_font_size,
            )

    def _scratch_image(self, item: RendererItem) -> Image:
        """Copy of the scratch area covered by ``item``."""
        w = min(round(item.width), self._ctx2.width)
        h = min(round(item.height), self._ctx2.height)
        return self._ctx2.to_image().crop((0, 0, w, h))

    # -------- Registration --------

    def _register(self, entities: Iterable[Entity]) -> None:
        self._items = []
        now = self._clock()
        self._register_bg()

        for entity in entities:
            self._register_entity(entity, now)

    def _register_bg(self) -> None:
        if self._bg_sprite is None:
            return

        self._items.append(
            RendererItem(self._bg_sprite, Point(0, 0), self._w, self._h)
        )

    def _entity_image(self, entity: Entity) -> Optional[Image]:
        lookup = ENTITY_SPRITES.get(entity.type)
        if lookup is None:
            return None
        return lookup(entity, self._registry)

    def _entity_label(self, entity: Entity) -> Optional[str]:
        if self._player_labels is not None and entity.token in self._player_labels:
            return self._player_labels[entity.token]
        if entity.has_display_name():
            return entity.get_display_name()
        return None

    def _cycle_effect(
        self, steps: Tuple[AssetName, ...], now: Milliseconds
    ) -> Optional[AssetSwap]:
        if not self._registry.has_all(*steps):
            return None
        return AssetSwap(
            steps=tuple(self._registry.require(name) for name in steps),
            every=self._replay_speed / self._style.frame_swap_count,
            started_at=now,
            duration=self._replay_speed,
        )

    def _register_entity(self, entity: Entity, now: Milliseconds) -> None:
        entity_image = self._entity_image(entity)

        if entity_image is None:
            return

        animatable_after_death = (
            entity.has_visual_events() and entity.type in ANIMATABLE_DEAD_ENTITIES
        )

        if entity.dead() and not animatable_after_death:
            return

        cell = self._cell_size
        is_zombie = entity.type == EntityType.ZOMBIE
        moving: Optional[Moving] = None
        if entity.has_visual_event(VisualEventType.MOVING):
            event = entity.get_visual_event(VisualEventType.MOVING)
            if isinstance(event, Moving):
                moving = event

        position = Point.from_position(
            moving.from_ if moving is not None else entity.position, cell
        )
        renderer_item = RendererItem(
            entity_image, position, cell, cell, self._entity_label(entity)
        )

        if moving is not None:
            renderer_item.add_effect(
                PositionTo(
                    to=Point.from_position(moving.to, cell),
                    started_at=now,
                    duration=self._replay_speed,
                )
            )
            if moving.leftward:
                renderer_item.add_effect(FlipHorizontal())

        cycle: Optional[AssetSwap] = None
        if is_zombie and moving is not None:
            cycle = self._cycle_effect(ZOMBIE_WALKING_STEPS, now)
        elif is_zombie and not entity.dead():
            cycle = self._cycle_effect(ZOMBIE_IDLE_STEPS, now)
        if cycle is not None:
            renderer_item.add_effect(cycle)

        for effect in self._token_effects.get(entity.token, ()):
            renderer_item.add_effect(effect)

        self._items.append(renderer_item)

        if is_zombie and not entity.dead():
            self._register_health_bars(entity, position, moving, now)

    def _register_health_bars(
        self,
        entity: Entity,
        position: Point,
        moving: Optional[Moving],
        now: Milliseconds,
    ) -> None:
        cell = self._cell_size
        style = self._style
        margin = cell * style.health_bar_margin
        bar_width = cell * style.health_bar_ratio
        bar_position = Point(position.x + margin, position.y)

        health_bar_item = RendererItem(
            style.health_bar_color,
            bar_position,
            (entity.health / style.zombie_max_health) * bar_width,
            style.health_bar_height,
        )
        health_bar_bg_item = RendererItem(
            style.health_bar_bg_color,
            bar_position,
            bar_width,
            style.health_bar_height,
        )

        if moving is not None:
            position_to = PositionTo(
                to=Point(moving.to.x * cell + margin, moving.to.y * cell),
                started_at=now,
                duration=self._replay_speed,
            )
            health_bar_item.add_effect(position_to)
            health_bar_bg_item.add_effect(position_to)

        self._items.append(health_bar_bg_item)
        self._items.append(health_bar_item)
