"""Named sprite handles with a one-time readiness signal.

The registry is filled either by :meth:`AssetRegistry.load` (files on disk,
via Pillow) or by :meth:`AssetRegistry.set` (in-memory images, tests). Once
every handle has been attempted, :meth:`AssetRegistry.mark_loaded` fires the
ready event exactly once; coroutines awaiting :meth:`wait_loaded` resume.

Every texture is optional at load time. Handles whose file is missing or
unreadable are recorded as ``None``; callers decide whether that is fatal
(:meth:`require`) or degrades to a simpler sprite (:meth:`get`).
"""

import asyncio
import logging
import os
from enum import StrEnum, auto
from typing import Dict, Optional

from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_ASSET_ROOT = "assets"
DEFAULT_TEXTURE_SIZE = 64


class AssetName(StrEnum):
    BOX = auto()
    FLOOR = auto()
    LANDMINE = auto()
    PLAYER = auto()
    ROCK = auto()
    ZOMBIE_DEAD = auto()
    ZOMBIE_IDLE_FRAME1 = auto()
    ZOMBIE_IDLE_FRAME2 = auto()
    ZOMBIE_IDLE_FRAME3 = auto()
    ZOMBIE_IDLE_FRAME4 = auto()
    ZOMBIE_WALKING_FRAME1 = auto()
    ZOMBIE_WALKING_FRAME2 = auto()
    ZOMBIE_WALKING_FRAME3 = auto()
    ZOMBIE_WALKING_FRAME4 = auto()


TextureMap = Dict[AssetName, str]

DEFAULT_TEXTURE_MAP: TextureMap = {
    AssetName.BOX: "entities/box.png",
    AssetName.FLOOR: "tiles/floor.png",
    AssetName.LANDMINE: "entities/landmine.png",
    AssetName.PLAYER: "entities/player.png",
    AssetName.ROCK: "entities/rock.png",
    AssetName.ZOMBIE_DEAD: "entities/zombie/dead.png",
    AssetName.ZOMBIE_IDLE_FRAME1: "entities/zombie/idle_1.png",
    AssetName.ZOMBIE_IDLE_FRAME2: "entities/zombie/idle_2.png",
    AssetName.ZOMBIE_IDLE_FRAME3: "entities/zombie/idle_3.png",
    AssetName.ZOMBIE_IDLE_FRAME4: "entities/zombie/idle_4.png",
    AssetName.ZOMBIE_WALKING_FRAME1: "entities/zombie/walking_1.png",
    AssetName.ZOMBIE_WALKING_FRAME2: "entities/zombie/walking_2.png",
    AssetName.ZOMBIE_WALKING_FRAME3: "entities/zombie/walking_3.png",
    AssetName.ZOMBIE_WALKING_FRAME4: "entities/zombie/walking_4.png",
}


def load_texture(path: str, size: int) -> Optional[Image.Image]:
    try:
        return Image.open(path).convert("RGBA").resize((size, size))
    except (FileNotFoundError, OSError, ValueError):
        return None


class AssetRegistry:
    loaded: bool

    def __init__(self) -> None:
        self.loaded = False
        self._images: Dict[AssetName, Optional[Image.Image]] = {}
        self._ready = asyncio.Event()

    def get(self, name: AssetName) -> Optional[Image.Image]:
        """Return the handle for ``name`` or ``None`` when it is absent."""
        return self._images.get(name)

    def require(self, name: AssetName) -> Image.Image:
        image = self._images.get(name)
        if image is None:
            raise KeyError(f"Asset {name} is not available")
        return image

    def set(self, name: AssetName, image: Optional[Image.Image]) -> None:
        self._images[name] = image

    def has_all(self, *names: AssetName) -> bool:
        return all(self._images.get(name) is not None for name in names)

    def load(
        self,
        asset_root: str = DEFAULT_ASSET_ROOT,
        texture_map: Optional[TextureMap] = None,
        size: int = DEFAULT_TEXTURE_SIZE,
    ) -> None:
        """Load every texture of ``texture_map`` and mark the registry ready."""
        if texture_map is None:
            texture_map = DEFAULT_TEXTURE_MAP

        for name, path in texture_map.items():
            image = load_texture(os.path.join(asset_root, path), size)
            if image is None:
                logger.info("Texture %s not found at %s/%s", name, asset_root, path)
            self.set(name, image)

        self.mark_loaded()

    def mark_loaded(self) -> None:
        if self.loaded:
            return
        self.loaded = True
        self._ready.set()
        logger.debug(
            "Asset registry ready (%d/%d handles present)",
            sum(1 for image in self._images.values() if image is not None),
            len(self._images),
        )

    async def wait_loaded(self) -> None:
        await self._ready.wait()


assets = AssetRegistry()
