"""Raster drawing surface.

``Canvas`` is a small immediate-mode 2-D context over a Pillow RGBA image. It
offers only what the renderer paints with: clearing, flat rectangles, scaled
images and text, all modulated by ``global_alpha``. Coordinates may be
fractional (items slide between cells); they are rounded to whole pixels and
anything falling outside the surface is clipped rather than rejected.
"""

from functools import lru_cache
from typing import Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

Color = str
RGBA = Tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)


@lru_cache(maxsize=32)
def load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


class Canvas:
    image: Image.Image
    global_alpha: float

    def __init__(self, width: int = 0, height: int = 0):
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)
        self.global_alpha = 1.0

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def resize(self, width: int, height: int) -> None:
        """Reallocate the surface; previous contents are discarded."""
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)

    def clear(self) -> None:
        self.image.paste(TRANSPARENT, (0, 0, self.width, self.height))

    def to_image(self) -> Image.Image:
        """Return a detached copy of the current pixels."""
        return self.image.copy()

    def fill_rect(self, color: Color, x: float, y: float, w: float, h: float) -> None:
        x0, y0 = round(x), round(y)
        x1, y1 = round(x + w), round(y + h)
        if x1 <= x0 or y1 <= y0:
            return
        r, g, b, a = ImageColor.getcolor(color, "RGBA")
        rect = Image.new("RGBA", (x1 - x0, y1 - y0), (r, g, b, self._alpha(a)))
        self._composite(rect, x0, y0)

    def draw_image(
        self, image: Image.Image, x: float, y: float, w: float, h: float
    ) -> None:
        x0, y0 = round(x), round(y)
        size = (round(x + w) - x0, round(y + h) - y0)
        if size[0] <= 0 or size[1] <= 0:
            return
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        if image.size != size:
            image = image.resize(size)
        if self.global_alpha < 1.0:
            image = image.copy()
            image.putalpha(image.getchannel("A").point(self._alpha))
        self._composite(image, x0, y0)

    def fill_text(
        self, text: str, x: float, y: float, color: Color, font_size: int
    ) -> None:
        """Draw ``text`` with its baseline starting at ``(x, y)``."""
        r, g, b, a = ImageColor.getcolor(color, "RGBA")
        draw = ImageDraw.Draw(self.image)
        draw.text(
            (round(x), round(y)),
            text,
            fill=(r, g, b, self._alpha(a)),
            font=load_font(font_size),
            anchor="ls",
        )

    def _alpha(self, a: int) -> int:
        return round(a * max(0.0, min(1.0, self.global_alpha)))

    def _composite(self, src: Image.Image, left: int, top: int) -> None:
        sw, sh = src.size
        x0, y0 = max(left, 0), max(top, 0)
        x1, y1 = min(left + sw, self.width), min(top + sh, self.height)
        if x1 <= x0 or y1 <= y0:
            return
        if (x0, y0, x1, y1) != (left, top, left + sw, top + sh):
            src = src.crop((x0 - left, y0 - top, x1 - left, y1 - top))
        self.image.alpha_composite(src, (x0, y0))


def prepare_canvas(canvas: Canvas, width: int, height: int) -> Canvas:
    """Size ``canvas`` to ``width`` x ``height`` and reset its paint state."""
    canvas.resize(width, height)
    canvas.global_alpha = 1.0
    return canvas
