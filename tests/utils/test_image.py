import numpy as np
import pytest
from PIL import Image

from zombie_replay.utils.image import flip_horizontal, hue_rotate_image


def test_flip_horizontal_mirrors_columns() -> None:
    img = Image.new("RGBA", (4, 1), (0, 0, 0, 255))
    img.putpixel((0, 0), (255, 0, 0, 255))
    flipped = flip_horizontal(img)
    assert flipped.getpixel((3, 0)) == (255, 0, 0, 255)
    assert flipped.getpixel((0, 0)) == (0, 0, 0, 255)


@pytest.mark.parametrize(
    "color, degrees, expected",
    [
        ((255, 0, 0), 120, (0, 255, 0)),
        ((255, 0, 0), 240, (0, 0, 255)),
        ((0, 255, 0), 120, (0, 0, 255)),
        ((255, 0, 0), 360, (255, 0, 0)),
        ((128, 128, 128), 90, (128, 128, 128)),
    ],
)
def test_hue_rotate_shifts_hue(
    color: tuple[int, int, int], degrees: float, expected: tuple[int, int, int]
) -> None:
    img = Image.new("RGBA", (2, 2), (*color, 255))
    out = np.array(hue_rotate_image(img, degrees))
    assert np.all(np.abs(out[..., :3].astype(int) - np.array(expected)) <= 1)
    assert np.all(out[..., 3] == 255)


def test_hue_rotate_leaves_transparent_pixels_untouched() -> None:
    img = Image.new("RGBA", (2, 1), (255, 0, 0, 255))
    img.putpixel((1, 0), (255, 0, 0, 0))
    out = hue_rotate_image(img, 120)
    assert out.getpixel((1, 0)) == (255, 0, 0, 0)
    assert out.mode == "RGBA"


def test_hue_rotate_accepts_rgb_input() -> None:
    out = hue_rotate_image(Image.new("RGB", (1, 1), (255, 0, 0)), 120)
    assert out.mode == "RGBA"
    assert out.getpixel((0, 0))[3] == 255


def test_hue_rotate_keeps_partial_alpha() -> None:
    img = Image.new("RGBA", (1, 1), (255, 0, 0, 100))
    assert hue_rotate_image(img, 120).getpixel((0, 0))[3] == 100


def test_hue_rotate_preserves_value_and_saturation() -> None:
    img = Image.new("RGBA", (1, 1), (200, 50, 50, 255))
    r, g, b, _ = hue_rotate_image(img, 120).getpixel((0, 0))
    assert abs(r - 50) <= 1
    assert abs(g - 200) <= 1
    assert abs(b - 50) <= 1
