import numpy as np
import numpy.typing as npt
from PIL import Image, ImageOps
from typing import Tuple

# Type aliases for clarity
FloatArray = npt.NDArray[np.float32 | np.float64]
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]


def _rgb_to_hsv_np(
    r: FloatArray, g: FloatArray, b: FloatArray
) -> Tuple[FloatArray, FloatArray, FloatArray]:
    """
    Vectorized RGB->HSV for arrays in [0,1]. Returns H,S,V in [0,1], dtype float32.
    """
    maxc: FloatArray = np.maximum(np.maximum(r, g), b)
    minc: FloatArray = np.minimum(np.minimum(r, g), b)
    v: FloatArray = maxc
    deltac: FloatArray = maxc - minc

    # Where maxc == 0, S = 0
    denom: FloatArray = np.where(maxc == 0.0, np.float32(1.0), maxc).astype(np.float32)
    s: FloatArray = np.where(maxc > 0.0, deltac / denom, np.float32(0.0)).astype(
        np.float32
    )

    safe_d: FloatArray = np.where(deltac == 0.0, np.float32(1.0), deltac).astype(
        np.float32
    )
    rc: FloatArray = (maxc - r) / safe_d
    gc: FloatArray = (maxc - g) / safe_d
    bc: FloatArray = (maxc - b) / safe_d

    h: FloatArray = np.zeros_like(maxc, dtype=np.float32)
    mask: BoolArray = deltac != 0.0
    r_is_max: BoolArray = (r == maxc) & mask
    g_is_max: BoolArray = (g == maxc) & ~r_is_max & mask
    b_is_max: BoolArray = (b == maxc) & ~r_is_max & ~g_is_max & mask

    h[r_is_max] = (bc - gc)[r_is_max]
    h[g_is_max] = (2.0 + (rc - bc))[g_is_max]
    h[b_is_max] = (4.0 + (gc - rc))[b_is_max]
    h = ((h / 6.0) % 1.0).astype(np.float32)

    return h, s, v


def _hsv_to_rgb_np(
    h: FloatArray, s: FloatArray, v: FloatArray
) -> Tuple[FloatArray, FloatArray, FloatArray]:
    """
    Vectorized HSV->RGB for arrays in [0,1]. Returns float32 arrays in [0,1].
    """
    i: npt.NDArray[np.int32] = np.floor(h * 6.0).astype(np.int32)
    f: FloatArray = (h * 6.0 - i).astype(np.float32)
    p: FloatArray = (v * (1.0 - s)).astype(np.float32)
    q: FloatArray = (v * (1.0 - s * f)).astype(np.float32)
    t: FloatArray = (v * (1.0 - s * (1.0 - f))).astype(np.float32)

    i_mod: npt.NDArray[np.int32] = (i % 6).astype(np.int32)

    # np.choose promotes dtype; cast back to float32
    r: FloatArray = np.choose(i_mod, [v, q, p, p, t, v]).astype(np.float32)
    g: FloatArray = np.choose(i_mod, [t, v, v, q, p, p]).astype(np.float32)
    b: FloatArray = np.choose(i_mod, [p, p, t, v, v, q]).astype(np.float32)
    return r, g, b


def flip_horizontal(image: Image.Image) -> Image.Image:
    """Return a left-to-right mirrored copy of ``image``."""
    return ImageOps.mirror(image)


def hue_rotate_image(base: Image.Image, degrees: float) -> Image.Image:
    """
    Rotate the hue of every visible pixel by ``degrees``, preserving
    saturation and value. The alpha channel is copied through unchanged and
    fully transparent pixels keep their colour, so the result never paints
    outside the source silhouette.

    The rotation is an HSV hue shift, not the luminance-preserving colour
    matrix of the CSS ``hue-rotate()`` filter: pure primaries map to pure
    primaries, and perceived brightness may change.
    """
    if base.mode != "RGBA":
        base = base.convert("RGBA")

    arr: UInt8Array = np.array(base, dtype=np.uint8)
    r: FloatArray = arr[..., 0].astype(np.float32) / 255.0
    g: FloatArray = arr[..., 1].astype(np.float32) / 255.0
    b: FloatArray = arr[..., 2].astype(np.float32) / 255.0
    visible: BoolArray = arr[..., 3] > 0

    h, s, v = _rgb_to_hsv_np(r, g, b)
    h_new: FloatArray = ((h + np.float32(degrees / 360.0)) % 1.0).astype(np.float32)
    rr, gg, bb = _hsv_to_rgb_np(h_new, s, v)

    # Write back only for visible pixels
    out: UInt8Array = arr.copy()
    out[..., 0][visible] = np.round(rr * 255.0).astype(np.uint8)[visible]
    out[..., 1][visible] = np.round(gg * 255.0).astype(np.uint8)[visible]
    out[..., 2][visible] = np.round(bb * 255.0).astype(np.uint8)[visible]
    return Image.fromarray(out)

