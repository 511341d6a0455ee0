"""Pixel to glyph-index mapping.

Pixels are handled in a 16-bit, alpha-premultiplied channel model: an 8-bit
channel ``v`` becomes ``v * 257`` and is then scaled by ``alpha / 255``. Both
the gray and the colour paths reduce a pixel to a level in ``[0, 255]`` and
pick ``level * (n - 1) // 255`` from a ramp of length ``n``.
"""

import numpy as np
from PIL import Image

# Perceptual gray weights, scaled so they sum to 1 << 16
GRAY_WEIGHTS = (19595, 38470, 7471)


def lift_channel(value: int, alpha: int = 255) -> int:
    """Lift an 8-bit channel to the 16-bit premultiplied range."""
    return (value * 257) * alpha // 255


def gray_level(r: int, g: int, b: int) -> int:
    """Luminance in [0, 255] from 16-bit channels."""
    wr, wg, wb = GRAY_WEIGHTS
    return (wr * r + wg * g + wb * b + (1 << 15)) >> 24


def average_level(r: int, g: int, b: int) -> tuple[int, tuple[int, int, int]]:
    """Integer mean of the 8-bit channels, plus the 8-bit triple itself."""
    r8, g8, b8 = r >> 8, g >> 8, b >> 8
    return (r8 + g8 + b8) // 3, (r8, g8, b8)


def glyph_index(level: int, n: int) -> int:
    return level * (n - 1) // 255


def to_rgba16(image: Image.Image) -> np.ndarray:
    """Return an (h, w, 4) int64 array of premultiplied 16-bit channels."""
    arr = np.asarray(image.convert("RGBA"), dtype=np.int64).reshape(image.height, image.width, 4)
    alpha = arr[:, :, 3:4]
    out = np.empty_like(arr)
    out[:, :, :3] = lift_channel(arr[:, :, :3], alpha)
    out[:, :, 3:] = lift_channel(alpha)
    return out


def gray_levels(rgba16: np.ndarray) -> np.ndarray:
    return gray_level(rgba16[:, :, 0], rgba16[:, :, 1], rgba16[:, :, 2])


def average_levels(rgba16: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`average_level`. Returns (levels, rgb8) where rgb8 is (h, w, 3) uint8."""
    rgb8 = rgba16[:, :, :3] >> 8
    levels = rgb8.sum(axis=2) // 3
    return levels, rgb8.astype(np.uint8)


def glyph_indices(levels: np.ndarray, n: int) -> np.ndarray:
    return (levels.astype(np.int64) * (n - 1)) // 255
