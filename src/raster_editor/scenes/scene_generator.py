"""
scene_generator.py — synthetic pixel grids for exercising the editor

WHAT THIS MODULE PROVIDES
-------------------------
Every generator returns an int64 (height, width) grid that RasterImage can
take as-is:
  • slanted edge     two tones split by a tilted line (flip/rotate demos)
  • stripes          vertical bars (shifts and halving alias visibly)
  • gradient         0..255 ramp (brightness, contrast, histograms)
  • siemens star     alternating wedges (blur vs. sharpen)
  • checker          square tiles (resampling)
  • noise            seeded uniform levels (cipher round trips)
  • color bars       packed 0xAARRGGBB grid for color mode

Two-tone scenes use `low`/`high` gray levels (0 and 255 by default).
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from raster_editor.color.color_model import MAX_CHANNEL, ColorModel, PackedColorModel


def _two_tone(mask: np.ndarray, low: int, high: int) -> np.ndarray:
    return np.where(mask, int(high), int(low)).astype(np.int64)


# -----------------------------------------------------------------------------
# Grayscale scenes
# -----------------------------------------------------------------------------
def generate_slanted_edge(
    size: int = 64,
    angle_deg: float = 5.0,
    low: int = 0,
    high: int = MAX_CHANNEL,
) -> np.ndarray:
    """
    Square grid, `low` left of a line through the center and `high` right of it.

    angle_deg tilts the line away from vertical (clockwise for positive angles).
    """
    row, col = np.indices((int(size), int(size)))
    center = (int(size) - 1) / 2.0
    theta = np.deg2rad(angle_deg)
    side = (col - center) * np.cos(theta) + (row - center) * np.sin(theta)
    return _two_tone(side > 0, low, high)


def generate_stripes(
    width: int = 64,
    height: int = 16,
    stripe_width: int = 4,
    low: int = 0,
    high: int = MAX_CHANNEL,
) -> np.ndarray:
    """Vertical bars `stripe_width` columns wide, starting with `low`."""
    bar = (np.arange(int(width)) // max(int(stripe_width), 1)) % 2 == 1
    return np.tile(_two_tone(bar, low, high), (int(height), 1))


def generate_gradient(width: int = 64, height: int = 64, horizontal: bool = True) -> np.ndarray:
    """Ramp from 0 at the left (or top) edge to 255 at the right (or bottom)."""
    if horizontal:
        ramp = np.rint(np.linspace(0, MAX_CHANNEL, int(width))).astype(np.int64)
        return np.tile(ramp, (int(height), 1))
    ramp = np.rint(np.linspace(0, MAX_CHANNEL, int(height))).astype(np.int64)
    return np.tile(ramp[:, None], (1, int(width)))


def generate_siemens_star(
    size: int = 64,
    spokes: int = 16,
    low: int = 0,
    high: int = MAX_CHANNEL,
) -> np.ndarray:
    """`2 * spokes` wedges around the center, alternating low/high."""
    row, col = np.indices((int(size), int(size)))
    center = (int(size) - 1) / 2.0
    angle = np.arctan2(row - center, col - center) + np.pi  # [0, 2π]
    wedge = np.floor(angle * int(spokes) / np.pi).astype(np.int64)
    return _two_tone(wedge % 2 == 1, low, high)


def generate_checker(
    size: int = 64,
    square_px: int = 8,
    invert: bool = False,
    low: int = 0,
    high: int = MAX_CHANNEL,
) -> np.ndarray:
    """Tiles of `square_px` pixels; the top-left tile is `low` unless inverted."""
    tile = max(int(square_px), 1)
    row, col = np.indices((int(size), int(size)))
    odd = (row // tile + col // tile) % 2 == 1
    return _two_tone(~odd if invert else odd, low, high)


def generate_noise(width: int = 64, height: int = 64, seed: Optional[int] = 1234) -> np.ndarray:
    """Uniform levels in [0, 255] from a seeded numpy Generator."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, MAX_CHANNEL + 1, size=(int(height), int(width)), dtype=np.int64)


# -----------------------------------------------------------------------------
# Color scene
# -----------------------------------------------------------------------------
def generate_color_bars(
    width: int = 64,
    height: int = 16,
    model: Optional[ColorModel] = None,
) -> np.ndarray:
    """
    Eight vertical bars (white, yellow, cyan, green, magenta, red, blue, black)
    packed with `model` (PackedColorModel() by default).
    """
    model = model or PackedColorModel()
    palette = np.array([
        [255, 255, 255], [255, 255, 0], [0, 255, 255], [0, 255, 0],
        [255, 0, 255], [255, 0, 0], [0, 0, 255], [0, 0, 0],
    ], dtype=np.int64)
    x = np.arange(int(width))
    bar = np.minimum(x * len(palette) // max(int(width), 1), len(palette) - 1)
    rgb = np.tile(palette[bar][None, :, :], (int(height), 1, 1))
    return np.asarray(
        model.pack_components(rgb[..., 0], rgb[..., 1], rgb[..., 2]), dtype=np.int64
    )


# -----------------------------------------------------------------------------
# Dispatcher (public API)
# -----------------------------------------------------------------------------
def generate_scene(kind: str, size: int, **kwargs) -> np.ndarray:
    """
    Build a grayscale scene by name.

    Parameters
    ----------
    kind : str
        'slanted_edge' | 'barcode' | 'gradient' | 'siemens_star' | 'checker' |
        'noise'. Aliases: 'edge', 'stripes', 'siemens', 'checkerboard'.
        Unknown names give the gradient.
    size : int
        Side of the square scenes; width of the barcode strip, whose height
        defaults to max(4, size // 4).
    **kwargs
        Forwarded to the generator (angle_deg, stripe_width, spokes, ...).
    """
    k = (kind or "").lower().strip()
    size = int(size)

    if k in ("slanted_edge", "edge"):
        return generate_slanted_edge(size, **kwargs)
    if k in ("barcode", "stripes"):
        kwargs.setdefault("height", max(4, size // 4))
        return generate_stripes(size, **kwargs)
    if k in ("siemens_star", "siemens"):
        return generate_siemens_star(size, **kwargs)
    if k in ("checker", "checkerboard"):
        return generate_checker(size, **kwargs)
    if k == "noise":
        return generate_noise(size, size, **kwargs)
    if k == "gradient":
        return generate_gradient(size, size, **kwargs)
    return generate_gradient(size, size)
