"""
pointwise.py — per-pixel tone transforms

WHAT THIS MODULE DOES
---------------------
Each function decodes the whole grid into channel arrays, applies one
per-channel rule and packs the result into a *new* grid:
  • lighten / darken        — fixed additive step per channel
  • negative                — channel -> 255 - channel
  • enhance_contrast        — nudge each channel away from its image mean
  • reduce_contrast         — nudge each channel toward its image mean

CONTRAST IS A FIXED STEP, NOT A GAIN
------------------------------------
The contrast rules move a channel by `step` levels (default 1) per call,
regardless of how far it sits from the mean. Repeated calls keep nudging;
values equal to the mean never move. The mean is the truncated integer
average of that channel over the whole image.
"""

from __future__ import annotations
from typing import Tuple

import numpy as np

from raster_editor.color.color_model import MAX_CHANNEL, ColorModel
from raster_editor.ops.packing import pack


def adjust_brightness(grid: np.ndarray, model: ColorModel, delta: int) -> np.ndarray:
    """Add `delta` to every channel of every pixel (clamped)."""
    r, g, b = model.unpack(grid)
    return pack(model, r + delta, g + delta, b + delta)


def lighten(grid: np.ndarray, model: ColorModel, amount: int = 3) -> np.ndarray:
    return adjust_brightness(grid, model, amount)


def darken(grid: np.ndarray, model: ColorModel, amount: int = 3) -> np.ndarray:
    return adjust_brightness(grid, model, -amount)


def negative(grid: np.ndarray, model: ColorModel) -> np.ndarray:
    r, g, b = model.unpack(grid)
    return pack(model, MAX_CHANNEL - r, MAX_CHANNEL - g, MAX_CHANNEL - b)


# -----------------------------------------------------------------------------
# Contrast (two passes: means, then nudge)
# -----------------------------------------------------------------------------
def channel_means(grid: np.ndarray, model: ColorModel) -> Tuple[int, int, int]:
    """Integer (truncating) mean of each channel over the whole grid."""
    n = grid.size
    return tuple(int(ch.sum()) // n for ch in model.unpack(grid))


def _nudge(grid: np.ndarray, model: ColorModel, step: int) -> np.ndarray:
    # step > 0 pushes away from the mean, step < 0 pulls toward it
    channels = model.unpack(grid)
    means = channel_means(grid, model)
    moved = [ch + step * np.sign(ch - mean) for ch, mean in zip(channels, means)]
    return pack(model, *moved)


def enhance_contrast(grid: np.ndarray, model: ColorModel, step: int = 1) -> np.ndarray:
    return _nudge(grid, model, abs(step))


def reduce_contrast(grid: np.ndarray, model: ColorModel, step: int = 1) -> np.ndarray:
    return _nudge(grid, model, -abs(step))
