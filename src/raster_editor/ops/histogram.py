"""
histogram.py — 256-bin brightness histogram

Brightness of a pixel is the floor average of its three channels,
(r + g + b) // 3, so for grayscale grids the histogram is a plain count of
gray levels.
"""

from __future__ import annotations

import numpy as np

from raster_editor.color.color_model import ColorModel

LEVELS = 256


def brightness(grid: np.ndarray, model: ColorModel) -> np.ndarray:
    r, g, b = model.unpack(grid)
    return (r + g + b) // 3


def calculate_histogram(grid: np.ndarray, model: ColorModel) -> np.ndarray:
    """Counts per brightness level; length 256, sums to grid.size."""
    levels = brightness(grid, model).ravel()
    return np.bincount(levels, minlength=LEVELS).astype(np.int64)
