"""
packing.py — the single write path for channel values

Every transform that computes new channel values hands them to `pack`,
which clamps each channel to [0, 255] before encoding. Overflow is therefore
never an error: 260 becomes 255, -4 becomes 0.
"""

from __future__ import annotations

import numpy as np

from raster_editor.color.color_model import MAX_CHANNEL, OPAQUE, ColorModel


def clamp_channel(values) -> np.ndarray:
    """Clamp to [0, 255] and return int64."""
    return np.clip(np.asarray(values), 0, MAX_CHANNEL).astype(np.int64)


def pack(model: ColorModel, red, green, blue) -> np.ndarray:
    """
    Clamp three channel arrays and encode them as pixels.

    Grayscale models return the clamped red value (callers keep r == g == b);
    color models receive (r, g, b, 255).
    """
    return model.pack_components(
        clamp_channel(red), clamp_channel(green), clamp_channel(blue), OPAQUE
    )


def average_pixels(model: ColorModel, first, second) -> np.ndarray:
    """Per-channel floor average of two pixel arrays (same shape), packed."""
    r1, g1, b1 = model.unpack(first)
    r2, g2, b2 = model.unpack(second)
    return pack(model, (r1 + r2) // 2, (g1 + g2) // 2, (b1 + b2) // 2)
