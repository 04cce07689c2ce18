"""
metrics_module.py — small comparison helpers for raster images

WHAT THIS MODULE PROVIDES
-------------------------
• channel_stack(image)
    (3, H, W) int64 array of red/green/blue levels, whatever the color mode.

• mean_abs_error(a, b) / compute_psnr(a, b)
    Channel-wise differences between two images of equal size, in 8-bit
    levels. PSNR uses a 255 peak and is +inf for identical images.

• histogram_summary(counts)
    Occupied range, mean and median level of a 256-bin histogram.

• plot_histogram(counts)
    Bar chart of a 256-bin histogram (matplotlib).
"""

from __future__ import annotations
from typing import Dict

import numpy as np
import matplotlib.pyplot as plt

from raster_editor.errors import InvalidDimensionError
from raster_editor.image.raster_image import RasterImage


def channel_stack(image: RasterImage) -> np.ndarray:
    return np.stack(image.color_model.unpack(image.pixels), axis=0).astype(np.int64)


def _paired_channels(a: RasterImage, b: RasterImage):
    if (a.width, a.height) != (b.width, b.height):
        raise InvalidDimensionError(
            f"Images differ in size: {a.width}x{a.height} vs {b.width}x{b.height}"
        )
    return channel_stack(a).astype(np.float64), channel_stack(b).astype(np.float64)


# -----------------------------------------------------------------------------
# Error metrics
# -----------------------------------------------------------------------------
def mean_abs_error(a: RasterImage, b: RasterImage) -> float:
    x, y = _paired_channels(a, b)
    return float(np.mean(np.abs(x - y)))


def compute_psnr(a: RasterImage, b: RasterImage, peak: float = 255.0) -> float:
    """
    Peak signal-to-noise ratio in dB.

    Definition
    ----------
    PSNR = 10 * log10( peak^2 / MSE ), MSE over all channels and pixels.
    """
    x, y = _paired_channels(a, b)
    mse = float(np.mean((x - y) ** 2))
    if mse == 0.0:
        return float("inf")
    return float(10.0 * np.log10(peak**2 / mse))


# -----------------------------------------------------------------------------
# Histogram helpers
# -----------------------------------------------------------------------------
def histogram_summary(counts) -> Dict[str, float]:
    """
    Summarise a 256-bin histogram.

    Returns
    -------
    dict with keys: total, min_level, max_level, mean, median
    (levels are -1 / NaN for an empty histogram)
    """
    c = np.asarray(counts, dtype=np.int64)
    total = int(c.sum())
    if total == 0:
        return {"total": 0, "min_level": -1, "max_level": -1, "mean": float("nan"), "median": float("nan")}

    levels = np.arange(c.size)
    occupied = np.nonzero(c)[0]
    cumulative = np.cumsum(c)
    median = int(np.searchsorted(cumulative, (total + 1) // 2))
    return {
        "total": total,
        "min_level": int(occupied[0]),
        "max_level": int(occupied[-1]),
        "mean": float((levels * c).sum() / total),
        "median": float(median),
    }


def plot_histogram(counts, title: str = "Brightness Histogram") -> None:
    """Bar chart of a 256-bin brightness histogram on a new figure."""
    c = np.asarray(counts)
    plt.figure()
    plt.bar(np.arange(c.size), c, width=1.0)
    plt.title(title)
    plt.xlabel("Brightness level")
    plt.ylabel("Count")
    plt.xlim(-0.5, c.size - 0.5)
    plt.tight_layout()
