"""
color_model.py — pixel <-> channel mapping for grayscale and packed-color grids

WHAT THIS MODULE DOES
---------------------
A raster grid stores one integer per pixel. How that integer maps to red,
green and blue depends on the image's color mode:
  • GrayscaleModel   — the pixel *is* the brightness (r = g = b = value).
  • PackedColorModel — 8 bits per channel packed at fixed bit offsets
                       (default ARGB: 0xAARRGGBB, alpha conventionally 255).

The transform code never branches on the mode. It only calls the capability
below, which is injected into RasterImage at construction.

VECTORISED BY CONSTRUCTION
--------------------------
Every method is written with plain integer operators (>>, &, |, <<), so the
same call works on a python int or on a whole numpy grid at once:

    model.get_red(0xFF336699)        -> 0x33
    model.get_red(grid)              -> (H, W) array of red levels
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

import numpy as np

from raster_editor.errors import PixelValueError

MAX_CHANNEL = 255
OPAQUE = 255


class ColorMode(Enum):
    GRAYSCALE = "grayscale"
    COLOR = "color"


# -----------------------------------------------------------------------------
# Capability interface
# -----------------------------------------------------------------------------
class ColorModel(ABC):
    """
    Decode/encode pixels of one color mode.

    Subclasses implement the three channel getters and `pack_components`;
    `unpack` and `to_rgb` are derived from them.
    """

    mode: ColorMode

    @abstractmethod
    def get_red(self, pixel):
        ...

    @abstractmethod
    def get_green(self, pixel):
        ...

    @abstractmethod
    def get_blue(self, pixel):
        ...

    @abstractmethod
    def pack_components(self, red, green, blue, alpha=OPAQUE):
        """Encode already-clamped channel values into pixel value(s)."""

    @abstractmethod
    def validate(self, pixels: np.ndarray) -> None:
        """Raise PixelValueError if any value cannot be decoded."""

    def unpack(self, pixels) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (red, green, blue) int64 arrays with the shape of `pixels`."""
        p = np.asarray(pixels, dtype=np.int64)
        return self.get_red(p), self.get_green(p), self.get_blue(p)

    def to_rgb(self, pixels) -> np.ndarray:
        """24-bit 0xRRGGBB view of `pixels` (alpha dropped)."""
        r, g, b = self.unpack(pixels)
        return (r << 16) | (g << 8) | b

    @property
    def is_color(self) -> bool:
        return self.mode is ColorMode.COLOR

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# -----------------------------------------------------------------------------
# Grayscale: pixel value == brightness
# -----------------------------------------------------------------------------
class GrayscaleModel(ColorModel):
    mode = ColorMode.GRAYSCALE

    def get_red(self, pixel):
        return pixel

    def get_green(self, pixel):
        return pixel

    def get_blue(self, pixel):
        return pixel

    def pack_components(self, red, green, blue, alpha=OPAQUE):
        # Callers hand in r == g == b; any one of them is the gray level.
        return red

    def validate(self, pixels: np.ndarray) -> None:
        p = np.asarray(pixels)
        if p.size and (p.min() < 0 or p.max() > MAX_CHANNEL):
            raise PixelValueError(
                f"Grayscale pixels must lie in [0, {MAX_CHANNEL}], "
                f"got range [{p.min()} .. {p.max()}]"
            )

    def to_rgb(self, pixels) -> np.ndarray:
        return np.asarray(pixels, dtype=np.int64) * 0x010101


# -----------------------------------------------------------------------------
# Packed color: 8 bits per channel at configurable offsets
# -----------------------------------------------------------------------------
class PackedColorModel(ColorModel):
    """
    Packed 32-bit color model (one byte per channel).

    Parameters
    ----------
    red_shift, green_shift, blue_shift, alpha_shift : int
        Bit offset of each channel's byte. Defaults give 0xAARRGGBB.
    """

    mode = ColorMode.COLOR

    def __init__(
        self,
        red_shift: int = 16,
        green_shift: int = 8,
        blue_shift: int = 0,
        alpha_shift: int = 24,
    ) -> None:
        shifts = (red_shift, green_shift, blue_shift, alpha_shift)
        if len(set(shifts)) != 4 or any(s not in (0, 8, 16, 24) for s in shifts):
            raise ValueError(f"Channel shifts must be a permutation of 0/8/16/24, got {shifts}")
        self.red_shift = red_shift
        self.green_shift = green_shift
        self.blue_shift = blue_shift
        self.alpha_shift = alpha_shift

    def get_red(self, pixel):
        return (pixel >> self.red_shift) & 0xFF

    def get_green(self, pixel):
        return (pixel >> self.green_shift) & 0xFF

    def get_blue(self, pixel):
        return (pixel >> self.blue_shift) & 0xFF

    def get_alpha(self, pixel):
        return (pixel >> self.alpha_shift) & 0xFF

    def pack_components(self, red, green, blue, alpha=OPAQUE):
        return (
            ((alpha & 0xFF) << self.alpha_shift)
            | ((red & 0xFF) << self.red_shift)
            | ((green & 0xFF) << self.green_shift)
            | ((blue & 0xFF) << self.blue_shift)
        )

    def validate(self, pixels: np.ndarray) -> None:
        p = np.asarray(pixels)
        if p.size and (p.min() < 0 or p.max() > 0xFFFFFFFF):
            raise PixelValueError(
                "Packed color pixels must be unsigned 32-bit values, "
                f"got range [{p.min()} .. {p.max()}]"
            )

    def __repr__(self) -> str:
        return (
            f"PackedColorModel(red_shift={self.red_shift}, green_shift={self.green_shift}, "
            f"blue_shift={self.blue_shift}, alpha_shift={self.alpha_shift})"
        )
