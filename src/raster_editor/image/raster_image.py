"""
raster_image.py — RasterImage: an owned pixel grid plus in-place transforms

WHAT THIS MODULE DOES
---------------------
RasterImage owns one (height, width) int64 grid and a color model. Its
mutators delegate the math to raster_editor.ops and then *swap* the result
in with a single assignment:

    new_grid = ops.<transform>(self._pixels, self._model, ...)
    self._replace(new_grid)

Consequences:
  • width/height are read from the grid's shape, so they can never disagree
    with the grid, even across dimension-changing transforms.
  • validation happens inside the ops before anything is assigned, so a
    failing call (bad kernel, halving a 1-pixel side, ...) leaves the image
    exactly as it was.
  • the grid is never shared: the constructor copies its input and the
    `pixels` accessor returns a copy.

USAGE
-----
    img = RasterImage.grayscale([[0, 1], [2, 3]])
    img.lighten(); img.rotate()
    img.apply_filter(get_kernel("blur"))
    hist = img.calculate_histogram()
"""

from __future__ import annotations
import logging
from typing import List, Optional

import numpy as np

from raster_editor.color.color_model import (
    ColorMode,
    ColorModel,
    GrayscaleModel,
    PackedColorModel,
)
from raster_editor.errors import InvalidDimensionError, PixelValueError
from raster_editor.image.params import EditorParams
from raster_editor.ops import cipher, convolution, geometry, histogram, pointwise, resample
from raster_editor.ops.packing import average_pixels, pack

logger = logging.getLogger(__name__)


def _as_grid(pixels) -> np.ndarray:
    """Copy `pixels` into a fresh 2-D int64 array, rejecting bad shapes/types."""
    try:
        arr = np.array(pixels, copy=True)
    except ValueError as exc:
        # numpy refuses ragged nested lists
        raise InvalidDimensionError(f"Pixel rows must all have the same length: {exc}") from exc

    if arr.ndim != 2:
        raise InvalidDimensionError(f"Pixel grid must be 2-D, got shape {arr.shape}")
    h, w = arr.shape
    if h < 1 or w < 1:
        raise InvalidDimensionError(f"Pixel grid must be at least 1x1, got {w}x{h}")
    if arr.dtype.kind not in "iu":
        raise PixelValueError(f"Pixel values must be integers, got dtype {arr.dtype}")
    if arr.dtype.kind == "u" and arr.size and arr.max() > np.iinfo(np.int64).max:
        raise PixelValueError("Pixel values exceed the int64 range")
    return arr.astype(np.int64)


class RasterImage:
    """
    Mutable raster image.

    Parameters
    ----------
    color_model : ColorModel
        How pixel ints map to channels (GrayscaleModel / PackedColorModel).
    pixels : array-like
        Row-major grid, `height` rows of `width` ints, at least 1x1.
    params : EditorParams | None
        Step sizes for brightness/contrast; defaults to EditorParams().

    Raises
    ------
    InvalidDimensionError
        Empty, ragged or non-2-D grid.
    PixelValueError
        Non-integer values, or values the color model cannot decode.
    """

    def __init__(
        self,
        color_model: ColorModel,
        pixels,
        params: Optional[EditorParams] = None,
    ) -> None:
        grid = _as_grid(pixels)
        color_model.validate(grid)
        self._model = color_model
        self._params = params if params is not None else EditorParams()
        self._pixels = grid

    @classmethod
    def grayscale(cls, pixels, params: Optional[EditorParams] = None) -> "RasterImage":
        return cls(GrayscaleModel(), pixels, params)

    @classmethod
    def color(cls, pixels, params: Optional[EditorParams] = None) -> "RasterImage":
        return cls(PackedColorModel(), pixels, params)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def color_model(self) -> ColorModel:
        return self._model

    @property
    def color_mode(self) -> ColorMode:
        return self._model.mode

    @property
    def is_color(self) -> bool:
        return self._model.is_color

    @property
    def params(self) -> EditorParams:
        return self._params

    @property
    def pixels(self) -> np.ndarray:
        """Copy of the (height, width) int64 grid."""
        return self._pixels.copy()

    def to_list(self) -> List[List[int]]:
        return self._pixels.tolist()

    def pixels_rgb(self) -> np.ndarray:
        """
        Flattened row-major packed RGB values (length width*height).

        Color pixels are returned as stored, alpha byte included; grayscale
        levels are broadcast to all three channels (0xRRGGBB, no alpha).
        """
        if self.is_color:
            return self._pixels.ravel().copy()
        return self._model.to_rgb(self._pixels).ravel()

    def to_rgb_array(self) -> np.ndarray:
        """(height, width, 3) uint8 array, e.g. for matplotlib's imshow."""
        return np.stack(self._model.unpack(self._pixels), axis=-1).astype(np.uint8)

    def copy(self) -> "RasterImage":
        return RasterImage(self._model, self._pixels, self._params)

    def calculate_histogram(self) -> np.ndarray:
        """256 counts of per-pixel brightness (r + g + b) // 3."""
        return histogram.calculate_histogram(self._pixels, self._model)

    # -------------------------------------------------------------------------
    # Packing utilities
    # -------------------------------------------------------------------------
    def pack(self, red: int, green: int, blue: int) -> int:
        """Clamp channels to [0, 255] and encode one pixel."""
        return int(pack(self._model, red, green, blue))

    def average(self, first: int, second: int) -> int:
        """Per-channel floor average of two pixels."""
        return int(average_pixels(self._model, first, second))

    # -------------------------------------------------------------------------
    # Pointwise
    # -------------------------------------------------------------------------
    def lighten(self) -> None:
        self._replace(pointwise.lighten(self._pixels, self._model, self._params.lighten_darken_amount))

    def darken(self) -> None:
        self._replace(pointwise.darken(self._pixels, self._model, self._params.lighten_darken_amount))

    def negative(self) -> None:
        self._replace(pointwise.negative(self._pixels, self._model))

    def enhance_contrast(self) -> None:
        self._replace(pointwise.enhance_contrast(self._pixels, self._model, self._params.contrast_step))

    def reduce_contrast(self) -> None:
        self._replace(pointwise.reduce_contrast(self._pixels, self._model, self._params.contrast_step))

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------
    def flip_horizontally(self) -> None:
        self._replace(geometry.flip_horizontally(self._pixels))

    def flip_vertically(self) -> None:
        self._replace(geometry.flip_vertically(self._pixels))

    def shift_horizontally(self, direction: int) -> None:
        """Circular shift by one column: < 0 left, > 0 right, 0 no-op."""
        if direction:
            self._replace(geometry.shift_horizontally(self._pixels, direction))

    def shift_vertically(self, direction: int) -> None:
        """Circular shift by one row: < 0 up, > 0 down, 0 no-op."""
        if direction:
            self._replace(geometry.shift_vertically(self._pixels, direction))

    def rotate(self) -> None:
        """Rotate 90° clockwise; width and height swap."""
        self._replace(geometry.rotate_clockwise(self._pixels))

    # -------------------------------------------------------------------------
    # Resampling
    # -------------------------------------------------------------------------
    def halve(self) -> None:
        self._replace(resample.halve(self._pixels, self._model))

    def double_size(self) -> None:
        self._replace(resample.double_size(self._pixels, self._model))

    # -------------------------------------------------------------------------
    # Filtering & cipher
    # -------------------------------------------------------------------------
    def apply_filter(self, kernel) -> None:
        """Filter with an odd, square kernel; the border is left unchanged."""
        self._replace(convolution.apply_filter(self._pixels, self._model, kernel))

    def encrypt_decrypt(self, key: int) -> None:
        """XOR with the Lcg48(key) keystream; calling twice restores the image."""
        self._replace(cipher.encrypt_decrypt(self._pixels, self._model, key))

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------
    def _replace(self, grid: np.ndarray) -> None:
        new_grid = np.asarray(grid, dtype=np.int64)
        if new_grid.shape != self._pixels.shape:
            logger.debug(
                "resize %dx%d -> %dx%d",
                self.width, self.height, new_grid.shape[1], new_grid.shape[0],
            )
        self._pixels = new_grid

    def __repr__(self) -> str:
        return f"RasterImage({self.color_mode.value}, {self.width}x{self.height})"
