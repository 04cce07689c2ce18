"""
errors.py — error taxonomy for raster editing

All errors derive from ValueError so callers that already guard numeric
input with `except ValueError` keep working.
"""

from __future__ import annotations


class RasterError(ValueError):
    """Base class for every error raised by raster_editor."""


class InvalidDimensionError(RasterError):
    """A grid (or the result of a transform) would have a side < 1."""


class InvalidKernelError(RasterError):
    """Filter kernel is not a finite, square matrix with an odd side."""


class PixelValueError(RasterError):
    """A pixel value cannot be interpreted by the image's color model."""
