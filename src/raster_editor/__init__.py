"""
raster_editor — in-memory raster image editing
================================================
A dense 2-D grid of grayscale or packed-RGB pixels with whole-image
transforms, organized as:
    color (pixel <-> channels) → ops (pure grid transforms) → image (RasterImage)
plus scenes (synthetic test grids) and utils (metrics).
"""

from raster_editor.color.color_model import ColorMode, ColorModel, GrayscaleModel, PackedColorModel
from raster_editor.errors import (
    InvalidDimensionError,
    InvalidKernelError,
    PixelValueError,
    RasterError,
)
from raster_editor.image.params import EditorParams
from raster_editor.image.raster_image import RasterImage
from raster_editor.ops.convolution import KERNELS, box_kernel, gaussian_kernel, get_kernel

__all__ = [
    "ColorMode",
    "ColorModel",
    "GrayscaleModel",
    "PackedColorModel",
    "RasterError",
    "InvalidDimensionError",
    "InvalidKernelError",
    "PixelValueError",
    "EditorParams",
    "RasterImage",
    "KERNELS",
    "box_kernel",
    "gaussian_kernel",
    "get_kernel",
]
