"""
raster_editor.color
-------------------
Color-model capability injected into RasterImage:
    GrayscaleModel (pixel == brightness) and PackedColorModel (0xAARRGGBB).
"""

from .color_model import ColorMode, ColorModel, GrayscaleModel, PackedColorModel

__all__ = ["ColorMode", "ColorModel", "GrayscaleModel", "PackedColorModel"]
