"""
raster_editor.image
-------------------
RasterImage (owned grid + transforms) and its EditorParams configuration.
"""

from .params import EditorParams
from .raster_image import RasterImage

__all__ = ["EditorParams", "RasterImage"]
