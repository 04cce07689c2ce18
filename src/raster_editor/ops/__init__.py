"""
raster_editor.ops
-----------------
Pure grid transforms used by RasterImage. Every function takes the source
grid (and the color model where channels matter) and returns a new grid:
    packing → pointwise → geometry → resample → convolution → cipher/histogram
"""
