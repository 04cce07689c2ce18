"""
raster_editor.scenes
--------------------
Synthetic targets (edge, barcode, gradient, Siemens star, checker, noise,
color bars) quantized to integer grids for RasterImage.
"""
