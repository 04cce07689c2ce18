"""
raster_editor.utils
-------------------
Comparison metrics (MAE, PSNR) and histogram summaries/plots.
"""
