"""
params.py — tunable constants for RasterImage transforms
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class EditorParams:
    """
    Grouped editing parameters.

    Brightness
    ----------
    lighten_darken_amount : levels added/subtracted per channel by lighten/darken

    Contrast
    --------
    contrast_step : levels a channel moves away from / toward its mean per call
    """
    lighten_darken_amount: int = 3
    contrast_step: int = 1

    def __post_init__(self) -> None:
        if self.lighten_darken_amount < 0:
            raise ValueError("lighten_darken_amount must be >= 0")
        if self.contrast_step < 0:
            raise ValueError("contrast_step must be >= 0")
