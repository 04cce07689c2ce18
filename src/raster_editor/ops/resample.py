"""
resample.py — 2× down/up sampling by pairwise pixel averaging

WHAT THIS MODULE DOES
---------------------
• halve(grid)        (H, W) -> (H // 2, W // 2)
      Each output pixel summarises a 2×2 block:
          avg( avg(top_left, bottom_left), avg(top_right, bottom_right) )
      This is *not* a 4-way mean: each pairwise average floors, so the
      nesting order above is part of the result and must not be reordered.
      A trailing odd row/column of the input is dropped.

• double_size(grid)  (H, W) -> (2H - 1, 2W - 1)
      Source pixels land on even coordinates; the odd coordinates between
      them are filled with pairwise averages:
          out[2r    ][2c    ] = src[r][c]
          out[2r + 1][2c    ] = avg(src[r][c], src[r + 1][c])
          out[2r    ][2c + 1] = avg(src[r][c], src[r][c + 1])
          out[2r + 1][2c + 1] = avg(src[r][c], src[r + 1][c + 1])
      Every rule is applied wherever its neighbours exist, which includes the
      last source row and column. The final output row and column are thus
      fully defined (source pixels plus their averages along that edge),
      rather than left at a default value.

Both operations are written as strided slice assignments, which evaluate the
per-cell formulas for all cells at once.
"""

from __future__ import annotations

import numpy as np

from raster_editor.color.color_model import ColorModel
from raster_editor.errors import InvalidDimensionError
from raster_editor.ops.packing import average_pixels


def halve(grid: np.ndarray, model: ColorModel) -> np.ndarray:
    h, w = grid.shape
    new_h, new_w = h // 2, w // 2
    if new_h < 1 or new_w < 1:
        raise InvalidDimensionError(
            f"Cannot halve a {w}x{h} image: result would be {new_w}x{new_h}"
        )

    rows, cols = 2 * new_h, 2 * new_w
    top_left = grid[0:rows:2, 0:cols:2]
    bottom_left = grid[1:rows:2, 0:cols:2]
    top_right = grid[0:rows:2, 1:cols:2]
    bottom_right = grid[1:rows:2, 1:cols:2]

    left = average_pixels(model, top_left, bottom_left)
    right = average_pixels(model, top_right, bottom_right)
    return np.asarray(average_pixels(model, left, right), dtype=np.int64)


def double_size(grid: np.ndarray, model: ColorModel) -> np.ndarray:
    h, w = grid.shape
    out = np.zeros((2 * h - 1, 2 * w - 1), dtype=np.int64)

    out[0::2, 0::2] = grid
    out[1::2, 0::2] = average_pixels(model, grid[:-1, :], grid[1:, :])
    out[0::2, 1::2] = average_pixels(model, grid[:, :-1], grid[:, 1:])
    out[1::2, 1::2] = average_pixels(model, grid[:-1, :-1], grid[1:, 1:])
    return out
