"""
geometry.py — flips, circular shifts and clockwise rotation

All functions return a fresh array and never write into their input, so a
transform can never read a value it has already overwritten.
"""

from __future__ import annotations

import numpy as np


def flip_horizontally(grid: np.ndarray) -> np.ndarray:
    """new[row][col] = old[row][width - 1 - col]"""
    return np.flip(grid, axis=1).copy()


def flip_vertically(grid: np.ndarray) -> np.ndarray:
    """new[row][col] = old[height - 1 - row][col]"""
    return np.flip(grid, axis=0).copy()


def shift_horizontally(grid: np.ndarray, direction: int) -> np.ndarray:
    """
    Circular one-column shift.

    direction < 0 : left  (column 0 wraps to the last column)
    direction > 0 : right (last column wraps to column 0)
    direction == 0: unchanged copy
    """
    return np.roll(grid, int(np.sign(direction)), axis=1)


def shift_vertically(grid: np.ndarray, direction: int) -> np.ndarray:
    """Circular one-row shift: < 0 up, > 0 down, 0 unchanged copy."""
    return np.roll(grid, int(np.sign(direction)), axis=0)


def rotate_clockwise(grid: np.ndarray) -> np.ndarray:
    """
    Rotate 90° clockwise: out[col][new_width - 1 - row] = in[row][col].

    Output shape is (width, height).
    """
    return np.rot90(grid, k=-1).copy()
