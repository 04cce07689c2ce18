"""
convolution.py — square-kernel filtering with an untouched border

WHAT THIS MODULE DOES
---------------------
Applies a k×k weight matrix (k odd, edge = (k - 1) // 2) to every pixel that
has a full k×k neighbourhood inside the image:

    out_ch[row][col] = Σ_i Σ_j kernel[i][j] · ch[row + i - edge][col + j - edge]

for each channel independently, then rounds to the nearest integer and packs
(clamp to [0, 255]). This is correlation: the kernel is *not* flipped, so an
asymmetric kernel is applied exactly as written.

EDGE POLICY
-----------
Pixels closer than `edge` to any side are copied from the source unchanged.
There is no reflection, wrap or zero padding of coordinates.

The filter reads only the source grid and writes into a new buffer, so no
output depends on an already-filtered neighbour.

KERNEL PRESETS
--------------
`KERNELS` holds the classic blur / sharpen / edge / emboss matrices.
`gaussian_kernel` samples a 2-D Gaussian and L1-normalises it (Σ = 1) so
average brightness is preserved, the same construction used for optical PSFs.
"""

from __future__ import annotations
import logging
from typing import Dict

import numpy as np
from scipy.signal import correlate

from raster_editor.color.color_model import MAX_CHANNEL, ColorModel
from raster_editor.errors import InvalidDimensionError, InvalidKernelError
from raster_editor.ops.packing import pack

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Kernel validation & construction
# -----------------------------------------------------------------------------
def validate_kernel(kernel) -> np.ndarray:
    """
    Return `kernel` as a float64 (k, k) array, k odd.

    Raises
    ------
    InvalidKernelError
        If the kernel is not 2-D, not square, has an even side, is empty,
        holds non-finite / non-numeric values, or has weights so large that
        a weighted sum of 8-bit channels overflows float64.
    """
    try:
        k = np.asarray(kernel, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidKernelError(f"Kernel is not a numeric matrix: {exc}") from exc

    if k.ndim != 2:
        raise InvalidKernelError(f"Kernel must be 2-D, got {k.ndim}-D")
    rows, cols = k.shape
    if rows != cols:
        raise InvalidKernelError(f"Kernel must be square, got {rows}x{cols}")
    if rows % 2 == 0:
        raise InvalidKernelError(f"Kernel side must be odd, got {rows}")
    if not np.all(np.isfinite(k)):
        raise InvalidKernelError("Kernel contains NaN or infinite weights")
    # bound on any weighted sum of 8-bit channels; must stay representable
    if not np.isfinite(MAX_CHANNEL * np.abs(k).sum()):
        raise InvalidKernelError("Kernel weights are too large: weighted sums overflow")
    return k


def _ensure_odd(n: int) -> int:
    """Return n if odd, else n+1 (centers the kernel)."""
    return n if (n % 2 == 1) else (n + 1)


def box_kernel(size: int = 3) -> np.ndarray:
    """Uniform (size, size) averaging kernel; size forced odd."""
    size = _ensure_odd(max(1, int(size)))
    return np.full((size, size), 1.0 / (size * size))


def gaussian_kernel(size: int, sigma: float) -> np.ndarray:
    """
    L1-normalised 2-D Gaussian kernel.

    Parameters
    ----------
    size : int
        Kernel side; forced odd. size ≈ ceil(6σ) + 1 keeps ±3σ inside.
    sigma : float
        Standard deviation in pixels.
    """
    size = _ensure_odd(max(1, int(size)))
    ax = np.arange(-(size // 2), size // 2 + 1, dtype=np.float64)
    xx, yy = np.meshgrid(ax, ax, indexing="xy")

    s2 = max(float(sigma), 1e-12) ** 2
    kernel = np.exp(-(xx**2 + yy**2) / (2.0 * s2))

    total = float(kernel.sum())
    if total <= 0.0 or not np.isfinite(total):
        # Degenerate: identity kernel
        kernel = np.zeros((size, size))
        kernel[size // 2, size // 2] = 1.0
        return kernel
    return kernel / total


KERNELS: Dict[str, np.ndarray] = {
    "identity": np.array([[0, 0, 0], [0, 1, 0], [0, 0, 0]], dtype=np.float64),
    "blur": box_kernel(3),
    "sharpen": np.array([[0, -1, 0], [-1, 5, -1], [0, -1, 0]], dtype=np.float64),
    "edge": np.array([[-1, -1, -1], [-1, 8, -1], [-1, -1, -1]], dtype=np.float64),
    "emboss": np.array([[-2, -1, 0], [-1, 1, 1], [0, 1, 2]], dtype=np.float64),
}


def get_kernel(name: str) -> np.ndarray:
    """Copy of a preset kernel; raises KeyError for unknown names."""
    key = (name or "").lower().strip()
    if key == "gaussian":
        return gaussian_kernel(5, 1.0)
    if key not in KERNELS:
        raise KeyError(f"Unknown kernel {name!r}; choose from {sorted(KERNELS) + ['gaussian']}")
    return KERNELS[key].copy()


# -----------------------------------------------------------------------------
# Filtering
# -----------------------------------------------------------------------------
def apply_filter(grid: np.ndarray, model: ColorModel, kernel) -> np.ndarray:
    """
    Filter `grid` with `kernel`, leaving a border of width `edge` unchanged.

    Raises
    ------
    InvalidKernelError
        See `validate_kernel`.
    InvalidDimensionError
        If the image is smaller than the kernel in either dimension.
    """
    k = validate_kernel(kernel)
    side = k.shape[0]
    edge = (side - 1) // 2
    h, w = grid.shape
    if h < side or w < side:
        raise InvalidDimensionError(
            f"A {side}x{side} kernel does not fit inside a {w}x{h} image"
        )

    logger.debug("filtering %dx%d image with %dx%d kernel", w, h, side, side)

    # mode="valid" yields exactly the interior: (h - 2·edge, w - 2·edge)
    filtered = [
        np.rint(correlate(ch.astype(np.float64), k, mode="valid", method="direct"))
        for ch in model.unpack(grid)
    ]

    out = grid.copy()
    out[edge:h - edge, edge:w - edge] = pack(model, *filtered)
    return out
