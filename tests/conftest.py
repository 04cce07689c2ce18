import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from raster_editor import PackedColorModel, RasterImage


@pytest.fixture
def gray_4x4() -> RasterImage:
    """4x4 grayscale image holding 0..15 row-major."""
    return RasterImage.grayscale(np.arange(16).reshape(4, 4))


@pytest.fixture
def gray_noise() -> RasterImage:
    rng = np.random.default_rng(7)
    return RasterImage.grayscale(rng.integers(0, 256, size=(5, 7)))


@pytest.fixture
def color_noise() -> RasterImage:
    rng = np.random.default_rng(11)
    rgb = rng.integers(0, 256, size=(6, 5, 3))
    model = PackedColorModel()
    grid = model.pack_components(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    return RasterImage(model, grid)


@pytest.fixture
def packed():
    return PackedColorModel()
