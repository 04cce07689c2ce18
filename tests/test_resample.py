import numpy as np
import pytest

from raster_editor import InvalidDimensionError, PackedColorModel, RasterImage


def test_halve_uniform_blocks():
    img = RasterImage.grayscale([
        [1, 1, 2, 2],
        [1, 1, 2, 2],
        [3, 3, 4, 4],
        [3, 3, 4, 4],
    ])
    img.halve()
    assert img.to_list() == [[1, 2], [3, 4]]


def test_halve_averages_columns_first():
    # avg(avg(tl=1, bl=1), avg(tr=0, br=2)) = avg(1, 1) = 1
    # (pairing rows first would give avg(avg(1, 0), avg(1, 2)) = avg(0, 1) = 0)
    img = RasterImage.grayscale([[1, 0], [1, 2]])
    img.halve()
    assert img.to_list() == [[1]]


def test_halve_drops_trailing_row_and_column():
    img = RasterImage.grayscale(np.arange(15).reshape(3, 5))
    img.halve()
    assert (img.width, img.height) == (2, 1)
    # block rows 0-1, cols 0-1: 0, 5 | 1, 6 -> avg(2, 3) = 2
    assert img.to_list() == [[2, 4]]


@pytest.mark.parametrize("shape", [(1, 4), (4, 1), (1, 1)])
def test_halve_too_small_raises(shape):
    img = RasterImage.grayscale(np.zeros(shape, dtype=int))
    with pytest.raises(InvalidDimensionError):
        img.halve()
    assert (img.height, img.width) == shape


def test_halve_color():
    model = PackedColorModel()
    p = model.pack_components
    img = RasterImage(model, [[p(0, 10, 200), p(4, 10, 200)], [p(2, 20, 100), p(6, 20, 100)]])
    img.halve()
    # red: avg(avg(0, 2), avg(4, 6)) = avg(1, 5) = 3
    assert img.to_list() == [[p(3, 15, 150)]]


def test_halve_dimension_law(gray_noise):
    w, h = gray_noise.width, gray_noise.height
    gray_noise.halve()
    assert (gray_noise.width, gray_noise.height) == (w // 2, h // 2)


def test_double_size_fills_every_cell():
    img = RasterImage.grayscale([[0, 10], [20, 30]])
    img.double_size()
    assert img.to_list() == [
        [0, 5, 10],
        [10, 15, 20],
        [20, 25, 30],
    ]


def test_double_size_last_row_and_column_interpolated():
    img = RasterImage.grayscale([[0, 4, 8]])
    img.double_size()
    assert img.to_list() == [[0, 2, 4, 6, 8]]

    img = RasterImage.grayscale([[0], [4], [8]])
    img.double_size()
    assert img.to_list() == [[0], [2], [4], [6], [8]]


def test_double_size_single_pixel():
    img = RasterImage.grayscale([[42]])
    img.double_size()
    assert img.to_list() == [[42]]


def test_double_size_matches_per_cell_rule(color_noise):
    src = color_noise.pixels
    h, w = src.shape
    color_noise.double_size()
    out = color_noise.pixels
    assert out.shape == (2 * h - 1, 2 * w - 1)

    avg = color_noise.average
    for row in range(h - 1):
        for col in range(w - 1):
            assert out[2 * row, 2 * col] == src[row, col]
            assert out[2 * row + 1, 2 * col] == avg(int(src[row, col]), int(src[row + 1, col]))
            assert out[2 * row, 2 * col + 1] == avg(int(src[row, col]), int(src[row, col + 1]))
            assert out[2 * row + 1, 2 * col + 1] == avg(int(src[row, col]), int(src[row + 1, col + 1]))
