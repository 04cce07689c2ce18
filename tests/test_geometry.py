import numpy as np

from raster_editor import RasterImage


def test_flip_horizontally_reverses_rows(gray_4x4):
    gray_4x4.flip_horizontally()
    assert gray_4x4.to_list() == [[3, 2, 1, 0], [7, 6, 5, 4], [11, 10, 9, 8], [15, 14, 13, 12]]


def test_flip_vertically_reverses_row_order(gray_4x4):
    gray_4x4.flip_vertically()
    assert gray_4x4.to_list() == [[12, 13, 14, 15], [8, 9, 10, 11], [4, 5, 6, 7], [0, 1, 2, 3]]


def test_flips_are_involutions(gray_noise, color_noise):
    for img in (gray_noise, color_noise):
        before = img.pixels
        img.flip_horizontally()
        img.flip_horizontally()
        np.testing.assert_array_equal(img.pixels, before)
        img.flip_vertically()
        img.flip_vertically()
        np.testing.assert_array_equal(img.pixels, before)


def test_shift_horizontally_wraps():
    img = RasterImage.grayscale([[1, 2, 3], [4, 5, 6]])
    img.shift_horizontally(-1)
    assert img.to_list() == [[2, 3, 1], [5, 6, 4]]

    img = RasterImage.grayscale([[1, 2, 3], [4, 5, 6]])
    img.shift_horizontally(1)
    assert img.to_list() == [[3, 1, 2], [6, 4, 5]]


def test_shift_magnitude_is_always_one():
    img = RasterImage.grayscale([[1, 2, 3]])
    img.shift_horizontally(-5)
    assert img.to_list() == [[2, 3, 1]]


def test_shift_vertically_wraps():
    img = RasterImage.grayscale([[1, 2], [3, 4], [5, 6]])
    img.shift_vertically(-1)
    assert img.to_list() == [[3, 4], [5, 6], [1, 2]]

    img = RasterImage.grayscale([[1, 2], [3, 4], [5, 6]])
    img.shift_vertically(1)
    assert img.to_list() == [[5, 6], [1, 2], [3, 4]]


def test_zero_shift_is_noop(gray_noise):
    before = gray_noise.pixels
    gray_noise.shift_horizontally(0)
    gray_noise.shift_vertically(0)
    np.testing.assert_array_equal(gray_noise.pixels, before)


def test_rotate_clockwise():
    img = RasterImage.grayscale([[1, 2, 3], [4, 5, 6]])
    img.rotate()
    assert (img.width, img.height) == (2, 3)
    assert img.to_list() == [[4, 1], [5, 2], [6, 3]]


def test_rotate_four_times_restores(gray_noise, color_noise):
    for img in (gray_noise, color_noise):
        before = img.pixels
        dims = (img.width, img.height)
        img.rotate()
        assert (img.width, img.height) == (dims[1], dims[0])
        for _ in range(3):
            img.rotate()
        assert (img.width, img.height) == dims
        np.testing.assert_array_equal(img.pixels, before)
