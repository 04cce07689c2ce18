import numpy as np
import pytest

from raster_editor import (
    KERNELS,
    InvalidDimensionError,
    InvalidKernelError,
    PackedColorModel,
    RasterImage,
    box_kernel,
    gaussian_kernel,
    get_kernel,
)
from raster_editor.ops.convolution import validate_kernel

BOX = [[1 / 9] * 3 for _ in range(3)]


def test_box_blur_of_uniform_image():
    img = RasterImage.grayscale([[100] * 3 for _ in range(3)])
    img.apply_filter(BOX)
    assert img.to_list() == [[100] * 3 for _ in range(3)]


def test_box_blur_interior_value_rounds():
    img = RasterImage.grayscale([[0, 0, 0], [0, 14, 0], [0, 0, 0]])
    img.apply_filter(BOX)
    # 14 / 9 = 1.56 -> 2
    assert img.to_list() == [[0, 0, 0], [0, 2, 0], [0, 0, 0]]


def test_border_is_copied_unchanged(gray_noise):
    before = gray_noise.pixels
    gray_noise.apply_filter(get_kernel("edge"))
    after = gray_noise.pixels
    np.testing.assert_array_equal(after[0, :], before[0, :])
    np.testing.assert_array_equal(after[-1, :], before[-1, :])
    np.testing.assert_array_equal(after[:, 0], before[:, 0])
    np.testing.assert_array_equal(after[:, -1], before[:, -1])


def test_wide_kernel_keeps_wider_border():
    img = RasterImage.grayscale(np.full((5, 5), 50))
    img.apply_filter(np.full((5, 5), 2.0))
    out = img.pixels
    assert out[2, 2] == 255
    out[2, 2] = 50
    assert (out == 50).all()


def test_kernel_is_not_flipped():
    img = RasterImage.grayscale([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    img.apply_filter([[1, 0, 0], [0, 0, 0], [0, 0, 0]])
    assert img.pixels[1, 1] == 1


def test_results_are_clamped():
    img = RasterImage.grayscale([[0, 0, 0], [0, 255, 0], [0, 0, 0]])
    img.apply_filter(get_kernel("edge"))
    assert img.pixels[1, 1] == 255

    img = RasterImage.grayscale([[255, 255, 255], [255, 0, 255], [255, 255, 255]])
    img.apply_filter(get_kernel("sharpen"))
    assert img.pixels[1, 1] == 0


def test_one_by_one_kernel_filters_every_pixel():
    img = RasterImage.grayscale([[10, 20], [30, 200]])
    img.apply_filter([[2]])
    assert img.to_list() == [[20, 40], [60, 255]]


def test_color_filter_works_per_channel():
    model = PackedColorModel()
    pixel = model.pack_components(90, 45, 9)
    img = RasterImage(model, [[pixel] * 4 for _ in range(4)])
    img.apply_filter(BOX)
    assert (img.pixels == pixel).all()

    img.apply_filter([[0, 0, 0], [0, 2, 0], [0, 0, 0]])
    assert img.pixels[1, 1] == model.pack_components(180, 90, 18)
    assert img.pixels[0, 0] == pixel


@pytest.mark.parametrize("kernel", [
    [[1, 0], [0, 1]],
    [[1, 1, 1], [1, 1, 1]],
    [1, 1, 1],
    [[[1]]],
    [[np.nan, 0, 0], [0, 1, 0], [0, 0, 0]],
    [["a", "b", "c"]] * 3,
])
def test_invalid_kernels_rejected(kernel):
    img = RasterImage.grayscale(np.full((4, 4), 7))
    with pytest.raises(InvalidKernelError):
        img.apply_filter(kernel)
    assert (img.pixels == 7).all()


def test_overflowing_weights_rejected():
    # each weight is finite, but mixed-sign sums would reach inf - inf
    img = RasterImage.grayscale(np.full((3, 3), 255))
    with pytest.raises(InvalidKernelError):
        img.apply_filter([[1e308, 1e308, 0], [0, 0, 0], [0, -1e308, -1e308]])
    assert (img.pixels == 255).all()
    assert img.calculate_histogram()[255] == 9


def test_huge_finite_weights_still_clamp():
    img = RasterImage.grayscale(np.full((3, 3), 1))
    img.apply_filter([[0, 0, 0], [0, 1e300, 0], [0, 0, -1e300]])
    assert img.pixels[1, 1] == 0
    img = RasterImage.grayscale(np.full((3, 3), 1))
    img.apply_filter([[0, 0, 0], [0, 1e300, 0], [0, 0, 0]])
    assert img.pixels[1, 1] == 255


def test_image_smaller_than_kernel():
    img = RasterImage.grayscale([[1, 2], [3, 4]])
    with pytest.raises(InvalidDimensionError):
        img.apply_filter(BOX)


def test_gaussian_kernel_is_normalised_and_symmetric():
    k = gaussian_kernel(4, 1.0)
    assert k.shape == (5, 5)
    assert k.sum() == pytest.approx(1.0)
    np.testing.assert_allclose(k, k.T)
    np.testing.assert_allclose(k, k[::-1, ::-1])
    assert k[2, 2] == k.max()


def test_box_kernel():
    k = box_kernel(3)
    assert k.shape == (3, 3)
    assert k.sum() == pytest.approx(1.0)


def test_presets_are_valid_and_copied():
    for name in list(KERNELS) + ["gaussian"]:
        validate_kernel(get_kernel(name))
    k = get_kernel("sharpen")
    k[1, 1] = 0
    assert KERNELS["sharpen"][1, 1] == 5
    with pytest.raises(KeyError):
        get_kernel("no-such-kernel")
