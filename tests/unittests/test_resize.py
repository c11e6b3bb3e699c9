import numpy as np
import pytest

from logobaker.api.resize import (
    Resample,
    center_crop,
    fit_by_orientation,
    proportional_size,
    resize_to_width,
)
from logobaker.core.defs import InsufficientSourceSize

from conftest import solid


@pytest.mark.parametrize(
    "size, target",
    [((1000, 600), 300), ((1001, 333), 150), ((640, 640), 100), ((37, 20), 500)],
)
def test_fit_landscape_drives_width(size, target):
    out = fit_by_orientation(solid(size[0], size[1], (1, 2, 3, 255)), target)
    assert out.shape[1] == target
    assert abs(out.shape[0] - size[1] * target / size[0]) <= 1


@pytest.mark.parametrize("size, target", [((600, 1000), 300), ((333, 1001), 150), ((20, 37), 500)])
def test_fit_portrait_drives_height(size, target):
    out = fit_by_orientation(solid(size[0], size[1], (1, 2, 3, 255)), target)
    assert out.shape[0] == target
    assert abs(out.shape[1] - size[0] * target / size[1]) <= 1


@pytest.mark.parametrize("resample", list(Resample))
def test_resize_keeps_solid_color(resample):
    out = resize_to_width(solid(200, 100, (10, 20, 30, 255)), 50, resample)
    assert out.shape == (25, 50, 4)
    assert np.all(np.abs(out.astype(int) - [10, 20, 30, 255]) <= 1)


@pytest.mark.parametrize("resample", list(Resample))
def test_resize_has_no_dark_fringe(resample):
    logo = solid(100, 50, (0, 0, 0, 0))
    logo[:, :50] = (255, 255, 255, 255)
    out = resize_to_width(logo, 33, resample)

    alpha = out[..., 3]
    edge = (alpha > 0) & (alpha < 255)
    assert edge.any()
    assert out[alpha > 0][:, :3].min() >= 254


def test_proportional_size_never_zero():
    assert proportional_size(10000, 1, 10) == 1


def test_center_crop_same_size_is_noop():
    rng = np.random.default_rng(0)
    img = rng.integers(0, 255, (30, 40, 4), dtype=np.uint8)
    np.testing.assert_array_equal(center_crop(img, 40, 30), img)


def test_center_crop_removes_excess_symmetrically():
    img = np.zeros((10, 4, 4), dtype=np.uint8)
    for row in range(10):
        img[row] = row
    out = center_crop(img, 4, 6)
    assert out.shape == (6, 4, 4)
    assert list(out[:, 0, 0]) == [2, 3, 4, 5, 6, 7]


def test_center_crop_width():
    img = np.zeros((4, 9, 4), dtype=np.uint8)
    for col in range(9):
        img[:, col] = col
    out = center_crop(img, 5, 4)
    assert list(out[0, :, 0]) == [2, 3, 4, 5, 6]


def test_center_crop_too_small_source():
    with pytest.raises(InsufficientSourceSize) as exc:
        center_crop(solid(400, 100, (0, 0, 0, 255)), 400, 200)
    assert exc.value.source_size == (400, 100)
    assert exc.value.target_size == (400, 200)
