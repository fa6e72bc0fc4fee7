import numpy as np
import pytest

from camera import Camera


def test_ray_directions_are_unit_and_point_forward():
    cam = Camera(64, 48, 1.05)
    for i, j in [(0, 0), (63, 47), (32, 24)]:
        d = cam.ray_direction(i, j)
        assert np.linalg.norm(d) == pytest.approx(1.0)
        assert d[2] < 0.0


def test_top_left_pixel_looks_up_and_left():
    d = Camera(64, 48).ray_direction(0, 0)
    assert d[0] < 0.0 and d[1] > 0.0


def test_image_center_is_on_axis():
    cam = Camera(2, 2, np.pi / 2)
    d = cam.ray_direction(1, 1)
    # pixel centres sit half a pixel off the optical axis
    assert d == pytest.approx(np.array([0.5, -0.5, -1.0]) / np.sqrt(1.5))


def test_row_directions_match_single_pixel():
    cam = Camera(16, 12)
    row = cam.row_directions(5)
    assert row.shape == (16, 3)
    for i in range(16):
        assert np.allclose(row[i], cam.ray_direction(i, 5))


@pytest.mark.parametrize("kwargs", [dict(width=0), dict(height=-3), dict(fov=0.0), dict(fov=4.0)])
def test_camera_validation(kwargs):
    with pytest.raises(ValueError):
        Camera(**kwargs)
