"""Tests for primary ray generation."""

import math

import pytest

from camera.camera import Camera
from conftest import assert_vec_close
from core.vector import Vector3


def test_default_orientation_looks_down_negative_z(small_camera):
    assert_vec_close(small_camera.forward, Vector3(0, 0, -1))
    assert_vec_close(small_camera.right, Vector3(1, 0, 0))
    assert_vec_close(small_camera.up, Vector3(0, 1, 0))


def test_center_ray_is_forward():
    camera = Camera(Vector3(1, 2, 3), 0.0, 0.0, math.radians(90), 100, 50)
    ray = camera.get_ray(0.5, 0.5)
    assert ray.origin == Vector3(1, 2, 3)
    assert_vec_close(ray.direction, Vector3(0, 0, -1))


def test_pixel_rays_are_unit_length(small_camera):
    for x, y in [(0, 0), (31, 23), (16, 12), (5, 20)]:
        assert small_camera.pixel_ray(x, y).direction.length() == pytest.approx(1.0)


def test_top_left_pixel_points_up_and_left(small_camera):
    d = small_camera.pixel_ray(0, 0).direction
    assert d.x < 0
    assert d.y > 0
    d = small_camera.pixel_ray(31, 23).direction
    assert d.x > 0
    assert d.y < 0


def test_field_of_view_edges():
    camera = Camera(Vector3(0, 0, 0), 0.0, 0.0, math.radians(90), 10, 10)
    top = camera.get_ray(0.5, 0.0).direction
    # 45 degrees above the forward axis
    assert top.dot(Vector3(0, 0, -1)) == pytest.approx(math.cos(math.radians(45)))


def test_look_at_targets_point():
    camera = Camera.look_at(Vector3(0, 5, 5), Vector3(0, 0, 0), math.radians(60), 20, 20)
    assert_vec_close(camera.forward, Vector3(0, -1, -1).normalize())
    assert_vec_close(camera.get_ray(0.5, 0.5).direction, Vector3(0, -1, -1).normalize())


def test_look_at_straight_down_has_valid_basis():
    camera = Camera.look_at(Vector3(0, 5, 0), Vector3(0, 0, 0), math.radians(60), 20, 20)
    assert camera.right.length() == pytest.approx(1.0)
    assert camera.up.length() == pytest.approx(1.0)
    assert camera.right.dot(camera.forward) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("width, height, fov", [
    (0, 10, math.radians(60)),
    (10, -1, math.radians(60)),
    (10, 10, 0.0),
    (10, 10, math.pi),
])
def test_invalid_parameters(width, height, fov):
    with pytest.raises(ValueError):
        Camera(Vector3(0, 0, 0), 0.0, 0.0, fov, width, height)
