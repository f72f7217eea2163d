"""Pytest configuration and shared fixtures."""

import math
import sys
from pathlib import Path

import pytest

# Add the source root to the path
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from camera.camera import Camera  # noqa: E402
from core.vector import Vector3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from materials.material import Material  # noqa: E402
from scene.light import PointLight  # noqa: E402
from scene.scene import Scene  # noqa: E402


def assert_vec_close(actual, expected, abs_tol=1e-6):
    assert actual.isclose(expected, abs_tol=abs_tol), f"{actual!r} != {expected!r}"


@pytest.fixture
def red_material():
    return Material(Vector3(1, 0, 0), Vector3(0.5, 0.5, 0.5), shininess=32)


@pytest.fixture
def red_sphere_scene(red_material):
    """One red sphere at (0,0,-5), one light at (5,5,0), black background."""
    return Scene(
        objects=[Sphere(Vector3(0, 0, -5), 1.0, red_material)],
        lights=[PointLight(Vector3(5, 5, 0), Vector3(1, 1, 1))],
        ambient=Vector3(0.1, 0.1, 0.1),
        background=Vector3(0, 0, 0),
    )


@pytest.fixture
def small_camera():
    return Camera(Vector3(0, 0, 0), 0.0, 0.0, math.radians(60), 32, 24)
