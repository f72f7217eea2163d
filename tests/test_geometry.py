"""Tests for primitive intersection, normals and nearest-hit search."""

import pytest

from conftest import assert_vec_close
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Vector3
from geometry import PRIMITIVE_TYPES
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import HittableList
from materials.material import Material


@pytest.fixture
def material():
    return Material(Vector3(0.5, 0.5, 0.5))


class TestSphere:

    @pytest.mark.parametrize("center, radius, origin", [
        (Vector3(0, 0, -5), 1.0, Vector3(0, 0, 0)),
        (Vector3(3, -2, 7), 0.5, Vector3(-1, 4, 2)),
        (Vector3(10, 10, 10), 3.0, Vector3(0, 0, 0)),
    ])
    def test_ray_at_center_hits_at_distance_minus_radius(self, material, center, radius, origin):
        sphere = Sphere(center, radius, material)
        to_center = center - origin
        ray = Ray(origin, to_center.normalize())

        t = sphere.intersect(ray)
        assert t == pytest.approx(to_center.length() - radius)

        p = ray.at(t)
        n = sphere.normal_at(p)
        assert n.length() == pytest.approx(1.0)
        assert n.cross(p - center).length() == pytest.approx(0.0, abs=1e-9)
        assert n.dot(p - center) > 0

    def test_miss(self, material):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, material)
        assert sphere.intersect(Ray(Vector3(0, 2, 0), Vector3(0, 0, -1))) is None

    def test_sphere_behind_ray(self, material):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, material)
        assert sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))) is None

    def test_origin_inside_returns_far_root(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 2.0, material)
        assert sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))) == pytest.approx(2.0)

    def test_root_on_surface_is_ignored(self, material):
        sphere = Sphere(Vector3(0, 0, -1), 1.0, material)
        # Starts on the surface heading inward: the t=0 root is below epsilon.
        t = sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)))
        assert t == pytest.approx(2.0)

    def test_tangent_ray(self, material):
        sphere = Sphere(Vector3(0, 1, -5), 1.0, material)
        t = sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)))
        assert t == pytest.approx(5.0)

    def test_hit_record_faces_ray(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 2.0, material)
        rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)))
        assert not rec.front_face
        assert_vec_close(rec.normal, Vector3(-1, 0, 0))
        assert rec.material is material
        assert rec.obj is sphere


class TestPlane:

    def test_hit_from_above(self, material):
        plane = Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), material)
        ray = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        assert plane.intersect(ray) == pytest.approx(2.0)

    def test_parallel_ray_misses(self, material):
        plane = Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), material)
        assert plane.intersect(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))) is None

    def test_plane_behind_ray(self, material):
        plane = Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), material)
        assert plane.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))) is None

    def test_stored_normal_is_normalized(self, material):
        plane = Plane(Vector3(0, 0, 0), Vector3(0, 5, 0), material)
        assert plane.normal_at(Vector3(3, 0, 7)) == Vector3(0, 1, 0)

    def test_normal_flips_towards_ray_from_below(self, material):
        plane = Plane(Vector3(0, 0, 0), Vector3(0, 1, 0), material)
        rec = plane.hit(Ray(Vector3(0, -2, 0), Vector3(0, 1, 0)))
        assert rec.t == pytest.approx(2.0)
        assert not rec.front_face
        assert_vec_close(rec.normal, Vector3(0, -1, 0))


class TestTriangle:

    @pytest.fixture
    def triangle(self, material):
        return Triangle(Vector3(-1, -1, -3), Vector3(1, -1, -3), Vector3(0, 1, -3), material)

    def test_hit_inside(self, triangle):
        t = triangle.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)))
        assert t == pytest.approx(3.0)

    def test_miss_outside_edges(self, triangle):
        assert triangle.intersect(Ray(Vector3(2, 0, 0), Vector3(0, 0, -1))) is None

    def test_parallel_miss(self, triangle):
        assert triangle.intersect(Ray(Vector3(0, 0, -3), Vector3(1, 0, 0))) is None

    def test_normal_follows_winding(self, triangle):
        assert_vec_close(triangle.normal_at(Vector3(0, 0, -3)), Vector3(0, 0, 1))


class TestHittableList:

    def test_nearest_of_several(self, material):
        near = Sphere(Vector3(0, 0, -3), 1.0, material)
        far = Sphere(Vector3(0, 0, -10), 1.0, material)
        world = HittableList([far, near])
        rec = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)))
        assert rec.obj is near
        assert rec.t == pytest.approx(2.0)

    def test_exact_tie_keeps_first(self, material):
        first = Plane(Vector3(0, 0, -2), Vector3(0, 0, 1), material)
        second = Plane(Vector3(0, 0, -2), Vector3(0, 0, 1), material)
        world = HittableList([first, second])
        assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))).obj is first

    def test_empty_world(self):
        world = HittableList()
        assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))) is None
        assert not world.any_hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)))

    def test_any_hit_respects_t_max(self, material):
        world = HittableList([Sphere(Vector3(0, 0, -5), 1.0, material)])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert world.any_hit(ray, EPSILON, 10.0)
        assert not world.any_hit(ray, EPSILON, 3.0)

    def test_world_hit_matches_primitive_hit(self, material):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, material)
        world = HittableList([Plane(Vector3(0, 0, -20), Vector3(0, 0, 1), material), sphere])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        from_world = world.hit(ray)
        from_sphere = sphere.hit(ray)
        assert from_world.obj is sphere
        assert from_world.t == from_sphere.t
        assert from_world.p == from_sphere.p
        assert from_world.normal == from_sphere.normal
        assert from_world.front_face == from_sphere.front_face
        assert from_world.material is material


def test_primitive_types_are_closed():
    assert set(PRIMITIVE_TYPES) == {"sphere", "plane", "triangle"}
