# geometry/triangle.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable

class Triangle(Hittable):
    """Represents a single flat triangle; counter-clockwise winding is the front."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material):
        super().__init__(material)
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.edge1 = v1 - v0
        self.edge2 = v2 - v0
        self.normal = self.edge1.cross(self.edge2).normalize()

    def intersect(self, ray: Ray, t_min: float = EPSILON,
                  t_max: float = math.inf) -> Optional[float]:
        # Möller–Trumbore intersection algorithm
        h = ray.direction.cross(self.edge2)
        a = self.edge1.dot(h)

        # If ray is parallel to triangle
        if abs(a) < 1e-9:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.edge2.dot(q)
        if t <= t_min or t >= t_max:
            return None
        return t

    def normal_at(self, point: Vector3) -> Vector3:
        return self.normal

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"
