# geometry/plane.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable

# Rays this close to parallel with the plane never hit it.
PARALLEL_TOLERANCE = 1e-9

class Plane(Hittable):
    """
    An infinite plane through a point with the given normal.
    The normal is normalized on construction; which side it points to
    only matters for front_face, shading orients it towards the ray.
    """
    def __init__(self, point: Vector3, normal: Vector3, material):
        super().__init__(material)
        self.point = point
        self.normal = normal.normalize()

    def intersect(self, ray: Ray, t_min: float = EPSILON,
                  t_max: float = math.inf) -> Optional[float]:
        denom = ray.direction.dot(self.normal)
        if abs(denom) < PARALLEL_TOLERANCE:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if t <= t_min or t >= t_max:
            return None
        return t

    def normal_at(self, point: Vector3) -> Vector3:
        return self.normal

    def __repr__(self) -> str:
        return f"Plane(point={self.point!r}, normal={self.normal!r})"
