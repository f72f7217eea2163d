# geometry/hittable.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "obj")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None, obj = None):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal at intersection
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the front side
        self.material = material
        self.obj = obj          # Primitive that was hit

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"

class Hittable:
    """
    Base class for primitives that can be hit by a ray.

    Subclasses implement intersect() and normal_at(); hit() combines
    them into a HitRecord. The set of primitive kinds is closed, see
    PRIMITIVE_TYPES in geometry/__init__.py.
    """
    def __init__(self, material):
        self.material = material

    def intersect(self, ray: Ray, t_min: float = EPSILON,
                  t_max: float = math.inf) -> Optional[float]:
        """
        Returns the smallest t with t_min < t < t_max at which the ray meets
        the surface, or None.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal_at(self, point: Vector3) -> Vector3:
        """
        Returns the unit outward normal at a point on the surface.
        """
        raise NotImplementedError("normal_at() must be implemented by subclasses.")

    def hit(self, ray: Ray, t_min: float = EPSILON,
            t_max: float = math.inf) -> Optional[HitRecord]:
        t = self.intersect(ray, t_min, t_max)
        if t is None:
            return None
        return self.record(ray, t)

    def record(self, ray: Ray, t: float) -> HitRecord:
        """
        Builds the HitRecord for a ray parameter already known to hit.
        """
        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self.normal_at(rec.p))
        rec.material = self.material
        rec.obj = self
        return rec
