from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.triangle import Triangle
from geometry.world import HittableList

# The closed set of primitive kinds, keyed by the name used in scene files.
PRIMITIVE_TYPES = {
    "sphere": Sphere,
    "plane": Plane,
    "triangle": Triangle,
}

__all__ = [
    "Hittable", "HitRecord", "Sphere", "Plane", "Triangle",
    "HittableList", "PRIMITIVE_TYPES",
]
