# scene/scene.py
import math
from typing import Iterable, List, Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList
from scene.light import PointLight

class Scene:
    """
    Primitives, point lights, the ambient light and the background color.
    A scene is treated as read-only while it is being rendered.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None,
                 lights: Optional[Iterable[PointLight]] = None,
                 ambient: Optional[Vector3] = None,
                 background: Optional[Vector3] = None):
        self.world = HittableList(objects)
        self.lights: List[PointLight] = list(lights) if lights else []
        self.ambient = ambient if ambient is not None else Vector3(0.1, 0.1, 0.1)
        self.background = background if background is not None else Vector3(0, 0, 0)

    def add(self, obj: Hittable):
        self.world.add(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    @property
    def objects(self) -> List[Hittable]:
        return self.world.objects

    def find_nearest(self, ray: Ray, t_min: float = EPSILON,
                     t_max: float = math.inf) -> Optional[HitRecord]:
        return self.world.hit(ray, t_min, t_max)

    def is_occluded(self, origin: Vector3, target: Vector3,
                    epsilon: float = EPSILON) -> bool:
        """
        True if a primitive lies on the segment from origin to target,
        ignoring hits within epsilon of origin.
        """
        to_target = target - origin
        distance = to_target.length()
        if distance <= epsilon:
            return False
        shadow_ray = Ray(origin, to_target / distance)
        return self.world.any_hit(shadow_ray, epsilon, distance)

    def __repr__(self) -> str:
        return f"Scene({len(self.world)} objects, {len(self.lights)} lights)"
