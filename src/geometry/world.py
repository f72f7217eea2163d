# src/geometry/world.py
import math
from typing import Iterator, List, Optional
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable, HitRecord

class HittableList:
    """
    An ordered list of primitives searched by brute force.
    Scenes are small; every query is a linear scan.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float = EPSILON,
            t_max: float = math.inf) -> Optional[HitRecord]:
        """
        Nearest hit along the ray. Only a strictly smaller t replaces the
        current candidate, so exact ties go to the earlier primitive.
        """
        closest_obj = None
        closest_so_far = t_max
        for obj in self.objects:
            t = obj.intersect(ray, t_min, closest_so_far)
            if t is not None and t < closest_so_far:
                closest_so_far = t
                closest_obj = obj
        if closest_obj is None:
            return None

        return closest_obj.record(ray, closest_so_far)

    def any_hit(self, ray: Ray, t_min: float = EPSILON,
                t_max: float = math.inf) -> bool:
        """
        True as soon as any primitive meets the ray inside (t_min, t_max).
        """
        for obj in self.objects:
            if obj.intersect(ray, t_min, t_max) is not None:
                return True
        return False
