# materials/material.py
from typing import Optional
from core.vector import Vector3

class Material:
    """
    Phong surface description.

    diffuse      -- Lambertian color, also tints the scene ambient term
    specular     -- color of the highlight
    shininess    -- Phong exponent, non-negative
    reflectivity -- share of the outgoing color taken from the mirror ray, in [0, 1]
    """
    def __init__(self, diffuse: Vector3, specular: Optional[Vector3] = None,
                 shininess: float = 32.0, reflectivity: float = 0.0):
        if shininess < 0:
            raise ValueError(f"shininess must be non-negative, got {shininess}")
        if not 0.0 <= reflectivity <= 1.0:
            raise ValueError(f"reflectivity must be in [0, 1], got {reflectivity}")
        self.diffuse = diffuse
        self.specular = specular if specular is not None else Vector3(0, 0, 0)
        self.shininess = float(shininess)
        self.reflectivity = float(reflectivity)

    @property
    def is_reflective(self) -> bool:
        return self.reflectivity > 0.0

    def ambient(self, ambient_light: Vector3) -> Vector3:
        return self.diffuse * ambient_light

    def __repr__(self) -> str:
        return (f"Material(diffuse={self.diffuse!r}, specular={self.specular!r}, "
                f"shininess={self.shininess}, reflectivity={self.reflectivity})")
