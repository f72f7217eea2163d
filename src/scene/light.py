# scene/light.py
from core.vector import Vector3

class PointLight:
    """
    A point light. Color channels are linear and may exceed 1.
    """
    __slots__ = ("position", "color")

    def __init__(self, position: Vector3, color: Vector3):
        self.position = position
        self.color = color

    def __repr__(self) -> str:
        return f"PointLight(position={self.position!r}, color={self.color!r})"
