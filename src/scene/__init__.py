from scene.light import PointLight
from scene.scene import Scene

__all__ = ["PointLight", "Scene"]
