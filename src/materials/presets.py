# materials/presets.py
from core.vector import Vector3
from materials.material import Material

class ColorPresets:
    """Common colors and simple material factories."""

    RED = Vector3(0.9, 0.1, 0.1)
    GREEN = Vector3(0.1, 0.8, 0.1)
    BLUE = Vector3(0.1, 0.2, 0.9)
    YELLOW = Vector3(0.9, 0.8, 0.1)
    WHITE = Vector3(1.0, 1.0, 1.0)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Vector3) -> Material:
        return Material(color, Vector3(0.05, 0.05, 0.05), shininess=4.0)

    @staticmethod
    def plastic(color: Vector3) -> Material:
        return Material(color, Vector3(0.5, 0.5, 0.5), shininess=64.0)

class MetalPresets:
    """Mirror-like materials."""

    @staticmethod
    def mirror() -> Material:
        return Material(Vector3(0.0, 0.0, 0.0), Vector3(0.8, 0.8, 0.8),
                        shininess=256.0, reflectivity=1.0)

    @staticmethod
    def chrome() -> Material:
        return Material(Vector3(0.2, 0.2, 0.2), Vector3(0.9, 0.9, 0.9),
                        shininess=128.0, reflectivity=0.8)

    @staticmethod
    def gold() -> Material:
        return Material(Vector3(0.75, 0.6, 0.2), Vector3(1.0, 0.85, 0.55),
                        shininess=96.0, reflectivity=0.4)

# Names accepted as a material in scene files.
MATERIAL_PRESETS = {
    "red": lambda: ColorPresets.plastic(ColorPresets.RED),
    "green": lambda: ColorPresets.plastic(ColorPresets.GREEN),
    "blue": lambda: ColorPresets.plastic(ColorPresets.BLUE),
    "yellow": lambda: ColorPresets.plastic(ColorPresets.YELLOW),
    "white": lambda: ColorPresets.matte(ColorPresets.WHITE),
    "gray": lambda: ColorPresets.matte(ColorPresets.GRAY),
    "mirror": MetalPresets.mirror,
    "chrome": MetalPresets.chrome,
    "gold": MetalPresets.gold,
}

def material_preset(name: str) -> Material:
    try:
        return MATERIAL_PRESETS[name]()
    except KeyError:
        raise KeyError(f"unknown material preset {name!r}") from None
