# core/utils.py
from core.vector import Vector3

# Minimum ray parameter accepted as a hit, and the offset applied to
# secondary ray origins. Tuned against shadow acne, not a physical constant.
EPSILON = 1e-4

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, x))

def clamp_color(c: Vector3) -> Vector3:
    """
    Clamps every channel of a linear color to [0, 1].
    """
    return Vector3(clamp(c.x), clamp(c.y), clamp(c.z))

def offset_origin(p: Vector3, n: Vector3, epsilon: float = EPSILON) -> Vector3:
    """
    Moves a surface point off the surface along its normal so that
    secondary rays do not re-hit the surface they start from.
    """
    return p + n * epsilon
