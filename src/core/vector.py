# core/vector.py
import math

# Below this length a vector has no usable direction.
ZERO_LENGTH = 1e-12

class Vector3:
    """
    A 3D vector used for points, directions and linear RGB colors.
    Supports arithmetic, dot and cross products, and normalization.
    Multiplying two vectors is component-wise (color modulation).
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector with the same direction.
        A (near) zero-length vector has no direction; the zero vector is
        returned for it instead of raising.
        """
        l = self.length()
        if l < ZERO_LENGTH:
            return Vector3(0, 0, 0)
        return self / l

    def is_zero(self) -> bool:
        return self.length() < ZERO_LENGTH

    def isclose(self, other: "Vector3", abs_tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=abs_tol) and
                math.isclose(self.y, other.y, abs_tol=abs_tol) and
                math.isclose(self.z, other.z, abs_tol=abs_tol))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
