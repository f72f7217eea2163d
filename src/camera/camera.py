# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera. yaw=0, pitch=0 looks down -z with +y up.
    Pixel (0, 0) is the top-left corner of the image.
    """
    def __init__(self, position: Vector3, yaw: float, pitch: float,
                 fov: float, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"image resolution must be positive, got {width}x{height}")
        if not 0.0 < fov < math.pi:
            raise ValueError(f"fov must be in (0, pi) radians, got {fov}")
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov
        self.width = width
        self.height = height
        self.aspect_ratio = width / height
        self.update_camera()

    @classmethod
    def look_at(cls, position: Vector3, target: Vector3, fov: float,
                width: int, height: int) -> "Camera":
        """Builds a camera at position aimed at target."""
        d = (target - position).normalize()
        if d.is_zero():
            raise ValueError("camera target must differ from its position")
        pitch = math.asin(max(-1.0, min(1.0, d.y)))
        yaw = math.atan2(d.x, -d.z)
        return cls(position, yaw, pitch, fov, width, height)

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        global_up = Vector3(0, 1, 0)

        # Compute forward vector
        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch)
        ).normalize()

        # Looking straight up or down leaves right undefined against global up
        right = self.forward.cross(global_up)
        if right.is_zero():
            right = Vector3(math.cos(self.yaw), 0, math.sin(self.yaw))
        self.right = right.normalize()
        self.up = self.right.cross(self.forward).normalize()

        # Compute viewport dimensions on the plane one unit ahead
        viewport_height = 2.0 * math.tan(self.fov / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.horizontal = self.right * viewport_width
        self.vertical = self.up * viewport_height

        self.upper_left_corner = (self.forward -
                                  self.horizontal * 0.5 +
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Ray through viewport coordinates u (0 left .. 1 right) and
        v (0 top .. 1 bottom). The direction is unit length.
        """
        direction = (self.upper_left_corner +
                     self.horizontal * u -
                     self.vertical * v)
        return Ray(self.position, direction.normalize())

    def pixel_ray(self, x: int, y: int) -> Ray:
        """Primary ray through the center of pixel (x, y)."""
        return self.get_ray((x + 0.5) / self.width, (y + 0.5) / self.height)

    def __repr__(self) -> str:
        return (f"Camera(position={self.position!r}, yaw={self.yaw}, pitch={self.pitch}, "
                f"fov={self.fov}, {self.width}x{self.height})")
