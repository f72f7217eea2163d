# renderer/framebuffer.py
import numpy as np
from core.vector import Vector3

class Framebuffer:
    """
    Row-major grid of linear RGB samples, shape (height, width, 3).
    Row 0 is the top of the image. Every pixel is written exactly once.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), dtype=np.float64)
        self.written = np.zeros((height, width), dtype=bool)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} framebuffer")

    def set_pixel(self, x: int, y: int, color: Vector3):
        self._check_bounds(x, y)
        if self.written[y, x]:
            raise RuntimeError(f"pixel ({x}, {y}) written twice")
        self.data[y, x] = (color.x, color.y, color.z)
        self.written[y, x] = True

    def get_pixel(self, x: int, y: int) -> Vector3:
        self._check_bounds(x, y)
        r, g, b = self.data[y, x]
        return Vector3(r, g, b)

    def write_rows(self, y0: int, rows: np.ndarray):
        """
        Stores a band of whole rows starting at row y0, as returned by a
        render worker.
        """
        y1 = y0 + rows.shape[0]
        if y0 < 0 or y1 > self.height or rows.shape[1:] != (self.width, 3):
            raise IndexError(f"row band {y0}:{y1} of shape {rows.shape} does not fit "
                             f"{self.width}x{self.height} framebuffer")
        if self.written[y0:y1].any():
            raise RuntimeError(f"rows {y0}:{y1} overlap already written pixels")
        self.data[y0:y1] = rows
        self.written[y0:y1] = True

    def is_complete(self) -> bool:
        return bool(self.written.all())

    def __repr__(self) -> str:
        return f"Framebuffer({self.width}x{self.height})"
