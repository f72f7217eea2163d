# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from camera.camera import Camera
from core.ray import Ray
from core.utils import EPSILON, clamp_color, offset_origin, reflect
from core.vector import Vector3
from geometry.hittable import HitRecord
from renderer.framebuffer import Framebuffer
from scene.scene import Scene

logger = logging.getLogger(__name__)

# Default bound on mirror recursion. Reflective surfaces hit at this depth
# only contribute their local shading.
MAX_DEPTH = 5

# Row bands handed to each worker process; more bands balance uneven rows.
BANDS_PER_WORKER = 4

QUALITY_LEVELS = {
    "draft": {"max_depth": 1},
    "balanced": {"max_depth": 3},
    "high": {"max_depth": MAX_DEPTH},
}

class RenderSettings:
    """Per-render knobs: recursion bound, self-intersection epsilon, worker count."""
    def __init__(self, max_depth: int = MAX_DEPTH, epsilon: float = EPSILON, workers: int = 1):
        for name, value in (("max_depth", max_depth), ("workers", workers)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if isinstance(epsilon, bool) or not isinstance(epsilon, (int, float)) or not math.isfinite(epsilon):
            raise ValueError(f"epsilon must be a finite number, got {epsilon!r}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.max_depth = max_depth
        self.epsilon = epsilon
        self.workers = workers

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        try:
            params = dict(QUALITY_LEVELS[quality])
        except KeyError:
            raise ValueError(f"unknown quality level {quality!r}, "
                             f"expected one of {sorted(QUALITY_LEVELS)}") from None
        params.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**params)

    def __repr__(self) -> str:
        return (f"RenderSettings(max_depth={self.max_depth}, epsilon={self.epsilon}, "
                f"workers={self.workers})")

class Renderer:
    """
    Whitted-style ray tracer: one primary ray per pixel, Phong shading with
    shadow rays, and mirror reflection traced recursively up to
    settings.max_depth.

    Scene, camera and settings are only read, so pixels can be traced in
    any order and in separate processes.
    """
    def __init__(self, scene: Scene, camera: Camera, settings: Optional[RenderSettings] = None):
        self.scene = scene
        self.camera = camera
        self.settings = settings if settings is not None else RenderSettings()

    @property
    def width(self) -> int:
        return self.camera.width

    @property
    def height(self) -> int:
        return self.camera.height

    def render(self) -> Framebuffer:
        """Traces every pixel and returns the filled framebuffer."""
        logger.info("Rendering %dx%d, %d objects, %d lights, max depth %d, %d worker(s)",
                    self.width, self.height, len(self.scene.objects),
                    len(self.scene.lights), self.settings.max_depth, self.settings.workers)
        start = time.perf_counter()

        framebuffer = Framebuffer(self.width, self.height)
        if self.settings.workers == 1:
            for y in range(self.height):
                for x in range(self.width):
                    framebuffer.set_pixel(x, y, self.render_pixel(x, y))
        else:
            self._render_parallel(framebuffer)

        logger.info("Rendered %dx%d in %.2fs", self.width, self.height,
                    time.perf_counter() - start)
        return framebuffer

    def _render_parallel(self, framebuffer: Framebuffer):
        bands = split_rows(self.height, self.settings.workers * BANDS_PER_WORKER)
        with ProcessPoolExecutor(max_workers=self.settings.workers) as executor:
            futures = [(y0, executor.submit(self.render_rows, y0, y1)) for y0, y1 in bands]
            # Bands are disjoint; the parent is the only writer.
            for y0, future in futures:
                rows = future.result()
                framebuffer.write_rows(y0, rows)
                logger.debug("Band starting at row %d done (%d rows)", y0, rows.shape[0])

    def render_rows(self, y0: int, y1: int) -> np.ndarray:
        """Returns the finalized colors of rows y0..y1-1 as a (rows, width, 3) array."""
        band = np.zeros((y1 - y0, self.width, 3), dtype=np.float64)
        for y in range(y0, y1):
            for x in range(self.width):
                c = self.render_pixel(x, y)
                band[y - y0, x] = (c.x, c.y, c.z)
        return band

    def render_pixel(self, x: int, y: int) -> Vector3:
        """Final, clamped color of pixel (x, y)."""
        return clamp_color(self.trace(self.camera.pixel_ray(x, y)))

    def trace(self, ray: Ray, depth: int = 0) -> Vector3:
        """
        Unclamped color seen along ray. depth counts the mirror bounces
        already taken to reach this ray.
        """
        eps = self.settings.epsilon
        rec = self.scene.find_nearest(ray, eps)
        if rec is None:
            return self.scene.background

        local = self.shade(ray, rec)
        material = rec.material
        if not material.is_reflective or depth >= self.settings.max_depth:
            return local

        reflected = self.reflected_ray(ray, rec)
        reflected_color = self.trace(reflected, depth + 1)
        k = material.reflectivity
        return local * (1.0 - k) + reflected_color * k

    def reflected_ray(self, ray: Ray, rec: HitRecord) -> Ray:
        direction = reflect(ray.direction, rec.normal).normalize()
        return Ray(offset_origin(rec.p, rec.normal, self.settings.epsilon), direction)

    def shade(self, ray: Ray, rec: HitRecord) -> Vector3:
        """
        Phong local illumination at a hit: ambient plus the diffuse and
        specular terms of every light that is not in shadow.
        """
        material = rec.material
        color = material.ambient(self.scene.ambient)
        view_dir = -ray.direction.normalize()
        shadow_origin = offset_origin(rec.p, rec.normal, self.settings.epsilon)

        for light in self.scene.lights:
            to_light = light.position - rec.p
            if to_light.is_zero():
                continue
            light_dir = to_light.normalize()
            n_dot_l = rec.normal.dot(light_dir)
            if n_dot_l <= 0:
                continue
            if self.scene.is_occluded(shadow_origin, light.position, self.settings.epsilon):
                continue
            diffuse, specular = phong_terms(rec.normal, light_dir, view_dir,
                                            material.shininess)
            color = color + material.diffuse * light.color * diffuse
            color = color + material.specular * light.color * specular
        return color

def phong_terms(normal: Vector3, light_dir: Vector3, view_dir: Vector3,
                shininess: float) -> Tuple[float, float]:
    """
    Scalar diffuse and specular factors for unit normal, light and view
    directions (both pointing away from the surface).
    """
    diffuse = max(0.0, normal.dot(light_dir))
    if diffuse == 0.0:
        return 0.0, 0.0
    r_dot_v = max(0.0, reflect(-light_dir, normal).dot(view_dir))
    specular = r_dot_v ** shininess if r_dot_v > 0.0 else 0.0
    return diffuse, specular

def split_rows(height: int, bands: int) -> List[Tuple[int, int]]:
    """Splits 0..height into at most `bands` contiguous, disjoint row ranges."""
    bands = max(1, min(bands, height))
    size = math.ceil(height / bands)
    return [(y0, min(y0 + size, height)) for y0 in range(0, height, size)]
