# renderer/ppm.py
import logging
import os
from typing import Optional

import numpy as np
from PIL import Image

from renderer.framebuffer import Framebuffer
from renderer.tone_mapping import MAX_CHANNEL_VALUE, gamma_correct, quantize

logger = logging.getLogger(__name__)

def encode_ppm(framebuffer: Framebuffer, binary: bool = True,
               gamma: Optional[float] = None) -> bytes:
    """
    Encodes the framebuffer as a PPM image.

    binary=True gives P6 (raw byte triples), otherwise P3 with one
    "r g b" line per pixel. Pixels are written row by row from the top.
    """
    pixels = _to_bytes(framebuffer.data, gamma)
    header = f"{'P6' if binary else 'P3'}\n{framebuffer.width} {framebuffer.height}\n{MAX_CHANNEL_VALUE}\n"
    if binary:
        return header.encode("ascii") + pixels.tobytes()
    lines = [f"{r} {g} {b}" for r, g, b in pixels.reshape(-1, 3).tolist()]
    return (header + "\n".join(lines) + "\n").encode("ascii")

def write_ppm(framebuffer: Framebuffer, path: str, binary: bool = True,
              gamma: Optional[float] = None) -> None:
    with open(path, "wb") as f:
        f.write(encode_ppm(framebuffer, binary=binary, gamma=gamma))
    logger.info("Wrote %s (%dx%d, %s)", path, framebuffer.width, framebuffer.height,
                "P6" if binary else "P3")

def save_image(framebuffer: Framebuffer, path: str, binary: bool = True,
               gamma: Optional[float] = None) -> None:
    """
    Writes .ppm files with the PPM encoder and every other extension
    through Pillow (PNG, BMP, ...).
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        write_ppm(framebuffer, path, binary=binary, gamma=gamma)
        return
    image = Image.fromarray(_to_bytes(framebuffer.data, gamma))
    image.save(path)
    logger.info("Wrote %s (%dx%d)", path, framebuffer.width, framebuffer.height)

def gradient_framebuffer(width: int, height: int) -> Framebuffer:
    """
    Test pattern: red grows left to right, green top to bottom.
    """
    framebuffer = Framebuffer(width, height)
    xs = np.arange(width, dtype=np.float64) / width
    ys = np.arange(height, dtype=np.float64) / height
    rows = np.zeros((height, width, 3), dtype=np.float64)
    rows[:, :, 0] = xs[np.newaxis, :]
    rows[:, :, 1] = ys[:, np.newaxis]
    framebuffer.write_rows(0, rows)
    return framebuffer

def _to_bytes(linear_image: np.ndarray, gamma: Optional[float]) -> np.ndarray:
    if gamma is not None:
        linear_image = gamma_correct(linear_image, gamma)
    return quantize(linear_image)
