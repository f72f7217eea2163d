# renderer/tone_mapping.py
import numpy as np
from numba import njit

MAX_CHANNEL_VALUE = 255

@njit
def quantize_kernel(linear_image, output_image, max_value):
    """
    Clamps each linear channel to [0, 1] and scales it to 0..max_value,
    truncating toward zero.
    """
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = linear_image[y, x, c]
                # NaN fails both comparisons and ends up black
                if not v > 0.0:
                    v = 0.0
                elif v > 1.0:
                    v = 1.0
                output_image[y, x, c] = int(v * max_value)

def quantize(linear_image: np.ndarray, max_value: int = MAX_CHANNEL_VALUE) -> np.ndarray:
    """
    Converts a (height, width, 3) linear image to 8-bit channels.
    """
    if not 0 < max_value <= 255:
        raise ValueError(f"max_value must be in 1..255, got {max_value}")
    linear = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.zeros(linear.shape, dtype=np.uint8)
    quantize_kernel(linear, output, max_value)
    return output

def gamma_correct(linear_image: np.ndarray, gamma: float = 2.2) -> np.ndarray:
    """
    Optional display transfer applied before quantization.
    """
    return np.clip(linear_image, 0.0, 1.0) ** (1.0 / gamma)
