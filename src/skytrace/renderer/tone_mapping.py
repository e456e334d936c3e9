# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit

ALMOST_256 = 255.999


@njit
def quantize_channel(value, scale):
    """
    Gamma-2 tone map one accumulated channel to an 8-bit value.
    """
    c = value * scale
    if c > 0.0:
        c = math.sqrt(c)
    else:
        c = 0.0
    if c > 1.0:
        c = 1.0
    # c >= 0 here, so truncation is floor
    q = int(c * ALMOST_256 + 0.5)
    if q > 255:
        q = 255
    return q


@njit
def gamma_quantize_kernel(accumulated, samples, output):
    height = accumulated.shape[0]
    width = accumulated.shape[1]
    if samples <= 0:
        # Nothing was sampled: black frame.
        for y in range(height):
            for x in range(width):
                for ch in range(3):
                    output[y, x, ch] = 0
        return
    scale = 1.0 / samples
    for y in range(height):
        for x in range(width):
            for ch in range(3):
                output[y, x, ch] = quantize_channel(accumulated[y, x, ch], scale)


def gamma_quantize(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Convert a (height, width, 3) radiance accumulation buffer holding the sum
    of `samples` samples per pixel into an 8-bit RGB image.
    """
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.empty(accumulated.shape, dtype=np.uint8)
    gamma_quantize_kernel(accumulated, int(samples), output)
    return output
