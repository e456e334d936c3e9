# renderer/frame.py
from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass
class Frame:
    """
    A finished 8-bit RGB image. `pixels` has shape (height, width, 3) and is
    stored top row first, i.e. already flipped from camera space.
    """
    width: int
    height: int
    pixels: np.ndarray

    @classmethod
    def black(cls, width: int, height: int) -> "Frame":
        return cls(width, height, np.zeros((height, width, 3), dtype=np.uint8))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def pixel(self, x: int, row: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[row, x]
        return (int(r), int(g), int(b))

    def to_bytes(self) -> bytes:
        """Row-major RGB byte triples, ready for texture upload."""
        return np.ascontiguousarray(self.pixels).tobytes()
