# renderer/resolution.py
from dataclasses import dataclass
from typing import List, Tuple

BASE_RESOLUTIONS = ((1600, 1200), (1920, 1080))
SCALE_EXPONENTS = range(-2, 3)


@dataclass(frozen=True)
class Resolution:
    width: int
    height: int

    def __mul__(self, factor: float) -> "Resolution":
        return Resolution(int(self.width * factor), int(self.height * factor))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    def to_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def parse(cls, text: str) -> "Resolution":
        """Parses "WIDTHxHEIGHT", e.g. "400x300"."""
        try:
            width, height = text.lower().split("x")
            return cls(int(width), int(height))
        except ValueError:
            raise ValueError(f"invalid resolution {text!r}, expected WIDTHxHEIGHT") from None

    @staticmethod
    def available() -> List["Resolution"]:
        """
        The fixed catalog: both base resolutions scaled by 1/4 .. 4,
        sorted by width ascending.
        """
        resolutions = []
        for exponent in SCALE_EXPONENTS:
            multiplier = 2.0 ** exponent
            for width, height in BASE_RESOLUTIONS:
                resolutions.append(Resolution(width, height) * multiplier)
        resolutions.sort(key=lambda r: r.width)
        return resolutions
