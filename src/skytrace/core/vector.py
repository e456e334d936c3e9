# core/vector.py
import math
from typing import Iterator, Tuple

from skytrace.errors import GeometryError

NEAR_ZERO = 1e-8


class Vector3:
    """
    A 3D double-precision vector supporting componentwise arithmetic,
    dot and cross products, normalization and linear interpolation.
    Instances are treated as values: every operator returns a new vector.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def splat(cls, value: float) -> "Vector3":
        return cls(value, value, value)

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

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

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
        return math.sqrt(self.length_squared())

    def near_zero(self) -> bool:
        return abs(self.x) < NEAR_ZERO and abs(self.y) < NEAR_ZERO and abs(self.z) < NEAR_ZERO

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            raise GeometryError("cannot normalize a zero-length vector")
        return self / l

    def lerp(self, alpha: float, other: "Vector3") -> "Vector3":
        """
        Returns self * alpha + other * (1 - alpha).
        """
        beta = 1.0 - alpha
        return Vector3(
            self.x * alpha + other.x * beta,
            self.y * alpha + other.y * beta,
            self.z * alpha + other.z * beta
        )

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


Point3 = Vector3
Color3 = Vector3
