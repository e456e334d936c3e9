# core/ray.py
from skytrace.core.vector import Point3, Vector3
from skytrace.errors import GeometryError


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is not required to be unit length.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        if direction.length_squared() == 0:
            raise GeometryError("ray direction must have non-zero length")
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
