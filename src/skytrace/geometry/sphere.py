# geometry/sphere.py
import math
from typing import Optional

from skytrace.core.ray import Ray
from skytrace.core.vector import Color3, Point3
from skytrace.errors import GeometryError
from skytrace.geometry.hittable import Hittable, HitRecord


def _check_color(color: Color3) -> Color3:
    for channel in color:
        if not 0.0 <= channel <= 1.0:
            raise ValueError(f"color channels must lie in [0, 1], got {color!r}")
    return color


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius and surface color.
    """
    def __init__(self, center: Point3, radius: float, color: Color3 = None):
        self.center = center
        self.radius = radius
        self.color = color if color is not None else Color3.splat(1.0)
        # Upper bound offered to the editor when resizing this sphere.
        self.max_radius = 2.0 * self.radius

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float):
        if not value > 0:
            raise GeometryError(f"sphere radius must be positive, got {value}")
        self._radius = float(value)

    @property
    def color(self) -> Color3:
        return self._color

    @color.setter
    def color(self, value: Color3):
        self._color = _check_color(value)

    @property
    def name(self) -> str:
        return f"Sphere at ({self.center.x}, {self.center.y}, {self.center.z})"

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.surface_color = self.color
        return rec

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, color={self.color!r})"
