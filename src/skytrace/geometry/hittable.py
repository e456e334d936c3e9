# geometry/hittable.py
from typing import Optional

from skytrace.core.ray import Ray
from skytrace.core.vector import Color3, Point3, Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "surface_color")

    def __init__(self, p: Point3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True, surface_color: Color3 = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, always facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face
        self.surface_color = surface_color

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    @property
    def name(self) -> str:
        return type(self).__name__.lower()
