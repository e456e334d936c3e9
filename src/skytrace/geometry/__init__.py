from skytrace.geometry.hittable import HitRecord, Hittable
from skytrace.geometry.sphere import Sphere
from skytrace.geometry.scene import Scene

__all__ = ["HitRecord", "Hittable", "Sphere", "Scene"]
