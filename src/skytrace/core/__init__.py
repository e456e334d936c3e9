from skytrace.core.vector import Color3, Point3, Vector3
from skytrace.core.ray import Ray

__all__ = ["Vector3", "Point3", "Color3", "Ray"]
