# geometry/scene.py
import copy
from typing import Iterator, List, Optional

from skytrace.core.ray import Ray
from skytrace.core.vector import Color3, Point3
from skytrace.geometry.hittable import Hittable, HitRecord
from skytrace.geometry.sphere import Sphere


class Scene(Hittable):
    """
    An ordered collection of primitives resolved to the globally nearest hit.
    Members are restricted to the known variants (spheres and nested scenes)
    so callers never have to guess what an object is.
    """
    def __init__(self, objects=None):
        self.objects: List[Hittable] = []
        for obj in objects or ():
            self.add(obj)

    @classmethod
    def default(cls) -> "Scene":
        return cls([
            Sphere(Point3(0.0, 0.0, -1.0), 0.5, Color3.splat(1.0)),
            Sphere(Point3(0.0, -100.5, -1.0), 100.0, Color3.splat(1.0)),
        ])

    def add(self, obj: Hittable):
        if not isinstance(obj, SCENE_OBJECT_TYPES):
            raise TypeError(f"unsupported scene object: {type(obj).__name__}")
        if obj is self:
            raise ValueError("a scene cannot contain itself")
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def snapshot(self) -> "Scene":
        """Deep copy handed to the render worker; later edits do not leak into it."""
        return copy.deepcopy(self)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    @property
    def name(self) -> str:
        return "scene"

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record


SCENE_OBJECT_TYPES = (Sphere, Scene)
