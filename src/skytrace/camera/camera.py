# camera/camera.py
from typing import Tuple

from skytrace.core.ray import Ray
from skytrace.core.vector import Point3, Vector3
from skytrace.errors import GeometryError

VIEWPORT_HEIGHT = 2.0


class Camera:
    """
    Fixed pinhole camera at the origin looking down -z. The viewport is
    derived from the image aspect ratio and the focal length; a camera is
    built fresh for every frame and never mutated afterwards.
    """
    def __init__(self, image_size: Tuple[int, int], focal_length: float):
        image_width, image_height = image_size
        if image_width <= 0 or image_height <= 0:
            raise GeometryError(f"image size must be positive, got {image_width}x{image_height}")
        self.image_width = image_width
        self.image_height = image_height
        self.aspect_ratio = image_width / image_height
        self.focal_length = focal_length

        self.viewport_height = VIEWPORT_HEIGHT
        self.viewport_width = self.aspect_ratio * self.viewport_height
        self.origin = Point3(0.0, 0.0, 0.0)
        self.lower_left_corner = Vector3(
            self.origin.x - self.viewport_width / 2.0,
            self.origin.y - self.viewport_height / 2.0,
            self.origin.z - focal_length
        )

    @property
    def pixel_scale(self) -> float:
        """Viewport units per pixel, identical on both axes."""
        return self.viewport_width / self.image_width

    def cast_ray(self, u: float, v: float) -> Ray:
        """
        Returns the ray through viewport offset (u, v), measured from the
        lower-left corner in viewport units.
        """
        direction = self.lower_left_corner + Vector3(u, v, 0.0) - self.origin
        return Ray(self.origin, direction)
