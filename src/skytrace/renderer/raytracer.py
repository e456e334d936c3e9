# renderer/raytracer.py
import math
import random
import time
from typing import Callable, Optional

import numpy as np

from skytrace.camera.camera import Camera
from skytrace.core.ray import Ray
from skytrace.core.vector import Color3
from skytrace.geometry.hittable import Hittable
from skytrace.materials.lambertian import Lambertian
from skytrace.renderer.frame import Frame
from skytrace.renderer.params import RenderParams
from skytrace.renderer.tone_mapping import gamma_quantize
from skytrace.utils.logger import get_logger

logger = get_logger(__name__)

WHITE = Color3(1.0, 1.0, 1.0)
BLACK = Color3(0.0, 0.0, 0.0)
SKY_BLUE = Color3(0.5, 0.7, 1.0)

# Progress is reported this many times per frame.
PROGRESS_STEPS = 50

ProgressCallback = Callable[[float], None]


def sky_color(ray: Ray) -> Color3:
    """
    Vertical gradient from white at the horizon to sky blue overhead.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE.lerp(1.0 - t, SKY_BLUE)


class PathTracer:
    """
    CPU Monte-Carlo path tracer over a scene of diffuse primitives lit by the sky.
    """
    def __init__(self, params: RenderParams, rng: random.Random = None):
        self.params = params
        self.rng = rng if rng is not None else random.Random(params.seed)
        self.material = Lambertian()

    def ray_color(self, ray: Ray, world: Hittable, depth: int = 0) -> Color3:
        if depth > self.params.max_depth:
            return BLACK

        rec = world.hit(ray, self.params.min_ray_distance, math.inf)
        if rec is None:
            return sky_color(ray)

        scattered, attenuation = self.material.scatter(rec, self.rng)
        return self.ray_color(scattered, world, depth + 1) * attenuation

    def sample_pixel(self, camera: Camera, world: Hittable, x: int, y: int) -> Color3:
        """
        Sum of samples_per_pixel jittered samples for camera-space pixel (x, y).
        """
        rng = self.rng
        scale = camera.pixel_scale
        r = g = b = 0.0
        for _ in range(self.params.samples_per_pixel):
            u = (x + rng.random()) * scale
            v = (y + rng.random()) * scale
            color = self.ray_color(camera.cast_ray(u, v), world)
            r += color.x
            g += color.y
            b += color.z
        return Color3(r, g, b)

    def render(self, world: Hittable, progress: Optional[ProgressCallback] = None) -> Frame:
        """
        Renders one full frame. y=0 is the bottom of the viewport, so camera
        row y lands in image row height-1-y.
        """
        width = self.params.resolution.width
        height = self.params.resolution.height
        camera = Camera((width, height), self.params.focal_length)
        accumulated = np.zeros((height, width, 3), dtype=np.float64)
        progress_step = max(1, height // PROGRESS_STEPS)

        start = time.perf_counter()
        for y in range(height):
            row = accumulated[height - 1 - y]
            for x in range(width):
                row[x] = self.sample_pixel(camera, world, x, y).to_tuple()
            if progress is not None and y % progress_step == 0:
                progress(y / height)

        pixels = gamma_quantize(accumulated, self.params.samples_per_pixel)
        logger.debug("Rendered %dx%d at %d spp in %.2fs",
                     width, height, self.params.samples_per_pixel,
                     time.perf_counter() - start)
        return Frame(width, height, pixels)
