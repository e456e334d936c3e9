# materials/lambertian.py
import random
from typing import Tuple

from skytrace.core.ray import Ray
from skytrace.core.utils import random_unit_vector
from skytrace.core.vector import Color3
from skytrace.geometry.hittable import HitRecord

# Fraction of incoming light reflected per bounce, before the surface tint.
ALBEDO = 0.5


class Lambertian:
    """
    Ideal diffuse scattering: bounce around the normal, attenuate by a fixed
    albedo compounded with the surface color of whatever was hit.
    """

    def __init__(self, albedo: float = ALBEDO):
        self.albedo = albedo

    def scatter(self, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Color3]:
        """
        Returns (scattered_ray, attenuation) for a hit.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction)
        attenuation = rec.surface_color * self.albedo
        return scattered, attenuation
