"""Tests for diffuse scattering."""

import random

from skytrace.core.vector import Color3, Point3, Vector3
from skytrace.geometry.hittable import HitRecord
from skytrace.materials.lambertian import ALBEDO, Lambertian


class ScriptedRandom:
    """Replays fixed uniform draws."""

    def __init__(self, values):
        self.values = list(values)

    def uniform(self, a, b):
        return self.values.pop(0)


def make_hit(color=None):
    return HitRecord(
        p=Point3(0, 0, -0.5),
        normal=Vector3(0, 0, 1),
        t=0.5,
        front_face=True,
        surface_color=color or Color3(0.2, 0.4, 1.0),
    )


class TestLambertian:

    def test_scatter_leaves_from_hit_point_into_normal_hemisphere(self):
        material = Lambertian()
        rng = random.Random(3)
        rec = make_hit()
        for _ in range(50):
            scattered, _ = material.scatter(rec, rng)
            assert scattered.origin == rec.p
            assert scattered.direction.dot(rec.normal) >= 0

    def test_attenuation_is_half_the_surface_color(self):
        _, attenuation = Lambertian().scatter(make_hit(), random.Random(1))
        assert ALBEDO == 0.5
        assert attenuation == Color3(0.1, 0.2, 0.5)

    def test_degenerate_direction_falls_back_to_normal(self):
        # Unit vector exactly opposite the normal cancels it out.
        rng = ScriptedRandom([0.0, 0.0, -0.5])
        scattered, _ = Lambertian().scatter(make_hit(), rng)
        assert scattered.direction == Vector3(0, 0, 1)
