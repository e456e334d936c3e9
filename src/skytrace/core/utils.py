# core/utils.py
import random

from skytrace.core.vector import Vector3


def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if 0 < p.dot(p) < 1.0:
            return p


def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()
