"""Pytest configuration and shared fixtures."""

import pytest

from skytrace.core.vector import Color3, Point3
from skytrace.geometry.scene import Scene
from skytrace.geometry.sphere import Sphere
from skytrace.renderer.params import RenderParams
from skytrace.renderer.renderer import Renderer
from skytrace.renderer.resolution import Resolution


@pytest.fixture
def unit_sphere():
    """The sphere sitting in front of the camera."""
    return Sphere(Point3(0.0, 0.0, -1.0), 0.5, Color3.splat(1.0))


@pytest.fixture
def single_sphere_scene(unit_sphere):
    return Scene([unit_sphere])


@pytest.fixture
def empty_scene():
    return Scene()


@pytest.fixture
def make_params():
    """Build small, seeded render params."""
    def _make(width=4, height=3, samples=1, seed=1234, **kwargs):
        return RenderParams(
            focal_length=kwargs.pop("focal_length", 1.0),
            samples_per_pixel=samples,
            min_ray_distance=kwargs.pop("min_ray_distance", 0.001),
            resolution=Resolution(width, height),
            seed=seed,
            **kwargs,
        )
    return _make


@pytest.fixture
def renderer():
    r = Renderer()
    yield r
    r.close(timeout=10)
