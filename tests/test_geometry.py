"""Tests for sphere and scene intersection."""

import math

import pytest

from skytrace.camera.camera import Camera
from skytrace.core.ray import Ray
from skytrace.core.vector import Color3, Point3, Vector3
from skytrace.errors import GeometryError
from skytrace.geometry.hittable import Hittable
from skytrace.geometry.scene import Scene
from skytrace.geometry.sphere import Sphere

T_MIN = 0.001


class TestSphereHit:

    def test_head_on_hit_prefers_near_root(self, unit_sphere):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = unit_sphere.hit(ray, T_MIN, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 0.5)
        assert rec.p == Point3(0, 0, -0.5)
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.front_face
        assert rec.surface_color == unit_sphere.color

    def test_tangent_ray_has_single_root(self, unit_sphere):
        ray = Ray(Point3(0, 0.5, 0), Vector3(0, 0, -1))
        rec = unit_sphere.hit(ray, T_MIN, math.inf)
        assert rec is not None
        assert rec.t == 1.0
        assert rec.p == Point3(0, 0.5, -1)

    def test_ray_from_inside_returns_far_root(self, unit_sphere):
        ray = Ray(Point3(0, 0, -1), Vector3(0, 0, -1))
        rec = unit_sphere.hit(ray, T_MIN, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 0.5)
        assert not rec.front_face
        # Normal is flipped to face the incoming ray.
        assert rec.normal == Vector3(0, 0, 1)

    def test_miss(self, unit_sphere):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 1, 0))
        assert unit_sphere.hit(ray, T_MIN, math.inf) is None

    def test_sphere_behind_ray_is_not_hit(self, unit_sphere):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, 1))
        assert unit_sphere.hit(ray, T_MIN, math.inf) is None

    def test_respects_t_max(self, unit_sphere):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, T_MIN, 0.4) is None


class TestSphere:

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_non_positive_radius_rejected(self, radius):
        with pytest.raises(GeometryError):
            Sphere(Point3(0, 0, 0), radius)

    def test_radius_edit_is_validated(self, unit_sphere):
        unit_sphere.radius = 0.75
        assert unit_sphere.radius == 0.75
        with pytest.raises(GeometryError):
            unit_sphere.radius = 0

    def test_color_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            Sphere(Point3(0, 0, 0), 1.0, Color3(1.5, 0, 0))

    def test_defaults(self):
        sphere = Sphere(Point3(1, 2, 3), 0.5)
        assert sphere.color == Color3.splat(1.0)
        assert sphere.max_radius == 1.0
        assert sphere.name == "Sphere at (1.0, 2.0, 3.0)"


class TestScene:

    def test_nearest_hit_regardless_of_order(self):
        spheres = [Sphere(Point3(0, 0, z), 0.5) for z in (-5.0, -1.0, -3.0)]
        scene = Scene(spheres)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = scene.hit(ray, T_MIN, math.inf)
        individual = [s.hit(ray, T_MIN, math.inf).t for s in spheres]
        assert rec.t == min(individual)
        assert math.isclose(rec.t, 0.5)

    def test_empty_scene_never_hits(self, empty_scene):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert empty_scene.hit(ray, T_MIN, math.inf) is None

    def test_nested_scene(self, single_sphere_scene):
        outer = Scene([single_sphere_scene, Sphere(Point3(0, 0, -10), 1.0)])
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = outer.hit(ray, T_MIN, math.inf)
        assert math.isclose(rec.t, 0.5)

    def test_rejects_unknown_objects(self, empty_scene):
        with pytest.raises(TypeError):
            empty_scene.add(Hittable())
        with pytest.raises(ValueError):
            empty_scene.add(empty_scene)

    def test_snapshot_is_independent(self, single_sphere_scene, unit_sphere):
        snapshot = single_sphere_scene.snapshot()
        unit_sphere.radius = 0.25
        single_sphere_scene.add(Sphere(Point3(1, 1, 1), 1.0))
        assert len(snapshot) == 1
        assert next(iter(snapshot)).radius == 0.5

    def test_default_scene(self):
        scene = Scene.default()
        assert len(scene) == 2
        radii = sorted(s.radius for s in scene)
        assert radii == [0.5, 100.0]
        scene.clear()
        assert len(scene) == 0


class TestCamera:

    def test_viewport(self):
        camera = Camera((400, 200), 1.0)
        assert camera.viewport_height == 2.0
        assert camera.viewport_width == 4.0
        assert camera.lower_left_corner == Vector3(-2, -1, -1)
        assert camera.pixel_scale == 0.01

    def test_cast_ray_through_center(self):
        camera = Camera((400, 200), 0.5)
        ray = camera.cast_ray(2.0, 1.0)
        assert ray.origin == Point3(0, 0, 0)
        assert ray.direction == Vector3(0, 0, -0.5)

    def test_cast_ray_through_corner(self):
        camera = Camera((2, 2), 1.0)
        assert camera.cast_ray(0, 0).direction == Vector3(-1, -1, -1)
        assert camera.cast_ray(2, 2).direction == Vector3(1, 1, -1)

    def test_empty_image_rejected(self):
        with pytest.raises(GeometryError):
            Camera((0, 10), 1.0)
