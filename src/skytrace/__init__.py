"""
skytrace: a CPU Monte-Carlo path tracer with a background render worker.
"""
from skytrace.core.vector import Color3, Point3, Vector3
from skytrace.core.ray import Ray
from skytrace.camera.camera import Camera
from skytrace.errors import (
    GeometryError,
    RenderError,
    RendererUnavailable,
    RenderParamsError,
    SkytraceError,
)
from skytrace.geometry.scene import Scene
from skytrace.geometry.sphere import Sphere
from skytrace.renderer.frame import Frame
from skytrace.renderer.params import RenderParams
from skytrace.renderer.raytracer import PathTracer
from skytrace.renderer.renderer import Renderer
from skytrace.renderer.resolution import Resolution

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "Color3",
    "Frame",
    "GeometryError",
    "PathTracer",
    "Point3",
    "Ray",
    "RenderError",
    "RenderParams",
    "RenderParamsError",
    "Renderer",
    "RendererUnavailable",
    "Resolution",
    "Scene",
    "SkytraceError",
    "Sphere",
    "Vector3",
]
