from skytrace.renderer.frame import Frame
from skytrace.renderer.params import RenderParams
from skytrace.renderer.raytracer import PathTracer
from skytrace.renderer.renderer import Renderer
from skytrace.renderer.resolution import Resolution

__all__ = ["Frame", "PathTracer", "RenderParams", "Renderer", "Resolution"]
