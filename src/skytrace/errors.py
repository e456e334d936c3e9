# errors.py


class SkytraceError(Exception):
    """
    Base class for every error raised by the renderer.
    """


class GeometryError(SkytraceError, ValueError):
    """
    Degenerate geometry: zero-length directions, non-positive radii.
    """


class RenderParamsError(SkytraceError, ValueError):
    """
    Render parameters that cannot produce a frame.
    """


class RendererUnavailable(SkytraceError, RuntimeError):
    """
    The render worker is gone and no further frames can be produced.
    """


class RenderError(SkytraceError, RuntimeError):
    """
    A frame failed inside the render worker.
    """
