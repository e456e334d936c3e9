# renderer/params.py
import copy
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from skytrace.config import DEFAULT_RENDER_SETTINGS
from skytrace.errors import RenderParamsError
from skytrace.renderer.resolution import Resolution


def _default_resolution() -> Resolution:
    return Resolution.parse(DEFAULT_RENDER_SETTINGS["resolution"])


@dataclass
class RenderParams:
    """
    Everything the worker needs besides the scene. Copied into every
    UpdateRenderParams command, so the caller may keep editing its own instance.
    """
    focal_length: float = DEFAULT_RENDER_SETTINGS["focal_length"]
    samples_per_pixel: int = DEFAULT_RENDER_SETTINGS["samples_per_pixel"]
    min_ray_distance: float = DEFAULT_RENDER_SETTINGS["min_ray_distance"]
    resolution: Resolution = field(default_factory=_default_resolution)
    available_resolutions: List[Resolution] = field(default_factory=Resolution.available)
    max_depth: int = DEFAULT_RENDER_SETTINGS["max_depth"]
    seed: Optional[int] = DEFAULT_RENDER_SETTINGS["seed"]

    @classmethod
    def from_config(cls, settings: Mapping = None) -> "RenderParams":
        merged = dict(DEFAULT_RENDER_SETTINGS)
        if settings:
            unknown = set(settings) - set(DEFAULT_RENDER_SETTINGS)
            if unknown:
                raise RenderParamsError(f"unknown render settings: {', '.join(sorted(unknown))}")
            merged.update(settings)
        resolution = merged["resolution"]
        if isinstance(resolution, str):
            try:
                resolution = Resolution.parse(resolution)
            except ValueError as exc:
                raise RenderParamsError(str(exc)) from exc
        params = cls(
            focal_length=float(merged["focal_length"]),
            samples_per_pixel=int(merged["samples_per_pixel"]),
            min_ray_distance=float(merged["min_ray_distance"]),
            resolution=resolution,
            max_depth=int(merged["max_depth"]),
            seed=merged["seed"],
        )
        params.validate()
        return params

    def validate(self) -> "RenderParams":
        if self.samples_per_pixel < 1:
            raise RenderParamsError(f"samples_per_pixel must be >= 1, got {self.samples_per_pixel}")
        if not self.min_ray_distance > 0:
            raise RenderParamsError(f"min_ray_distance must be > 0, got {self.min_ray_distance}")
        if not self.focal_length > 0:
            raise RenderParamsError(f"focal_length must be > 0, got {self.focal_length}")
        if self.max_depth < 0:
            raise RenderParamsError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.resolution.width <= 0 or self.resolution.height <= 0:
            raise RenderParamsError(f"resolution must be positive, got {self.resolution}")
        return self

    def copy(self) -> "RenderParams":
        return copy.deepcopy(self)
