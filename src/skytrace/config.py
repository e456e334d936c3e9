# config.py
"""
Default render settings. Callers override any subset of these keys and
hand the mapping to RenderParams.from_config().
"""

DEFAULT_RENDER_SETTINGS = {
    "focal_length": 1.0,
    "samples_per_pixel": 100,
    "min_ray_distance": 0.001,
    "resolution": "400x300",
    "max_depth": 50,
    "seed": None,
}
