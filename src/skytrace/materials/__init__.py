from skytrace.materials.lambertian import ALBEDO, Lambertian

__all__ = ["ALBEDO", "Lambertian"]
