from skytrace.camera.camera import Camera

__all__ = ["Camera"]
