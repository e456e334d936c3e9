# renderer/worker.py
import queue
import threading
import time
from dataclasses import dataclass
from typing import Optional, Union

from skytrace.geometry.scene import Scene
from skytrace.renderer.frame import Frame
from skytrace.renderer.params import RenderParams
from skytrace.renderer.raytracer import PathTracer
from skytrace.utils.logger import get_logger

logger = get_logger(__name__)


# Commands: caller -> worker

@dataclass
class UpdateScene:
    scene: Scene


@dataclass
class UpdateRenderParams:
    params: RenderParams


@dataclass
class RequestFrame:
    pass


@dataclass
class Shutdown:
    pass


# Responses: worker -> caller

@dataclass
class ProgressUpdate:
    fraction: float


@dataclass
class FrameRendered:
    frame: Frame


@dataclass
class FrameFailed:
    error: BaseException


Command = Union[UpdateScene, UpdateRenderParams, RequestFrame, Shutdown]
Response = Union[ProgressUpdate, FrameRendered, FrameFailed]


class RenderWorker(threading.Thread):
    """
    Owns the path tracer and renders frames on its own thread.

    Commands are consumed strictly in arrival order with a blocking get; a
    RequestFrame renders with whatever scene and params were received before
    it and is ignored until a scene has been set. Progress updates for a frame
    are always queued before its FrameRendered.
    """
    def __init__(self, commands: "queue.Queue[Command]", responses: "queue.Queue[Response]"):
        super().__init__(name="skytrace-render-worker", daemon=True)
        self.commands = commands
        self.responses = responses
        self.scene: Optional[Scene] = None
        self.params = RenderParams()
        self.frames_rendered = 0
        self.rendering = False

    @property
    def state(self) -> str:
        if self.rendering:
            return "rendering"
        if self.scene is None:
            return "idle"
        return "ready"

    def run(self):
        logger.info("Render worker started")
        try:
            while True:
                command = self.commands.get()
                if isinstance(command, Shutdown):
                    break
                self.handle(command)
        except Exception:
            # The caller sees the dead thread as RendererUnavailable.
            logger.exception("Render worker crashed")
        finally:
            logger.info("Render worker stopped after %d frames", self.frames_rendered)

    def handle(self, command: Command):
        if isinstance(command, UpdateScene):
            self.scene = command.scene
        elif isinstance(command, UpdateRenderParams):
            self.params = command.params
        elif isinstance(command, RequestFrame):
            if self.scene is None:
                logger.debug("Frame requested before any scene was set; ignoring")
                return
            self.render_frame()
        else:
            raise TypeError(f"unknown render command: {command!r}")

    def render_frame(self):
        params = self.params
        logger.info("Rendering %s frame at %d spp (%d objects)",
                    params.resolution, params.samples_per_pixel, len(self.scene))
        start = time.perf_counter()
        self.rendering = True
        try:
            tracer = PathTracer(params)
            frame = tracer.render(self.scene, progress=self._report_progress)
        except Exception as exc:
            logger.exception("Frame failed")
            self.responses.put(FrameFailed(exc))
            return
        finally:
            self.rendering = False
        self.frames_rendered += 1
        logger.info("Frame finished in %.2fs", time.perf_counter() - start)
        self.responses.put(FrameRendered(frame))

    def _report_progress(self, fraction: float):
        self.responses.put(ProgressUpdate(fraction))
