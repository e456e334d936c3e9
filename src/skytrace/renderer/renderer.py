# renderer/renderer.py
import queue
import time
from typing import Optional

from skytrace.errors import RenderError, RendererUnavailable
from skytrace.geometry.scene import Scene
from skytrace.renderer.frame import Frame
from skytrace.renderer.params import RenderParams
from skytrace.renderer.worker import (
    FrameFailed,
    FrameRendered,
    ProgressUpdate,
    RenderWorker,
    RequestFrame,
    Shutdown,
    UpdateRenderParams,
    UpdateScene,
)
from skytrace.utils.logger import get_logger

logger = get_logger(__name__)

POLL_INTERVAL = 0.01


class Renderer:
    """
    Caller-side facade over the render worker. Every method except
    wait_for_frame() returns without blocking, so it can be called once per
    UI redraw. At most one frame is in flight at a time.
    """
    def __init__(self):
        self._commands = queue.Queue()
        self._responses = queue.Queue()
        self._worker = RenderWorker(self._commands, self._responses)
        self._worker.start()
        self.waiting_for_next_frame = False
        self.progress = 0.0
        self.image: Optional[Frame] = None

    @property
    def worker(self) -> RenderWorker:
        return self._worker

    @property
    def available(self) -> bool:
        return self._worker.is_alive()

    def _send(self, command):
        if not self.available:
            raise RendererUnavailable("render worker is not running")
        self._commands.put(command)

    def render(self, params: RenderParams, scene: Scene) -> bool:
        """
        Requests a frame for (params, scene) if none is in flight, otherwise
        drains pending responses. Returns True when a new image was taken.
        """
        if not self.waiting_for_next_frame:
            params.validate()
            self._send(UpdateScene(scene.snapshot()))
            self._send(UpdateRenderParams(params.copy()))
            self._send(RequestFrame())
            self.waiting_for_next_frame = True
            self.progress = 0.0
            return False
        return self.poll()

    def poll(self) -> bool:
        """
        Applies every queued response without blocking.
        """
        got_frame = False
        while True:
            try:
                response = self._responses.get_nowait()
            except queue.Empty:
                break
            if isinstance(response, ProgressUpdate):
                self.progress = response.fraction
            elif isinstance(response, FrameRendered):
                self.image = response.frame
                self.progress = 1.0
                self.waiting_for_next_frame = False
                got_frame = True
            elif isinstance(response, FrameFailed):
                self.waiting_for_next_frame = False
                raise RenderError(f"frame failed: {response.error}") from response.error

        if self.waiting_for_next_frame and not self.available:
            self.waiting_for_next_frame = False
            raise RendererUnavailable("render worker exited while a frame was in flight")
        return got_frame

    def wait_for_frame(self, timeout: float = None) -> Frame:
        """
        Blocks until the in-flight frame arrives. For headless callers and tests.
        """
        if not self.waiting_for_next_frame:
            if self.image is None:
                raise RenderError("no frame has been requested")
            return self.image
        deadline = None if timeout is None else time.monotonic() + timeout
        while not self.poll():
            if deadline is not None and time.monotonic() > deadline:
                raise TimeoutError(f"no frame within {timeout}s")
            time.sleep(POLL_INTERVAL)
        return self.image

    def close(self, timeout: float = None):
        if self.available:
            self._commands.put(Shutdown())
            self._worker.join(timeout)
        logger.debug("Renderer closed")

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
