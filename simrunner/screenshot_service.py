# simrunner/screenshot_service.py
from typing import Awaitable, Callable, Optional, Sequence
from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel
from . import config
from .errors import CommandError, ScreenshotError
from .logger import log
from .paths import resolve_screenshot_path
from .process import run_command
from .simulator_manager import SimulatorManager

class ScreenshotResult(BaseModel):
    udid: str
    path: str
    width: int
    height: int

class ScreenshotService:
    """
    Captures the simulator display into a PNG file via `simctl io screenshot`
    and checks the result with Pillow.
    """

    def __init__(
        self,
        simulators: SimulatorManager,
        runner: Optional[Callable[[Sequence[str]], Awaitable[bytes]]] = None,
        xcrun_path: Optional[str] = None,
    ):
        self.simulators = simulators
        self._run = runner or run_command
        self.xcrun_path = xcrun_path or config.XCRUN_PATH

    async def capture(self, udid: str, output: Optional[str] = None) -> ScreenshotResult:
        sim = await self.simulators.require_booted(udid)
        path = resolve_screenshot_path(output, sim.name)

        log("INFO", "screenshot_start", "Capturing simulator screenshot", udid=sim.udid, path=path)
        try:
            await self._run([self.xcrun_path, "simctl", "io", sim.udid, "screenshot", "--type=png", path])
        except CommandError as e:
            log("ERROR", "screenshot_failed", "Failed to capture screenshot", udid=sim.udid, error=str(e))
            raise ScreenshotError(f"Screenshot capture failed: {e}") from e

        width, height = self._image_size(path)
        log("INFO", "screenshot_saved", f"Saved screenshot to {path} ({width}x{height})", udid=sim.udid)
        return ScreenshotResult(udid=sim.udid, path=path, width=width, height=height)

    def _image_size(self, path: str):
        try:
            with Image.open(path) as img:
                img.verify()
                return img.size
        except (OSError, UnidentifiedImageError) as e:
            raise ScreenshotError(f"Screenshot at {path} is not a readable image: {e}") from e
