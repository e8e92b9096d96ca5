# accessibility/fetcher.py
import time
from typing import Awaitable, Callable, List, Optional, Sequence
from .. import config, metrics
from ..logger import log
from ..process import run_command
from .decoder import decode_forest
from .element import AccessibilityElement

CommandRunner = Callable[[Sequence[str]], Awaitable[bytes]]

class AccessibilityFetcher:
    """
    Pulls a nested accessibility snapshot from a simulator through idb.
    Nothing is cached: every call goes back to the device.
    """

    def __init__(self, runner: Optional[CommandRunner] = None, idb_path: Optional[str] = None):
        self._run = runner or run_command
        self.idb_path = idb_path or config.IDB_PATH

    def _describe_all_args(self, udid: str) -> List[str]:
        return [self.idb_path, "ui", "describe-all", "--udid", udid, "--json", "--nested"]

    async def fetch_json(self, udid: str) -> bytes:
        start = time.time()
        log("INFO", "snapshot_fetch_start", "Fetching accessibility snapshot", udid=udid)
        payload = await self._run(self._describe_all_args(udid))
        duration = time.time() - start
        metrics.SNAPSHOT_FETCH_SECONDS.observe(duration)
        log("INFO", "snapshot_fetch_done", "Accessibility snapshot fetched", udid=udid,
            size=len(payload), duration_ms=int(duration * 1000))
        return payload

    async def fetch_forest(self, udid: str) -> List[AccessibilityElement]:
        return decode_forest(await self.fetch_json(udid))
