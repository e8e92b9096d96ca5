# simrunner/gesture_executor.py
import asyncio
import time
import uuid
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence
from . import config, metrics
from .errors import CommandError, GestureExecutionError
from .gestures import DelayStep, GestureSequence, PointerStep
from .logger import log
from .process import run_command

SUPPORTED_ACTIONS = {"tap"}

class GestureExecutor:
    """
    Dispatches a GestureSequence to one simulator through `idb ui`.

    Atomic sequences go out as a single idb call. Composite sequences are
    replayed step by step, awaiting each step before the next one starts.
    Nothing is retried: a failed dispatch surfaces as GestureExecutionError.
    """

    def __init__(
        self,
        udid: str,
        runner: Optional[Callable[[Sequence[str]], Awaitable[bytes]]] = None,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
        idb_path: Optional[str] = None,
    ):
        if not udid or not udid.strip():
            raise GestureExecutionError("A simulator UDID is required to dispatch gestures")
        self.udid = udid.strip()
        self._run = runner or run_command
        self._sleep = sleep or asyncio.sleep
        self.idb_path = idb_path or config.IDB_PATH
        self._action_prefix = "gesture"

    # --------------------------
    # Helpers & logging
    # --------------------------
    def _new_action_id(self) -> str:
        return uuid.uuid4().hex

    def _log_start(self, aid: str, name: str, payload: Dict[str, Any]):
        log("INFO", f"{self._action_prefix}_start", f"Gesture {name} start", udid=self.udid, action_id=aid, **payload)

    def _log_success(self, aid: str, name: str, payload: Dict[str, Any], duration: float):
        log("INFO", f"{self._action_prefix}_success", f"Gesture {name} success", udid=self.udid, action_id=aid, duration_ms=int(duration*1000), **payload)

    def _log_failure(self, aid: str, name: str, payload: Dict[str, Any], error: str, step: int):
        log("ERROR", f"{self._action_prefix}_failed", f"Gesture {name} failed", udid=self.udid, action_id=aid, step=step, error=error, **payload)

    def _tap_args(self, step: PointerStep) -> List[str]:
        return [
            self.idb_path, "ui", "tap",
            "--udid", self.udid,
            _format_coordinate(step.point.x),
            _format_coordinate(step.point.y),
        ]

    def _check_vocabulary(self, sequence: GestureSequence):
        for step in sequence.pointer_steps:
            if step.action not in SUPPORTED_ACTIONS:
                raise GestureExecutionError(f"Unsupported pointer action: {step.action}")

    # --------------------------
    # Dispatch
    # --------------------------
    async def _dispatch_step(self, step) -> None:
        if isinstance(step, DelayStep):
            await self._sleep(step.duration)
        else:
            await self._run(self._tap_args(step))

    async def execute(self, sequence: GestureSequence) -> Dict[str, Any]:
        self._check_vocabulary(sequence)

        aid = self._new_action_id()
        name = sequence.shape
        payload = {"steps": len(sequence.steps)}
        self._log_start(aid, name, payload)
        start = time.time()

        index = 0
        try:
            if sequence.is_atomic:
                await self._dispatch_step(sequence.steps[0])
            else:
                for index, step in enumerate(sequence.steps):
                    log("DEBUG", "gesture_step", "Dispatching step", udid=self.udid, action_id=aid, index=index, kind=step.kind)
                    await self._dispatch_step(step)
        except CommandError as e:
            self._log_failure(aid, name, payload, str(e), step=index)
            raise GestureExecutionError(f"{name} gesture failed: {e}") from e

        duration = time.time() - start
        metrics.TAPS_TOTAL.labels(shape=name).inc()
        self._log_success(aid, name, payload, duration)
        return {"action_id": aid, "status": "success", "duration": duration, "shape": name}

def _format_coordinate(value: float) -> str:
    # whole numbers go out without a trailing ".0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
