# simrunner/simulator_manager.py
import json
import shutil
from typing import Awaitable, Callable, List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field
from . import config, metrics
from .errors import SimulatorError, SimulatorNotBootedError, SimulatorNotFoundError
from .logger import log
from .process import run_command

BOOTED = "Booted"

class SimulatorInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    udid: str
    name: str
    state: str
    runtime: Optional[str] = None
    is_available: bool = Field(default=True, alias="isAvailable")

    @property
    def is_booted(self) -> bool:
        return self.state == BOOTED

class SimulatorManager:
    """
    Looks up simulators through `xcrun simctl`. Holds no state between calls;
    every lookup lists the device set again.
    """

    def __init__(self, runner: Optional[Callable[[Sequence[str]], Awaitable[bytes]]] = None, xcrun_path: Optional[str] = None):
        self._run = runner or run_command
        self.xcrun_path = xcrun_path or config.XCRUN_PATH

    async def list_simulators(self) -> List[SimulatorInfo]:
        raw = await self._run([self.xcrun_path, "simctl", "list", "devices", "--json"])
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise SimulatorError(f"simctl returned invalid JSON: {e}") from e

        sims = []
        for runtime, devices in (data.get("devices") or {}).items():
            for device in devices:
                sims.append(SimulatorInfo(runtime=runtime, **device))

        booted = sum(1 for s in sims if s.is_booted)
        metrics.SIMULATORS_BOOTED.set(booted)
        log("DEBUG", "simulators_listed", "Listed simulators", total=len(sims), booted=booted)
        return sims

    async def get_simulator(self, udid: str) -> SimulatorInfo:
        wanted = (udid or "").strip()
        if not wanted:
            raise SimulatorError("Simulator UDID cannot be empty. Use --udid to specify a simulator.")
        for sim in await self.list_simulators():
            if sim.udid == wanted:
                return sim
        raise SimulatorNotFoundError(wanted)

    async def require_booted(self, udid: str) -> SimulatorInfo:
        sim = await self.get_simulator(udid)
        if not sim.is_booted:
            raise SimulatorNotBootedError(sim.udid, sim.state)
        return sim

    def get_health(self) -> dict:
        return {
            "xcrun": shutil.which(self.xcrun_path) is not None,
            "idb": shutil.which(config.IDB_PATH) is not None,
        }
