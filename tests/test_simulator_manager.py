import asyncio
import json
import pytest
from simrunner.errors import SimulatorError, SimulatorNotBootedError, SimulatorNotFoundError
from simrunner.simulator_manager import SimulatorManager

DEVICES = {
    "devices": {
        "com.apple.CoreSimulator.SimRuntime.iOS-17-5": [
            {"udid": "AAA", "name": "iPhone 15", "state": "Booted", "isAvailable": True, "dataPath": "/x"},
            {"udid": "BBB", "name": "iPad Air", "state": "Shutdown", "isAvailable": True},
        ],
        "com.apple.CoreSimulator.SimRuntime.iOS-16-4": [
            {"udid": "CCC", "name": "iPhone 14", "state": "Shutdown", "isAvailable": False},
        ],
    }
}

def make_manager(payload=None):
    calls = []

    async def runner(args):
        calls.append(list(args))
        return json.dumps(payload or DEVICES).encode()

    return SimulatorManager(runner=runner, xcrun_path="xcrun"), calls

def test_list_simulators():
    sims, calls = make_manager()
    found = asyncio.run(sims.list_simulators())
    assert calls == [["xcrun", "simctl", "list", "devices", "--json"]]
    assert [s.udid for s in found] == ["AAA", "BBB", "CCC"]
    assert found[0].is_booted
    assert found[0].runtime.endswith("iOS-17-5")
    assert found[2].is_available is False

def test_get_simulator_strips_udid():
    sims, _ = make_manager()
    assert asyncio.run(sims.get_simulator("  BBB\n")).name == "iPad Air"

def test_unknown_and_empty_udid():
    sims, _ = make_manager()
    with pytest.raises(SimulatorNotFoundError):
        asyncio.run(sims.get_simulator("ZZZ"))
    with pytest.raises(SimulatorError):
        asyncio.run(sims.get_simulator("   "))

def test_require_booted():
    sims, _ = make_manager()
    assert asyncio.run(sims.require_booted("AAA")).udid == "AAA"
    with pytest.raises(SimulatorNotBootedError) as exc:
        asyncio.run(sims.require_booted("BBB"))
    assert exc.value.state == "Shutdown"

def test_invalid_listing():
    async def runner(args):
        return b"oops"
    with pytest.raises(SimulatorError):
        asyncio.run(SimulatorManager(runner=runner).list_simulators())
