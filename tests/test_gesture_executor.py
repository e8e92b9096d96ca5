import asyncio
import pytest
from simrunner.errors import CommandError, GestureExecutionError
from simrunner.gesture_executor import GestureExecutor
from simrunner.gestures import build_sequence
from targeting.resolver import ResolvedPoint

class DummyDevice:
    """Records every idb call and sleep in dispatch order."""

    def __init__(self, fail_on_call=None):
        self.events = []
        self.fail_on_call = fail_on_call

    async def run(self, args):
        self.events.append(("run", list(args)))
        calls = sum(1 for e in self.events if e[0] == "run")
        if self.fail_on_call == calls:
            raise CommandError(args, returncode=1, stderr="HID event failed")
        return b""

    async def sleep(self, seconds):
        self.events.append(("sleep", seconds))

def make_executor(device, udid="SIM-1"):
    return GestureExecutor(udid, runner=device.run, sleep=device.sleep, idb_path="idb")

def test_atomic_sequence_is_one_call():
    device = DummyDevice()
    result = asyncio.run(make_executor(device).execute(build_sequence(ResolvedPoint(x=20, y=20))))
    assert result["status"] == "success"
    assert result["shape"] == "atomic"
    assert device.events == [("run", ["idb", "ui", "tap", "--udid", "SIM-1", "20", "20"])]

def test_composite_sequence_keeps_order():
    device = DummyDevice()
    seq = build_sequence(ResolvedPoint(x=882.5, y=56.0), pre_delay=0.5, post_delay=0.3)
    result = asyncio.run(make_executor(device).execute(seq))
    assert result["shape"] == "composite"
    assert device.events == [
        ("sleep", 0.5),
        ("run", ["idb", "ui", "tap", "--udid", "SIM-1", "882.5", "56"]),
        ("sleep", 0.3),
    ]

def test_transport_failure_is_wrapped_and_stops():
    device = DummyDevice(fail_on_call=1)
    seq = build_sequence(ResolvedPoint(x=1, y=1), pre_delay=1, post_delay=1)
    with pytest.raises(GestureExecutionError) as exc:
        asyncio.run(make_executor(device).execute(seq))
    assert isinstance(exc.value.__cause__, CommandError)
    # the trailing delay never ran
    assert [e[0] for e in device.events] == ["sleep", "run"]

def test_unknown_action_dispatches_nothing():
    device = DummyDevice()
    seq = build_sequence(ResolvedPoint(x=1, y=1), pre_delay=1, action="swipe")
    with pytest.raises(GestureExecutionError):
        asyncio.run(make_executor(device).execute(seq))
    assert device.events == []

def test_udid_required():
    with pytest.raises(GestureExecutionError):
        GestureExecutor("  ")
