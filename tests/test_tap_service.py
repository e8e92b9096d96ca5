import asyncio
import json
import pytest
from simrunner.accessibility.fetcher import AccessibilityFetcher
from simrunner.errors import AmbiguousMatchError, InvalidFrameError, MalformedTreeError, MissingFrameError, NoMatchError
from simrunner.tap_service import TapService
from targeting.resolver import ResolvedPoint
from targeting.schemas import ByIdentifier, ByLabel, Coordinates

SNAPSHOT = '[{"type":"AXButton","frame":{"x":10,"y":10,"width":20,"height":20},"AXLabel":"OK"}]'

class DummyRunner:
    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    async def __call__(self, args):
        self.calls.append(list(args))
        return self.payload

class DummyExecutor:
    instances = []

    def __init__(self, udid):
        self.udid = udid
        self.executed = []
        DummyExecutor.instances.append(self)

    async def execute(self, sequence):
        self.executed.append(sequence)
        return {"action_id": "a1", "status": "success", "shape": sequence.shape}

@pytest.fixture(autouse=True)
def _reset_executors():
    DummyExecutor.instances = []

def make_service(payload=SNAPSHOT):
    runner = DummyRunner(payload.encode() if isinstance(payload, str) else payload)
    fetcher = AccessibilityFetcher(runner=runner, idb_path="idb")
    return TapService(fetcher=fetcher, executor_factory=DummyExecutor), runner

def test_label_end_to_end():
    service, runner = make_service()
    result = asyncio.run(service.tap("SIM-1", ByLabel(value="OK")))
    assert runner.calls == [["idb", "ui", "describe-all", "--udid", "SIM-1", "--json", "--nested"]]
    assert result.point == ResolvedPoint(x=20.0, y=20.0)
    assert result.sequence.is_atomic
    assert result.sequence.pointer_steps[0].point == ResolvedPoint(x=20.0, y=20.0)
    assert result.description == "center of matched element at (20.0, 20.0)"
    assert DummyExecutor.instances[0].udid == "SIM-1"

def test_identifier_with_delays_builds_composite():
    payload = json.dumps({"type": "AXWindow", "children": [
        {"type": "AXSwitch", "AXUniqueId": "wifi-toggle\n", "frame": {"x": 852, "y": 42, "width": 61, "height": 28}},
    ]})
    service, _ = make_service(payload)
    result = asyncio.run(service.tap("SIM-1", ByIdentifier(value="wifi-toggle"), pre_delay=0.5, post_delay=0.3))
    assert result.point == ResolvedPoint(x=882.5, y=56.0)
    assert [s.kind for s in result.sequence.steps] == ["delay", "pointer", "delay"]

def test_coordinates_skip_the_snapshot():
    service, runner = make_service()
    result = asyncio.run(service.tap("SIM-1", Coordinates(x=5, y=7)))
    assert runner.calls == []
    assert result.point == ResolvedPoint(x=5, y=7)
    assert result.description == "(5.0, 7.0)"

@pytest.mark.parametrize("payload,query,error", [
    (SNAPSHOT, ByLabel(value="Cancel"), NoMatchError),
    ('[{"AXLabel":"OK"},{"AXLabel":"OK "}]', ByLabel(value="OK"), AmbiguousMatchError),
    ('[{"AXLabel":"OK"}]', ByLabel(value="OK"), MissingFrameError),
    ('[{"AXLabel":"OK","frame":{"x":0,"y":0,"width":0,"height":10}}]', ByLabel(value="OK"), InvalidFrameError),
    ("<html>", ByLabel(value="OK"), MalformedTreeError),
])
def test_targeting_failures_dispatch_nothing(payload, query, error):
    service, _ = make_service(payload)
    with pytest.raises(error):
        asyncio.run(service.tap("SIM-1", query))
    assert DummyExecutor.instances == []

def test_every_tap_refetches():
    service, runner = make_service()
    asyncio.run(service.tap("SIM-1", ByLabel(value="OK")))
    asyncio.run(service.tap("SIM-1", ByLabel(value="OK")))
    assert len(runner.calls) == 2
