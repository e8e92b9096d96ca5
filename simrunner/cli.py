# simrunner/cli.py
import argparse
import asyncio
import json
import sys
from typing import List, Optional
from dotenv import load_dotenv
from pydantic import ValidationError
from targeting.schemas import TapRequest
from . import config
from .accessibility.fetcher import AccessibilityFetcher
from .errors import AxTapError
from .screenshot_service import ScreenshotService
from .simulator_manager import SimulatorManager
from .tap_service import TapService

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="axtap", description="Drive iOS simulators through their accessibility tree.")
    sub = parser.add_subparsers(dest="command", required=True)

    tap = sub.add_parser("tap", help="Tap a point, or the center of an element located by accessibility id or label.")
    tap.add_argument("-x", dest="x", type=float, help="The X coordinate of the point to tap.")
    tap.add_argument("-y", dest="y", type=float, help="The Y coordinate of the point to tap.")
    tap.add_argument("--id", dest="element_id", help="Tap the center of the element matching AXUniqueId. Ignored if -x and -y are provided.")
    tap.add_argument("--label", dest="element_label", help="Tap the center of the element matching AXLabel. Ignored if -x and -y are provided.")
    tap.add_argument("--pre-delay", type=float, help="Delay before tapping in seconds.")
    tap.add_argument("--post-delay", type=float, help="Delay after tapping in seconds.")
    tap.add_argument("--udid", required=True, help="The UDID of the simulator.")

    describe = sub.add_parser("describe-ui", help="Print the accessibility snapshot of the simulator as JSON.")
    describe.add_argument("--udid", required=True, help="The UDID of the simulator.")

    shot = sub.add_parser("screenshot", help="Capture a screenshot from the simulator display and save it as a PNG file.")
    shot.add_argument("--udid", required=True, help="The UDID of the simulator.")
    shot.add_argument("--output", help="Output PNG file path or directory.")

    lst = sub.add_parser("list-simulators", help="List known simulators.")
    lst.add_argument("--booted", action="store_true", help="Only show booted simulators.")

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=config.API_HOST)
    serve.add_argument("--port", type=int, default=config.API_PORT)
    return parser

async def run_tap(args) -> int:
    req = TapRequest(
        x=args.x, y=args.y,
        id=args.element_id, label=args.element_label,
        pre_delay=args.pre_delay, post_delay=args.post_delay,
    )
    result = await TapService().tap(args.udid, req.to_query(), pre_delay=req.pre_delay, post_delay=req.post_delay)
    print(f"✓ Tap at ({result.point.x}, {result.point.y}) completed successfully")
    return 0

async def run_describe(args) -> int:
    forest = await AccessibilityFetcher().fetch_forest(args.udid)
    print(json.dumps([el.model_dump(by_alias=True, exclude_none=True) for el in forest], indent=2))
    return 0

async def run_screenshot(args) -> int:
    result = await ScreenshotService(SimulatorManager()).capture(args.udid, output=args.output)
    print(f"Screenshot saved to {result.path}", file=sys.stderr)
    print(result.path)
    return 0

async def run_list(args) -> int:
    for sim in await SimulatorManager().list_simulators():
        if args.booted and not sim.is_booted:
            continue
        print(f"{sim.udid}  {sim.state:<10} {sim.name}  ({sim.runtime})")
    return 0

def run_serve(args) -> int:
    import uvicorn
    uvicorn.run("api.main:app", host=args.host, port=args.port)
    return 0

COMMANDS = {
    "tap": run_tap,
    "describe-ui": run_describe,
    "screenshot": run_screenshot,
    "list-simulators": run_list,
}

def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return run_serve(args)
    try:
        return asyncio.run(COMMANDS[args.command](args))
    except ValidationError as e:
        for err in e.errors():
            print(f"Error: {err['msg']}", file=sys.stderr)
        return 2
    except AxTapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
