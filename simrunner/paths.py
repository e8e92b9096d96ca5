# simrunner/paths.py
import os
from datetime import datetime
from typing import Optional
from .errors import ScreenshotError

def format_timestamp(now: datetime) -> str:
    return now.strftime("%Y-%m-%d at %H.%M.%S")

def default_screenshot_name(device_name: str, now: datetime) -> str:
    return f"Simulator Screenshot - {device_name} - {format_timestamp(now)}.png"

def resolve_screenshot_path(
    output: Optional[str],
    device_name: str,
    now: Optional[datetime] = None,
    cwd: Optional[str] = None,
) -> str:
    """
    Work out where a screenshot should be written.

    No output -> default name in the working directory. An existing directory
    -> default name inside it. Anything else is a file path whose parent is
    created and whose previous file, if any, is removed.
    """
    now = now or datetime.now()
    cwd = cwd or os.getcwd()

    provided = (output or "").strip()
    if provided:
        resolved = os.path.expanduser(provided)
    else:
        resolved = default_screenshot_name(device_name, now)
    if not os.path.isabs(resolved):
        resolved = os.path.join(cwd, resolved)

    if os.path.isdir(resolved):
        return os.path.join(resolved, default_screenshot_name(device_name, now))

    parent = os.path.dirname(resolved)
    os.makedirs(parent, exist_ok=True)

    if os.path.lexists(resolved):
        try:
            os.remove(resolved)
        except OSError as e:
            raise ScreenshotError(f"Could not replace existing file at {resolved}: {e}") from e
    return resolved
