# simrunner/process.py
import asyncio
import time
from typing import Optional, Sequence
from . import config
from .errors import CommandError, CommandTimeoutError
from .logger import log

async def run_command(args: Sequence[str], timeout: Optional[float] = None) -> bytes:
    """
    Run an external tool (idb, xcrun) and return its stdout.
    Raises CommandError on a non-zero exit and CommandTimeoutError when the
    tool does not finish in time. The process is killed on timeout and when
    the awaiting task is cancelled.
    """
    timeout = timeout or config.COMMAND_TIMEOUT_SEC
    start = time.time()
    log("DEBUG", "command_start", "Running external command", args=list(args))
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise CommandError(args, returncode=None, stderr=f"executable not found: {args[0]}") from e

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        log("ERROR", "command_timeout", "External command timed out", args=list(args), timeout=timeout)
        raise CommandTimeoutError(args, timeout)
    finally:
        # timeout or cancellation: the tool must not outlive the caller
        if proc.returncode is None:
            await _kill(proc)

    duration = time.time() - start
    if proc.returncode != 0:
        err = stderr.decode("utf-8", errors="replace")
        log("ERROR", "command_failed", "External command failed", args=list(args),
            returncode=proc.returncode, stderr=err[:500], duration_ms=int(duration * 1000))
        raise CommandError(args, returncode=proc.returncode, stderr=err)

    log("DEBUG", "command_done", "External command finished", args=list(args), duration_ms=int(duration * 1000))
    return stdout

async def _kill(proc) -> None:
    try:
        proc.kill()
    except ProcessLookupError:
        pass
    await proc.wait()
    log("WARN", "command_killed", "External command killed before completion", pid=proc.pid)
