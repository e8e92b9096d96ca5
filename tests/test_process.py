import asyncio
import pytest
from simrunner.errors import CommandError, CommandTimeoutError
from simrunner.process import run_command

def test_returns_stdout():
    assert asyncio.run(run_command(["sh", "-c", "printf hello"])) == b"hello"

def test_nonzero_exit_raises_with_stderr():
    with pytest.raises(CommandError) as exc:
        asyncio.run(run_command(["sh", "-c", "echo boom >&2; exit 3"]))
    assert exc.value.returncode == 3
    assert "boom" in str(exc.value)

def test_timeout_kills_process():
    with pytest.raises(CommandTimeoutError):
        asyncio.run(run_command(["sleep", "5"], timeout=0.2))

def test_missing_executable():
    with pytest.raises(CommandError) as exc:
        asyncio.run(run_command(["definitely-not-a-real-tool-axtap"]))
    assert "executable not found" in str(exc.value)

def test_cancellation_kills_child(tmp_path):
    marker = tmp_path / "marker"

    async def scenario():
        task = asyncio.create_task(run_command(["sh", "-c", f"sleep 0.5; touch '{marker}'"]))
        await asyncio.sleep(0.1)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        # give a surviving child time to finish
        await asyncio.sleep(1)

    asyncio.run(scenario())
    assert not marker.exists()
