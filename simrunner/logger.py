# simrunner/logger.py
import json
import os
import sys
from datetime import datetime, timezone
from typing import Any

LOG_LEVEL = os.getenv("AXTAP_LOG_LEVEL", "INFO").upper()
LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40, "CRITICAL": 50}

def _should_log(level: str) -> bool:
    return LEVELS.get(level, 20) >= LEVELS.get(LOG_LEVEL, 20)

def log(level: str, event: str, message: str = "", **kwargs: Any) -> None:
    # stdout is reserved for command output, log lines go to stderr
    if not _should_log(level):
        return
    entry = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "event": event,
        "message": str(message),
        "payload": kwargs
    }
    try:
        print(json.dumps(entry, default=str), file=sys.stderr, flush=True)
    except (TypeError, ValueError) as e:
        print(json.dumps({
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": "ERROR",
            "event": "log_serialization_error",
            "message": f"Failed to log event {event}: {str(e)}",
            "payload": {"original_message": str(message)}
        }), file=sys.stderr, flush=True)
