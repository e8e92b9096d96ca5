# simrunner/config.py
import os

IDB_PATH = os.getenv("AXTAP_IDB_PATH", "idb")
XCRUN_PATH = os.getenv("AXTAP_XCRUN_PATH", "xcrun")

# Upper bound for a single idb / simctl invocation
COMMAND_TIMEOUT_SEC = float(os.getenv("AXTAP_COMMAND_TIMEOUT_SEC", "30"))

# 0 disables the metrics endpoint
PROMETHEUS_METRICS_PORT = int(os.getenv("AXTAP_PROMETHEUS_PORT", "0"))

API_HOST = os.getenv("AXTAP_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("AXTAP_API_PORT", "8000"))

MAX_DELAY_SEC = 10.0
DEFAULT_POINTER_ACTION = "tap"
