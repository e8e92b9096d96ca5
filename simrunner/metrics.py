from prometheus_client import start_http_server, Counter, Gauge, Histogram
import threading
from .logger import log

# Metrics
TAPS_TOTAL = Counter("axtap_taps_total", "Gesture sequences dispatched", ["shape"])
TARGETING_FAILURES = Counter("axtap_targeting_failures_total", "Targeting operations that dispatched nothing", ["reason"])
SNAPSHOT_FETCH_SECONDS = Histogram("axtap_snapshot_fetch_seconds", "Time spent fetching an accessibility snapshot")
SIMULATORS_BOOTED = Gauge("axtap_simulators_booted", "Booted simulators seen by the last listing")

_metrics_server_started = False
_metrics_lock = threading.Lock()

def start_metrics_server(port: int):
    global _metrics_server_started
    with _metrics_lock:
        if _metrics_server_started or not port:
            return
        start_http_server(port)
        _metrics_server_started = True
        log("INFO", "metrics_started", f"Prometheus metrics server started on port {port}")
