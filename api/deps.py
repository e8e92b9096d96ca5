from simrunner import config, metrics
from simrunner.accessibility.fetcher import AccessibilityFetcher
from simrunner.logger import log
from simrunner.screenshot_service import ScreenshotService
from simrunner.simulator_manager import SimulatorManager
from simrunner.tap_service import TapService

_sims = None
_fetcher = None
_taps = None
_screenshots = None

async def init_services(app):
    global _sims, _fetcher, _taps, _screenshots
    _sims = SimulatorManager()
    _fetcher = AccessibilityFetcher()
    _taps = TapService(fetcher=_fetcher)
    _screenshots = ScreenshotService(_sims)

    try:
        metrics.start_metrics_server(config.PROMETHEUS_METRICS_PORT)
    except OSError as e:
        log("WARN", "metrics_start_failed", "Could not start Prometheus metrics server; continuing without metrics", error=str(e))

    log("INFO", "api_ready", "Services initialised", health=_sims.get_health())

def get_simulator_manager():
    return _sims

def get_fetcher():
    return _fetcher

def get_tap_service():
    return _taps

def get_screenshot_service():
    return _screenshots
