# api/main.py
from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from simrunner.errors import (
    AmbiguousMatchError, AxTapError, CommandError, GestureExecutionError, InvalidFrameError,
    MalformedTreeError, MissingFrameError, NoMatchError, ScreenshotError, SimulatorError,
    SimulatorNotBootedError, SimulatorNotFoundError,
)
from .deps import init_services
from .routes import screenshot_routes, simulator_routes, tap_routes, ui_routes

app = FastAPI(title="axtap Simulator Targeting API")

# most specific first
ERROR_STATUS = [
    (NoMatchError, 404),
    (AmbiguousMatchError, 409),
    (MissingFrameError, 422),
    (InvalidFrameError, 422),
    (MalformedTreeError, 502),
    (SimulatorNotFoundError, 404),
    (SimulatorNotBootedError, 409),
    (SimulatorError, 400),
    (GestureExecutionError, 502),
    (ScreenshotError, 502),
    (CommandError, 502),
]

def status_for(error: AxTapError) -> int:
    for cls, status in ERROR_STATUS:
        if isinstance(error, cls):
            return status
    return 500

@app.exception_handler(AxTapError)
async def axtap_error_handler(request: Request, exc: AxTapError):
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": str(exc), "error": type(exc).__name__},
    )

@app.on_event("startup")
async def startup():
    await init_services(app)

app.include_router(simulator_routes.router, prefix="/api")
app.include_router(ui_routes.router, prefix="/api")
app.include_router(tap_routes.router, prefix="/api")
app.include_router(screenshot_routes.router, prefix="/api")
