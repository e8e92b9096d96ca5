# targeting/resolver.py
from pydantic import BaseModel, ConfigDict
from simrunner.accessibility.element import AccessibilityElement
from simrunner.errors import InvalidFrameError, MissingFrameError

class ResolvedPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

def resolve_point(x: float, y: float) -> ResolvedPoint:
    # Coordinates were validated non-negative at the boundary
    return ResolvedPoint(x=x, y=y)

def resolve_center(element: AccessibilityElement) -> ResolvedPoint:
    """
    Center of the element's frame, at full float precision.
    Geometry is checked first so callers can tell "no frame" from
    "degenerate frame".
    """
    frame = element.frame
    if frame is None:
        raise MissingFrameError()
    # written as a negation so NaN sizes are rejected too
    if not (frame.width > 0 and frame.height > 0):
        raise InvalidFrameError(frame.width, frame.height)
    return ResolvedPoint(
        x=frame.x + frame.width / 2.0,
        y=frame.y + frame.height / 2.0,
    )
