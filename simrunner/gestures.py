# simrunner/gestures.py
from typing import Annotated, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from targeting.resolver import ResolvedPoint
from .config import DEFAULT_POINTER_ACTION, MAX_DELAY_SEC

class DelayStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["delay"] = "delay"
    duration: float = Field(..., gt=0, le=MAX_DELAY_SEC)  # seconds

class PointerStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["pointer"] = "pointer"
    point: ResolvedPoint
    action: str = DEFAULT_POINTER_ACTION

GestureStep = Annotated[Union[DelayStep, PointerStep], Field(discriminator="kind")]

class GestureSequence(BaseModel):
    """
    Ordered steps handed to the execution collaborator. A sequence holding a
    single pointer step is atomic and may be dispatched as one primitive;
    anything else must be replayed step by step, in order.
    """
    model_config = ConfigDict(frozen=True)

    steps: Tuple[GestureStep, ...]

    @field_validator("steps")
    @classmethod
    def _not_empty(cls, steps):
        if not steps:
            raise ValueError("a gesture sequence needs at least one step")
        return steps

    @property
    def is_atomic(self) -> bool:
        return len(self.steps) == 1 and isinstance(self.steps[0], PointerStep)

    @property
    def shape(self) -> str:
        return "atomic" if self.is_atomic else "composite"

    @property
    def pointer_steps(self) -> Tuple[PointerStep, ...]:
        return tuple(s for s in self.steps if isinstance(s, PointerStep))

def build_sequence(
    point: ResolvedPoint,
    pre_delay: Optional[float] = None,
    post_delay: Optional[float] = None,
    action: str = DEFAULT_POINTER_ACTION,
) -> GestureSequence:
    """
    [delay(pre)] + pointer(point) + [delay(post)]. Zero delays are skipped;
    out-of-range delays were rejected by the caller's validation.
    """
    steps = []
    if pre_delay is not None and pre_delay > 0:
        steps.append(DelayStep(duration=pre_delay))
    steps.append(PointerStep(point=point, action=action))
    if post_delay is not None and post_delay > 0:
        steps.append(DelayStep(duration=post_delay))
    return GestureSequence(steps=tuple(steps))
