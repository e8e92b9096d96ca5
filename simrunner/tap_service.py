# simrunner/tap_service.py
from typing import Callable, Optional
from pydantic import BaseModel
from targeting.resolver import ResolvedPoint, resolve_center, resolve_point
from targeting.schemas import ByIdentifier, Coordinates, TargetQuery
from . import metrics
from .accessibility.fetcher import AccessibilityFetcher
from .accessibility.matcher import QueryKind, flatten, match
from .errors import TargetingError
from .gesture_executor import GestureExecutor
from .gestures import GestureSequence, build_sequence
from .logger import log

class TapResult(BaseModel):
    udid: str
    point: ResolvedPoint
    description: str
    sequence: GestureSequence
    dispatch: dict

class TapService:
    """
    Turns a target query into a tap on one simulator.

    fetch -> decode -> flatten -> match -> resolve -> build -> dispatch, run
    strictly in that order. Any failure before dispatch leaves the device
    untouched.
    """

    def __init__(
        self,
        fetcher: Optional[AccessibilityFetcher] = None,
        executor_factory: Optional[Callable[[str], GestureExecutor]] = None,
    ):
        self.fetcher = fetcher or AccessibilityFetcher()
        self.executor_factory = executor_factory or GestureExecutor

    async def resolve(self, udid: str, query: TargetQuery):
        if isinstance(query, Coordinates):
            point = resolve_point(query.x, query.y)
            return point, str(point)

        kind = QueryKind.IDENTIFIER if isinstance(query, ByIdentifier) else QueryKind.LABEL
        try:
            forest = await self.fetcher.fetch_forest(udid)
            element = match(flatten(forest), kind, query.value)
            point = resolve_center(element)
        except TargetingError as e:
            metrics.TARGETING_FAILURES.labels(reason=type(e).__name__).inc()
            log("WARN", "targeting_failed", f"{e} No tap performed.", udid=udid, by=query.by, value=query.value)
            raise
        return point, f"center of matched element at {point}"

    async def tap(
        self,
        udid: str,
        query: TargetQuery,
        pre_delay: Optional[float] = None,
        post_delay: Optional[float] = None,
    ) -> TapResult:
        point, description = await self.resolve(udid, query)
        log("INFO", "tap_resolved", f"Tapping at {description}", udid=udid)

        if pre_delay:
            log("INFO", "tap_pre_delay", f"Pre-delay: {pre_delay}s", udid=udid)
        if post_delay:
            log("INFO", "tap_post_delay", f"Post-delay: {post_delay}s", udid=udid)
        sequence = build_sequence(point, pre_delay=pre_delay, post_delay=post_delay)

        executor = self.executor_factory(udid)
        dispatch = await executor.execute(sequence)
        log("INFO", "tap_done", "Tap completed successfully", udid=udid, x=point.x, y=point.y)
        return TapResult(udid=udid, point=point, description=description, sequence=sequence, dispatch=dispatch)
