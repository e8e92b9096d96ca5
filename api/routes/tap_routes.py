# api/routes/tap_routes.py
from fastapi import APIRouter, Depends
from targeting.schemas import TapRequest
from ..deps import get_tap_service

router = APIRouter()

@router.post("/simulators/{udid}/tap")
async def tap(udid: str, req: TapRequest, taps = Depends(get_tap_service)):
    result = await taps.tap(udid, req.to_query(), pre_delay=req.pre_delay, post_delay=req.post_delay)
    return {
        "udid": result.udid,
        "point": {"x": result.point.x, "y": result.point.y},
        "description": result.description,
        "shape": result.sequence.shape,
        "steps": [step.model_dump() for step in result.sequence.steps],
        "action_id": result.dispatch.get("action_id"),
    }
