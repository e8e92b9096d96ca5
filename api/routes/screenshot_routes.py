# api/routes/screenshot_routes.py
from typing import Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from ..deps import get_screenshot_service

router = APIRouter()

class ScreenshotRequest(BaseModel):
    output: Optional[str] = None

@router.post("/simulators/{udid}/screenshot")
async def screenshot(udid: str, req: Optional[ScreenshotRequest] = None, shots = Depends(get_screenshot_service)):
    result = await shots.capture(udid, output=req.output if req else None)
    return result.model_dump()
