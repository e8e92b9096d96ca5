# api/routes/simulator_routes.py
from fastapi import APIRouter, Depends
from ..deps import get_simulator_manager

router = APIRouter()

@router.get("/health")
def health(sims = Depends(get_simulator_manager)):
    return {"status": "ok", "tools": sims.get_health()}

@router.get("/simulators")
async def list_simulators(booted_only: bool = False, sims = Depends(get_simulator_manager)):
    found = await sims.list_simulators()
    if booted_only:
        found = [s for s in found if s.is_booted]
    return {"simulators": [s.model_dump() for s in found]}
