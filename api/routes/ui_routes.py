# api/routes/ui_routes.py
from fastapi import APIRouter, Depends
from simrunner.accessibility.matcher import flatten
from ..deps import get_fetcher

router = APIRouter()

@router.get("/simulators/{udid}/ui")
async def describe_ui(udid: str, flat: bool = False, fetcher = Depends(get_fetcher)):
    forest = await fetcher.fetch_forest(udid)
    if flat:
        # children are left out so each node shows up once
        nodes = [el.model_dump(by_alias=True, exclude={"children"}) for el in flatten(forest)]
        return {"udid": udid, "count": len(nodes), "elements": nodes}
    return {"udid": udid, "roots": [el.model_dump(by_alias=True) for el in forest]}
