from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from app.core.core_client import get_unit_client
from app.core.core_config import settings
from app.services.unit_api_service import FetchFailure, UnitApiClient
from app.utils.util_request import get_request_id

router = APIRouter()

# 路由入口
@router.get("/health")
async def health_check(
    request: Request,
    client: UnitApiClient = Depends(get_unit_client)
):
    get_request_id(request)
    try:
        # 檢查遠端 Unit API 是否可連線
        await client.list_units(page=1, size=1)
        upstream = "reachable"
    except FetchFailure:
        upstream = "unreachable"

    return JSONResponse(
        content={
            "status": "healthy",
            "service": settings.APP_NAME,
            "upstream": upstream,
        }
    )
