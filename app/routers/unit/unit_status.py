from typing import Tuple
from uuid import UUID
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from app.core.core_client import get_page_view
from app.services.unit.unit_page_service import UnitPageController
from app.utils.util_response import redirect_response

router = APIRouter()

# 關閉狀態對話框（成功/失敗的後續行為由列表頁決定）
@router.post("/status/dismiss", response_class=RedirectResponse)
async def dismiss(view: Tuple[UUID, UnitPageController] = Depends(get_page_view)):
    view_id, controller = view
    await controller.dismiss_status()
    return redirect_response(view_id)
