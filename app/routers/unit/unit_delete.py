from typing import Tuple
from uuid import UUID
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from app.core.core_client import get_page_view
from app.services.unit.unit_page_service import UnitPageController
from app.utils.util_error_map import ServerErrorCode
from app.utils.util_response import error_response, redirect_response

router = APIRouter()

PageView = Tuple[UUID, UnitPageController]

# 開啟刪除確認對話框
@router.post("/{unit_id}/delete", response_class=RedirectResponse)
async def open_delete(
    unit_id: str,
    request: Request,
    view: PageView = Depends(get_page_view)
):
    view_id, controller = view
    if not controller.open_delete(unit_id):
        return _error_handle(ServerErrorCode.UNIT_NOT_FOUND, request)
    return redirect_response(view_id)

# 確認刪除
@router.post("/delete/confirm", response_class=RedirectResponse)
async def confirm(view: PageView = Depends(get_page_view)):
    view_id, controller = view
    await controller.confirm_delete()
    return redirect_response(view_id)

# 取消刪除
@router.post("/delete/cancel", response_class=RedirectResponse)
async def cancel(view: PageView = Depends(get_page_view)):
    view_id, controller = view
    controller.cancel_delete()
    return redirect_response(view_id)

# 自定義錯誤處理
def _error_handle(internal_code: int, request: Request) -> HTMLResponse:
    return error_response(internal_code=internal_code, status_code=404, request=request)
