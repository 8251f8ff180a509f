from typing import Annotated, Tuple
from uuid import UUID
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from app.core.core_client import get_page_view
from app.schemas.unit_request import UnitFormModel
from app.services.unit.unit_page_service import UnitPageController
from app.utils.util_error_map import ServerErrorCode
from app.utils.util_response import error_response, redirect_response

router = APIRouter()

PageView = Tuple[UUID, UnitPageController]

# 開啟新增對話框
@router.post("/create", response_class=RedirectResponse)
async def open_create(view: PageView = Depends(get_page_view)):
    view_id, controller = view
    controller.open_create()
    return redirect_response(view_id)

# 開啟編輯對話框
@router.post("/{unit_id}/edit", response_class=RedirectResponse)
async def open_edit(
    unit_id: str,
    request: Request,
    view: PageView = Depends(get_page_view)
):
    view_id, controller = view
    if not await controller.open_edit(unit_id):
        return _error_handle(ServerErrorCode.UNIT_NOT_FOUND, request)
    return redirect_response(view_id)

# 送出表單
@router.post("/form/submit", response_class=RedirectResponse)
async def submit(
    form_data: Annotated[UnitFormModel, Form()],
    view: PageView = Depends(get_page_view)
):
    view_id, controller = view
    await controller.submit_form(form_data)
    return redirect_response(view_id)

# 關閉對話框並重新整理列表
@router.post("/form/close", response_class=RedirectResponse)
async def close(view: PageView = Depends(get_page_view)):
    view_id, controller = view
    await controller.close_form()
    return redirect_response(view_id)

# 自定義錯誤處理
def _error_handle(internal_code: int, request: Request) -> HTMLResponse:
    return error_response(internal_code=internal_code, status_code=404, request=request)
