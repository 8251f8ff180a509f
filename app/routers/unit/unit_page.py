from typing import Annotated, Tuple
from uuid import UUID
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from app.core.core_client import get_page_view
from app.schemas.unit_request import UnitSearchRequestModel
from app.services.unit.unit_page_service import UnitPageController
from app.utils.util_request import get_request_id
from app.utils.util_response import page_response, redirect_response
from app.views.unit_page_view import render_unit_page

router = APIRouter()

PageView = Tuple[UUID, UnitPageController]

# 路由入口
@router.get("", response_class=HTMLResponse)
async def page(
    request: Request,
    view: PageView = Depends(get_page_view)
):
    get_request_id(request)
    view_id, controller = view
    return page_response(render_unit_page(controller), view_id=view_id)

# 搜尋與篩選（回到第一頁）
@router.post("/search", response_class=RedirectResponse)
async def search(
    search_data: Annotated[UnitSearchRequestModel, Form()],
    view: PageView = Depends(get_page_view)
):
    view_id, controller = view
    await controller.search(search_data)
    return redirect_response(view_id)

# 上一頁
@router.post("/page/previous", response_class=RedirectResponse)
async def previous_page(view: PageView = Depends(get_page_view)):
    view_id, controller = view
    await controller.previous_page()
    return redirect_response(view_id)

# 下一頁
@router.post("/page/next", response_class=RedirectResponse)
async def next_page(view: PageView = Depends(get_page_view)):
    view_id, controller = view
    await controller.next_page()
    return redirect_response(view_id)

# 每頁筆數（回到第一頁）
@router.post("/page/size", response_class=RedirectResponse)
async def page_size(
    size: int = Form(..., ge=1, le=100),
    view: PageView = Depends(get_page_view)
):
    view_id, controller = view
    await controller.set_page_size(size)
    return redirect_response(view_id)
