import logging
from typing import Optional
from uuid import UUID
from fastapi import status, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from app.core.core_config import settings
from app.schemas.unit_response import StatusModel
from app.utils.util_error_map import ERROR_CODE_TO_MESSAGE, ServerErrorCode
from app.utils.util_request import get_request_id
from app.views.layout import render_document
from app.views.unit_dialog_view import render_status_dialog

logger = logging.getLogger(__name__)

PAGE_PATH = "/unit"


# 頁面響應
def page_response(content: str, view_id: Optional[UUID] = None) -> HTMLResponse:
    response = HTMLResponse(content=content, status_code=status.HTTP_200_OK)
    if view_id is not None:
        _set_view_cookie(response, view_id)
    return response

# 動作完成後轉回列表頁（POST/Redirect/GET）
def redirect_response(view_id: Optional[UUID] = None) -> RedirectResponse:
    response = RedirectResponse(url=PAGE_PATH, status_code=status.HTTP_303_SEE_OTHER)
    if view_id is not None:
        _set_view_cookie(response, view_id)
    return response

# 錯誤響應（以狀態對話框呈現）
def error_response(
    internal_code: int = ServerErrorCode.INTERNAL_SERVER_ERROR,
    internal_msg: Optional[str] = None,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    request: Optional[Request] = None
) -> HTMLResponse:
    default_message = ERROR_CODE_TO_MESSAGE[ServerErrorCode.INTERNAL_SERVER_ERROR]
    external_message = ERROR_CODE_TO_MESSAGE.get(internal_code, default_message)
    logger.error(
        "request_id=%s code=%s message=%s",
        get_request_id(request),
        internal_code,
        internal_msg or external_message,
    )
    dialog = render_status_dialog(
        StatusModel(title="Failed", message=external_message, is_success=False)
    )
    return HTMLResponse(
        content=render_document("Unit Management", dialog),
        status_code=status_code,
    )

def _set_view_cookie(response: Response, view_id: UUID) -> None:
    response.set_cookie(
        key=settings.VIEW_COOKIE_NAME,
        value=str(view_id),
        httponly=True,
        samesite="lax",
        path="/",
    )
