from typing import Optional
from uuid import UUID
from fastapi import Request
from app.core.core_config import settings

_REQUEST_ID_KEY: str = "request_id"
_VIEW_ID_KEY: str = "view_id"

def get_request_id(request: Optional[Request] = None) -> Optional[UUID]:
    if request is None:
        return None

    result_id: Optional[UUID] = getattr(request.state, _REQUEST_ID_KEY, None)

    if result_id is None:
        result_id = _parse_id(request.headers.get("x-request-id"))
        if result_id is not None:
            setattr(request.state, _REQUEST_ID_KEY, result_id)

    return result_id

def get_view_id(request: Optional[Request] = None) -> Optional[UUID]:
    if request is None:
        return None

    result_id: Optional[UUID] = getattr(request.state, _VIEW_ID_KEY, None)

    if result_id is None:
        result_id = _parse_id(request.cookies.get(settings.VIEW_COOKIE_NAME))
        if result_id is not None:
            setattr(request.state, _VIEW_ID_KEY, result_id)

    return result_id

def _parse_id(value: Optional[str]) -> Optional[UUID]:
    if not value:
        return None

    try:
        return UUID(value)
    except (ValueError, TypeError):
        return None
