import logging
from typing import Optional, Tuple
from uuid import UUID
import httpx  # type: ignore[import-untyped]
from fastapi import Request
from app.core.core_config import settings
from app.services.unit_api_service import UnitApiClient
from app.services.unit.unit_page_service import UnitPageController
from app.services.unit.unit_view_service import UnitViewRegistry
from app.utils.util_request import get_view_id

# 禁用 httpx 的 INFO 级别日志（只保留 WARNING 和 ERROR）
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


# 创建远端 Unit API 的共用连接
def create_http_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.unit_api_base_url,
        timeout=settings.UNIT_API_TIMEOUT,
        follow_redirects=True,  # 自动跟随重定向
        headers={"Accept": "application/json"},
        transport=transport,
    )


# 创建页面注册表
def create_view_registry(http_client: httpx.AsyncClient) -> UnitViewRegistry:
    return UnitViewRegistry(
        UnitApiClient(http_client),
        max_views=settings.MAX_VIEWS,
        page_size=settings.DEFAULT_PAGE_SIZE,
    )


# 依赖注入：获取页面注册表
def get_unit_views(request: Request) -> UnitViewRegistry:
    return request.app.state.unit_views


# 依赖注入：获取远端 API 客户端
def get_unit_client(request: Request) -> UnitApiClient:
    return UnitApiClient(request.app.state.http_client)


# 依赖注入：获取当前页面（cookie 无效时建立新页面并载入第一页）
async def get_page_view(request: Request) -> Tuple[UUID, UnitPageController]:
    registry = get_unit_views(request)
    view_id = get_view_id(request)
    controller = registry.get(view_id)

    if view_id is None or controller is None:
        view_id, controller = registry.create()
        await controller.load()

    return view_id, controller
