from fastapi import APIRouter
from .unit_page import router as unit_page_router
from .unit_form import router as unit_form_router
from .unit_delete import router as unit_delete_router
from .unit_status import router as unit_status_router

# 创建主路由
router = APIRouter()

# 注册各个子路由
router.include_router(unit_page_router, prefix="/unit")
router.include_router(unit_form_router, prefix="/unit")
router.include_router(unit_delete_router, prefix="/unit")
router.include_router(unit_status_router, prefix="/unit")

__all__ = ["router"]
