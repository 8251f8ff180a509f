from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.routers import health, unit
from app.core.core_config import settings
from app.core.core_client import create_http_client, create_view_registry
from app.utils.util_error_handle import (
    http_exception_handler,
    validation_exception_handler,
    global_exception_handler
)
from app.middleware.log_setup import DevLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 远端 Unit API 共用连接与页面注册表
    app.state.http_client = create_http_client()
    app.state.unit_views = create_view_registry(app.state.http_client)
    try:
        yield
    finally:
        app.state.unit_views.close_all()
        await app.state.http_client.aclose()


app = FastAPI(
    title="Unit Admin",
    description="Administrative console for capsule/cabin units backed by the remote unit API",
    version="0.1.0",
    debug=settings.API_DEBUG,
    lifespan=lifespan
)

# 開發用 Console 日誌中間件（僅在配置為 true 時生效）
app.add_middleware(DevLoggingMiddleware)

# 注册异常处理器 - 统一以状态对话框呈现
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)  # 捕获所有未处理的异常

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(unit.router, tags=["unit"])

@app.get("/")
async def root():
    return RedirectResponse(url="/unit")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.API_DEBUG)
