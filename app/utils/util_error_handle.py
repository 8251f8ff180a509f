from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.utils.util_response import error_response
from app.utils.util_error_map import ServerErrorCode

# HTTP 异常处理器
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
    if exc.status_code == 404:
        # 请求路径不存在 → Request path invalid
        internal_code = ServerErrorCode.REQUEST_PATH_INVALID
    elif exc.status_code == 422:
        # 参数验证错误 → Request parameters invalid
        internal_code = ServerErrorCode.REQUEST_PARAMETERS_INVALID
    else:
        # 其他 HTTP 错误 → Internal server error
        internal_code = ServerErrorCode.INTERNAL_SERVER_ERROR

    return error_response(
        internal_code=internal_code,
        internal_msg=str(exc.detail),
        status_code=exc.status_code,
        request=request
    )

# 请求验证异常处理器
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> HTMLResponse:
    return error_response(
        internal_code=ServerErrorCode.REQUEST_PARAMETERS_INVALID,
        internal_msg=str(exc),
        status_code=422,
        request=request
    )

# 全局异常处理器
async def global_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    return error_response(
        internal_code=ServerErrorCode.INTERNAL_SERVER_ERROR,
        internal_msg=str(exc),
        request=request
    )
