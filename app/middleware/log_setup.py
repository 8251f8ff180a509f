"""
开发环境使用的控制台日志中间件
仅在配置启用时记录请求与响应，便于本地调试
"""
import logging
from datetime import datetime
from typing import Any, Dict
from urllib.parse import parse_qsl

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.core_config import settings
from app.utils.util_request import get_request_id, get_view_id


logger = logging.getLogger("unit_admin.dev_logging")
logger.setLevel(logging.INFO)

COLOR_RESET = "\033[0m"
COLOR_REQUEST = "\033[96m"  # Cyan
COLOR_RESPONSE = "\033[92m"  # Green
COLOR_ERROR = "\033[91m"  # Red

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

logger.propagate = False


class DevLoggingMiddleware(BaseHTTPMiddleware):
    """在開發環境中輸出簡易請求/響應日誌"""

    async def dispatch(self, request: Request, call_next):
        if not (settings.LOG_REQUEST_CONSOLE or settings.LOG_RESPONSE_CONSOLE):
            # 未啟用時直接透傳
            return await call_next(request)

        if settings.LOG_REQUEST_CONSOLE:
            request_info = await self._build_request_info(request)
            logger.info(
                "%s==== REQUEST START ====%s\n%s\n%s==== REQUEST END ====%s",
                COLOR_REQUEST,
                COLOR_RESET,
                self._format_block(request_info),
                COLOR_REQUEST,
                COLOR_RESET,
            )

        try:
            response = await call_next(request)
        except Exception as exc:
            if settings.LOG_RESPONSE_CONSOLE:
                logger.error(
                    "%s==== RESPONSE ERROR START ====%s\nurl: %s\nmethod: %s\nerror: %s\n%s==== RESPONSE ERROR END ====%s",
                    COLOR_ERROR,
                    COLOR_RESET,
                    request.url,
                    request.method,
                    exc,
                    COLOR_ERROR,
                    COLOR_RESET,
                )
            raise

        if settings.LOG_RESPONSE_CONSOLE:
            color = COLOR_ERROR if response.status_code >= 400 else COLOR_RESPONSE
            logger.info(
                "%s==== RESPONSE ====%s\nurl: %s\nstatus: %s\nlocation: %s",
                color,
                COLOR_RESET,
                request.url,
                response.status_code,
                response.headers.get("location", "-"),
            )

        return response

    async def _build_request_info(self, request: Request) -> Dict[str, Any]:
        headers = {
            k: ("***" if k.lower() in SENSITIVE_HEADERS else v)
            for k, v in request.headers.items()
        }
        return {
            "request_id": get_request_id(request),
            "view_id": get_view_id(request),
            "method": request.method,
            "url": str(request.url),
            "headers": headers,
            "form": await self._get_form_body(request),
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        }

    async def _get_form_body(self, request: Request) -> Dict[str, str]:
        content_type = request.headers.get("content-type", "")
        if not content_type.startswith("application/x-www-form-urlencoded"):
            return {}
        # request.body() 會快取內容，後續 handler 仍可讀取
        body_bytes = await request.body()
        return dict(parse_qsl(body_bytes.decode("utf-8", errors="ignore")))

    @staticmethod
    def _format_block(payload: Dict[str, Any]) -> str:
        lines = []
        for key, value in payload.items():
            if isinstance(value, dict):
                formatted = "\n".join(f"  {k}: {v}" for k, v in value.items())
                lines.append(f"{key}:\n{formatted}" if formatted else f"{key}: {{}}")
            else:
                lines.append(f"{key}: {value}")
        return "\n".join(lines)
