from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    # API 配置
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8010  # Unit admin console uses dedicated port
    API_DEBUG: bool = False
    APP_ENV: str = "dev"
    APP_NAME: str = "unit-admin"

    # 远端 Unit API 配置（可透過環境變數覆寫）
    UNIT_API_URL: str = "http://127.0.0.1:5000/api"
    UNIT_API_TIMEOUT: Optional[float] = 10.0  # 空值表示不设超时

    # 页面配置
    DEFAULT_PAGE_SIZE: int = 10
    MAX_VIEWS: int = 256
    VIEW_COOKIE_NAME: str = "unit_view_id"

    # 控制台日志开关（主要用于本地開發調試）
    LOG_REQUEST_CONSOLE: bool = False
    LOG_RESPONSE_CONSOLE: bool = False

    @field_validator("UNIT_API_TIMEOUT", mode="before")
    @classmethod
    def validate_timeout(cls, v):
        """将空字符串转换为 None"""
        if v == "" or v is None:
            return None
        return v

    @property
    def unit_api_base_url(self) -> str:
        """去除末尾斜杠的 API 基础 URL"""
        return self.UNIT_API_URL.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# 全局配置实例
settings = Settings()
