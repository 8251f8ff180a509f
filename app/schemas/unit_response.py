import math
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from app.models.unit_model import UnitType, UnitStatus

_PAGINATION_FIELDS = ("page", "size", "total", "totalPages", "total_pages")


class UnitResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    type: UnitType
    status: UnitStatus

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        """列表回传的字段为 ID/Name/Type/Status，统一转为小写"""
        if isinstance(data, dict):
            return {str(key).lower(): value for key, value in data.items()}
        return data


class PaginationModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(..., ge=1)
    size: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: Optional[int] = Field(None, alias="totalPages", ge=0)

    @model_validator(mode="after")
    def fill_total_pages(self) -> "PaginationModel":
        # 伺服器有提供 totalPages 時以伺服器為準
        if self.total_pages is None:
            self.total_pages = math.ceil(self.total / self.size)
        return self


class PaginatedUnitsModel(BaseModel):
    content: List[UnitResponseModel] = Field(default_factory=list)
    pagination: PaginationModel

    @model_validator(mode="before")
    @classmethod
    def lift_flat_pagination(cls, data: Any) -> Any:
        """兼容扁平格式：{content, page, size, total, totalPages}"""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("content") is None:
            data["content"] = []
        if "pagination" not in data:
            data["pagination"] = {
                key: data.pop(key) for key in _PAGINATION_FIELDS if key in data
            }
        return data


class OutcomeModel(BaseModel):
    """新增/更新/删除的结果"""
    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None


class StatusModel(BaseModel):
    """状态对话框内容"""
    model_config = ConfigDict(frozen=True)

    title: str
    message: str = ""
    is_success: bool = False
