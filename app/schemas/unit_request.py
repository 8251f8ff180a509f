from typing import Optional
from pydantic import BaseModel, Field, field_validator
from app.models.unit_model import UnitType, UnitStatus, FILTER_ALL


class CreateUnitRequestModel(BaseModel):
    """创建 Unit 请求"""
    name: str = Field(..., min_length=1, max_length=255, description="Unit 名称")
    type: UnitType = Field(..., description="Unit 类型：capsule / cabin")
    status: UnitStatus = Field(..., description="Unit 状态")


class UpdateUnitRequestModel(BaseModel):
    """更新 Unit 请求（只送出有值的字段）"""
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Unit 名称")
    type: Optional[UnitType] = Field(None, description="Unit 类型：capsule / cabin")
    status: Optional[UnitStatus] = Field(None, description="Unit 状态")


class UnitFormModel(BaseModel):
    """新增/编辑对话框的表单值，未选择的字段为 None"""
    name: str = ""
    type: Optional[UnitType] = None
    status: Optional[UnitStatus] = None

    @field_validator("type", "status", mode="before")
    @classmethod
    def validate_choice(cls, v):
        """将空字符串转换为 None"""
        if v == "" or v is None:
            return None
        return v


class UnitSearchRequestModel(BaseModel):
    """列表页搜索与筛选条件"""
    name: str = ""
    status: str = FILTER_ALL
    type: str = FILTER_ALL

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return (v or "").strip()

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v):
        """只接受 "all" 或合法的状态值"""
        if v == "" or v is None:
            return FILTER_ALL
        if v != FILTER_ALL:
            UnitStatus(v)
        return v

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v):
        """只接受 "all" 或合法的类型值"""
        if v == "" or v is None:
            return FILTER_ALL
        if v != FILTER_ALL:
            UnitType(v)
        return v
