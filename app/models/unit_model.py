import enum
from typing import List, Optional


class UnitType(str, enum.Enum):
    """Unit 类型枚举"""
    CAPSULE = "capsule"
    CABIN = "cabin"


class UnitStatus(str, enum.Enum):
    """Unit 状态枚举"""
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    CLEANING_IN_PROGRESS = "Cleaning In Progress"
    MAINTENANCE_NEEDED = "Maintenance Needed"


# 篩選器的「全部」標記，只在 UI 使用，不會送到遠端 API
FILTER_ALL = "all"

# 表格每頁筆數選項
PAGE_SIZE_OPTIONS: List[int] = [5, 10, 20, 25, 50, 100]


def normalize_filter(value: Optional[str]) -> Optional[str]:
    """将空值或 "all" 转换为 None（不筛选）"""
    if value is None:
        return None
    value = value.strip()
    if not value or value == FILTER_ALL:
        return None
    return value
