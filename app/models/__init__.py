"""
Unit admin console domain enumerations.
"""
from app.models.unit_model import (
    UnitType,
    UnitStatus,
    FILTER_ALL,
    PAGE_SIZE_OPTIONS,
    normalize_filter,
)

__all__ = [
    "UnitType",
    "UnitStatus",
    "FILTER_ALL",
    "PAGE_SIZE_OPTIONS",
    "normalize_filter",
]
