from app.schemas.unit_request import (
    CreateUnitRequestModel,
    UpdateUnitRequestModel,
    UnitFormModel,
    UnitSearchRequestModel,
)
from app.schemas.unit_response import (
    UnitResponseModel,
    PaginationModel,
    PaginatedUnitsModel,
    OutcomeModel,
    StatusModel,
)

__all__ = [
    "CreateUnitRequestModel",
    "UpdateUnitRequestModel",
    "UnitFormModel",
    "UnitSearchRequestModel",
    "UnitResponseModel",
    "PaginationModel",
    "PaginatedUnitsModel",
    "OutcomeModel",
    "StatusModel",
]
