# Services layer for business logic
from app.services.unit_api_service import (
    FetchFailure,
    UnitApiClient,
)
from app.services.unit.unit_form_service import (
    UnitFormController,
)
from app.services.unit.unit_page_service import (
    UnitPageController,
    UnitPageState,
)
from app.services.unit.unit_view_service import (
    UnitViewRegistry,
)
