import logging
from collections import OrderedDict
from typing import Optional, Tuple
from uuid import UUID, uuid4
from app.services.unit.unit_page_service import UnitPageController
from app.services.unit_api_service import UnitApiClient

logger = logging.getLogger(__name__)


class UnitViewRegistry:
    """
    每個瀏覽器頁面（以 cookie 中的 view_id 識別）對應一個列表頁控制器
    超過上限時淘汰最久未使用的頁面並取消其進行中的請求
    """

    def __init__(self, client: UnitApiClient, max_views: int, page_size: int) -> None:
        self._client = client
        self._max_views = max_views
        self._page_size = page_size
        self._views: "OrderedDict[UUID, UnitPageController]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._views)

    def get(self, view_id: Optional[UUID]) -> Optional[UnitPageController]:
        if view_id is None:
            return None
        controller = self._views.get(view_id)
        if controller is not None:
            self._views.move_to_end(view_id)
        return controller

    def create(self) -> Tuple[UUID, UnitPageController]:
        view_id = uuid4()
        controller = UnitPageController(self._client, page_size=self._page_size)
        self._views[view_id] = controller

        while len(self._views) > self._max_views:
            old_id, old_controller = self._views.popitem(last=False)
            old_controller.close()
            logger.debug("Evicted unit view %s", old_id)

        return view_id, controller

    def discard(self, view_id: UUID) -> None:
        controller = self._views.pop(view_id, None)
        if controller is not None:
            controller.close()

    def close_all(self) -> None:
        for controller in self._views.values():
            controller.close()
        self._views.clear()
