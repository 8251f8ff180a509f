"""
Unit 列表页控制器
持有單一頁面的暫存狀態（分頁、篩選、表格資料、選取與對話框），並串接遠端 API
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Union
from app.core.core_config import settings
from app.models.unit_model import FILTER_ALL
from app.schemas.unit_request import UnitFormModel, UnitSearchRequestModel
from app.schemas.unit_response import PaginatedUnitsModel, StatusModel, UnitResponseModel
from app.services.unit.unit_form_service import UnitFormController
from app.services.unit_api_service import FetchFailure, UnitApiClient
from app.utils.util_error_map import ServerErrorMessage

logger = logging.getLogger(__name__)


# ==================== Dialog ====================

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Creating:
    pass


@dataclass(frozen=True)
class Editing:
    unit: UnitResponseModel


@dataclass(frozen=True)
class ConfirmingDelete:
    unit: UnitResponseModel


@dataclass(frozen=True)
class ShowingStatus:
    status: StatusModel
    # 關閉失敗訊息後要回到的對話框
    resume: "UnitDialog" = field(default_factory=Idle)


UnitDialog = Union[Idle, Creating, Editing, ConfirmingDelete, ShowingStatus]


# ==================== State ====================

@dataclass
class UnitPageState:
    page: int = 1
    page_size: int = 10
    name_filter: str = ""
    status_filter: str = FILTER_ALL
    type_filter: str = FILTER_ALL
    loading: bool = True
    units: List[UnitResponseModel] = field(default_factory=list)
    total: int = 0
    total_pages: int = 0
    selection: Optional[UnitResponseModel] = None
    dialog: UnitDialog = field(default_factory=Idle)

    @property
    def can_go_previous(self) -> bool:
        return self.page > 1

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages


# ==================== Controller ====================

class UnitPageController:
    """
    Drives one unit list page view.

    Every change of page, size or filters re-fetches the page from the unit API.
    Each fetch is tagged with a generation number so that a slower, older
    response never overwrites a newer one.
    """

    def __init__(self, client: UnitApiClient, page_size: Optional[int] = None) -> None:
        self._client = client
        self.state = UnitPageState(page_size=page_size or settings.DEFAULT_PAGE_SIZE)
        self.form = UnitFormController(client)
        self.mounted = False
        self.closed = False
        self._generation = 0
        self._inflight: Set[asyncio.Task] = set()

    # ---------- list ----------

    async def load(self) -> None:
        if self.closed:
            return

        self.mounted = True
        self._generation += 1
        generation = self._generation
        self.state.loading = True

        task = asyncio.ensure_future(self._client.list_units(
            self.state.page,
            self.state.page_size,
            name=self.state.name_filter,
            status=self.state.status_filter,
            unit_type=self.state.type_filter,
        ))
        self._inflight.add(task)
        try:
            result = await task
        except asyncio.CancelledError:
            if self.closed and task.cancelled():
                logger.debug("Unit list request cancelled for closed view")
                return
            raise
        except FetchFailure as e:
            if generation != self._generation:
                logger.debug("Discarding stale unit list failure (generation %s)", generation)
                return
            logger.error(f"Error fetch units: {e}")
            self.state.loading = False
            self._show_status(StatusModel(
                title="Failed",
                message=ServerErrorMessage.UNIT_FETCH_FAILED,
                is_success=False,
            ))
            return
        finally:
            self._inflight.discard(task)

        if generation != self._generation:
            logger.debug("Discarding stale unit list response (generation %s)", generation)
            return
        self._apply_page(result)

    async def search(self, search: UnitSearchRequestModel) -> None:
        self.state.name_filter = search.name
        self.state.status_filter = search.status
        self.state.type_filter = search.type
        self.state.page = 1
        await self.load()

    async def set_name_filter(self, name: str) -> None:
        search = UnitSearchRequestModel(
            name=name, status=self.state.status_filter, type=self.state.type_filter
        )
        await self.search(search)

    async def set_status_filter(self, status: str) -> None:
        search = UnitSearchRequestModel(
            name=self.state.name_filter, status=status, type=self.state.type_filter
        )
        await self.search(search)

    async def set_type_filter(self, unit_type: str) -> None:
        search = UnitSearchRequestModel(
            name=self.state.name_filter, status=self.state.status_filter, type=unit_type
        )
        await self.search(search)

    async def set_page_size(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"page size must be positive, got {size}")
        self.state.page_size = size
        self.state.page = 1
        await self.load()

    async def previous_page(self) -> None:
        if not self.state.can_go_previous:
            return
        self.state.page -= 1
        await self.load()

    async def next_page(self) -> None:
        if not self.state.can_go_next:
            return
        self.state.page += 1
        await self.load()

    # ---------- create / edit ----------

    def open_create(self) -> None:
        self.state.selection = None
        self.form.seed(None)
        self.state.dialog = Creating()

    async def open_edit(self, unit_id: str) -> bool:
        row = self._find_row(unit_id)
        if row is None:
            return False

        # 以明细接口取得最新资料，失败时沿用列表中的资料
        try:
            unit = await self._client.get_unit(row.id)
        except FetchFailure as e:
            logger.warning(f"Failed to refresh unit {row.id}, using list row: {e}")
            unit = row

        self.state.selection = unit
        self.form.seed(unit)
        self.state.dialog = Editing(unit)
        return True

    async def submit_form(self, values: UnitFormModel) -> None:
        dialog = self.state.dialog
        if not isinstance(dialog, (Creating, Editing)):
            logger.warning("Unit form submitted while no form dialog is open")
            return

        status = await self.form.submit(values)
        if status is None:
            return

        if self.state.dialog is not dialog:
            logger.info("Discarding unit form result, dialog changed while submitting")
            return
        self._show_status(status, resume=dialog)

    async def close_form(self) -> None:
        self.form.reset()
        self.state.selection = None
        self.state.dialog = Idle()
        await self.load()

    # ---------- delete ----------

    def open_delete(self, unit_id: str) -> bool:
        unit = self._find_row(unit_id)
        if unit is None:
            return False
        self.state.selection = unit
        self.state.dialog = ConfirmingDelete(unit)
        return True

    def cancel_delete(self) -> None:
        self.state.selection = None
        self.state.dialog = Idle()

    async def confirm_delete(self) -> None:
        dialog = self.state.dialog
        if not isinstance(dialog, ConfirmingDelete):
            logger.warning("Unit delete confirmed without a selected unit")
            return

        # 删除目标取自对话框，选取在请求结束后一律清除
        unit = dialog.unit
        try:
            outcome = await self._client.delete_unit(unit.id)
        except FetchFailure as e:
            logger.error(f"Failed to delete unit {unit.id}: {e}")
            message = ServerErrorMessage.UNIT_DELETE_FAILED
        else:
            if outcome.success:
                if self.state.dialog is dialog:
                    self.state.selection = None
                    self.state.dialog = Idle()
                await self._reload_after_delete()
                return
            message = outcome.message or ServerErrorMessage.UNIT_DELETE_FAILED

        if self.state.dialog is not dialog:
            logger.info(f"Discarding delete failure for unit {unit.id}, dialog changed")
            return
        self.state.selection = None
        # 失败后回到确认对话框，可重试或取消
        self._show_status(
            StatusModel(title="Failed", message=message, is_success=False),
            resume=dialog,
        )

    # ---------- status ----------

    async def dismiss_status(self) -> None:
        dialog = self.state.dialog
        if not isinstance(dialog, ShowingStatus):
            return
        if dialog.status.is_success and isinstance(dialog.resume, (Creating, Editing)):
            await self.close_form()
            return
        self.state.dialog = dialog.resume

    # ---------- lifecycle ----------

    def close(self) -> None:
        """頁面卸載：取消進行中的請求"""
        self.closed = True
        for task in list(self._inflight):
            task.cancel()

    # ==================== Private Method ====================

    def _apply_page(self, result: PaginatedUnitsModel) -> None:
        self.state.units = list(result.content)
        self.state.total = result.pagination.total
        self.state.total_pages = result.pagination.total_pages or 0
        self.state.loading = False

    async def _reload_after_delete(self) -> None:
        await self.load()
        # 删掉最后一页的最后一笔后退回上一页
        last_page = max(self.state.total_pages, 1)
        if self.state.page > last_page and not self.state.loading:
            self.state.page = last_page
            await self.load()

    def _show_status(self, status: StatusModel, resume: Optional[UnitDialog] = None) -> None:
        if resume is None:
            resume = self.state.dialog
        # 不疊加狀態對話框
        if isinstance(resume, ShowingStatus):
            resume = resume.resume
        self.state.dialog = ShowingStatus(status=status, resume=resume)

    def _find_row(self, unit_id: str) -> Optional[UnitResponseModel]:
        for unit in self.state.units:
            if unit.id == unit_id:
                return unit
        logger.warning(f"Unit {unit_id} is not on the current page")
        return None

