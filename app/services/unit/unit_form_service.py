import logging
from typing import Optional
from pydantic import ValidationError as PydanticValidationError
from app.schemas.unit_request import CreateUnitRequestModel, UpdateUnitRequestModel, UnitFormModel
from app.schemas.unit_response import OutcomeModel, StatusModel, UnitResponseModel
from app.services.unit_api_service import FetchFailure, UnitApiClient
from app.utils.util_error_map import ServerErrorMessage

logger = logging.getLogger(__name__)


class UnitFormController:
    """新增/编辑 Unit 对话框的表单状态"""

    def __init__(self, client: UnitApiClient) -> None:
        self._client = client
        self.unit: Optional[UnitResponseModel] = None
        self.values = UnitFormModel()
        self.busy = False
        # 每次 reset 递增，送出完成时据此判断表单是否已被关闭
        self._session = 0

    @property
    def is_edit(self) -> bool:
        return self.unit is not None

    def seed(self, unit: Optional[UnitResponseModel]) -> None:
        """切換目標 Unit 時重新載入表單值，同一筆則保留目前輸入"""
        current_id = self.unit.id if self.unit else None
        new_id = unit.id if unit else None
        self.unit = unit
        if current_id == new_id:
            return
        self.values = _values_from(unit)

    def reset(self) -> None:
        """清空表单；busy 由进行中的送出自行清除"""
        self.unit = None
        self.values = UnitFormModel()
        self._session += 1

    async def submit(self, values: UnitFormModel) -> Optional[StatusModel]:
        """
        送出表单，回傳狀態對話框內容

        Returns:
            StatusModel: 成功/失败/错误
            None: 上一次送出尚未完成，本次不送出
        """
        if self.busy:
            logger.warning("Unit form submit ignored while a previous submit is in flight")
            return None

        self.busy = True
        self.values = values
        unit = self.unit
        session = self._session
        try:
            message = _missing_field_message(values)
            if message:
                return StatusModel(title="Failed", message=message, is_success=False)

            outcome = await self._dispatch(unit, values)
            if outcome.success:
                if session == self._session:
                    self.values = UnitFormModel()
                return StatusModel(
                    title="Success",
                    message="Unit updated" if unit is not None else "Unit created",
                    is_success=True,
                )
            return StatusModel(
                title="Failed",
                message=outcome.message or ServerErrorMessage.UNIT_SERVICE_FAILED,
                is_success=False,
            )
        except PydanticValidationError as e:
            logger.warning(f"Invalid unit form values: {e}")
            return StatusModel(
                title="Failed",
                message=ServerErrorMessage.REQUEST_PARAMETERS_INVALID,
                is_success=False,
            )
        except FetchFailure as e:
            logger.error(f"Error submit unit: {e}")
            return StatusModel(
                title="Error",
                message=ServerErrorMessage.UNIT_SUBMIT_FAILED,
                is_success=False,
            )
        finally:
            self.busy = False

    async def _dispatch(self, unit: Optional[UnitResponseModel], values: UnitFormModel) -> OutcomeModel:
        if unit is not None:
            return await self._client.update_unit(
                unit.id,
                UpdateUnitRequestModel(name=values.name, type=values.type, status=values.status),
            )
        return await self._client.create_unit(
            CreateUnitRequestModel(name=values.name, type=values.type, status=values.status)
        )


def _values_from(unit: Optional[UnitResponseModel]) -> UnitFormModel:
    if unit is None:
        return UnitFormModel()
    return UnitFormModel(name=unit.name, type=unit.type, status=unit.status)


def _missing_field_message(values: UnitFormModel) -> Optional[str]:
    if not values.name.strip():
        return ServerErrorMessage.UNIT_NAME_REQUIRED
    if values.status is None:
        return ServerErrorMessage.UNIT_STATUS_REQUIRED
    if values.type is None:
        return ServerErrorMessage.UNIT_TYPE_REQUIRED
    return None
