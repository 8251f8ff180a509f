"""
远端 Unit API 客户端
负责 list / detail / create / update / delete 五个 HTTP 调用，并把回应转换为 schema
"""
import logging
from typing import Any, Dict, Optional
import httpx  # type: ignore[import-untyped]
from pydantic import ValidationError as PydanticValidationError
from app.models.unit_model import normalize_filter
from app.schemas.unit_request import CreateUnitRequestModel, UpdateUnitRequestModel
from app.schemas.unit_response import OutcomeModel, PaginatedUnitsModel, UnitResponseModel

logger = logging.getLogger(__name__)

UNIT_PATH = "/unit"


class FetchFailure(Exception):
    """Raised when a request to the unit API did not complete or returned an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class UnitApiClient:
    """
    Talks to the remote unit API through a shared httpx.AsyncClient.
    The session's base_url must point at the API root (e.g. http://127.0.0.1:5000/api).
    """

    def __init__(self, session: httpx.AsyncClient) -> None:
        self._session = session

    # ==================== Read ====================

    async def list_units(
        self,
        page: int,
        size: int,
        name: Optional[str] = None,
        status: Optional[str] = None,
        unit_type: Optional[str] = None,
    ) -> PaginatedUnitsModel:
        params: Dict[str, Any] = {"page": page, "size": size}
        # "all" 只是状态/类型筛选的哨兵值，名称照原样送出
        filters = {
            "name": (name or "").strip() or None,
            "status": normalize_filter(status),
            "type": normalize_filter(unit_type),
        }
        params.update({key: value for key, value in filters.items() if value is not None})

        payload = await self._fetch("GET", UNIT_PATH, params=params)
        try:
            return PaginatedUnitsModel.model_validate(payload.get("data"))
        except PydanticValidationError as e:
            logger.error(f"Unexpected unit list payload: {e}")
            raise FetchFailure("Unexpected unit list payload") from e

    async def get_unit(self, unit_id: str) -> UnitResponseModel:
        payload = await self._fetch("GET", f"{UNIT_PATH}/{unit_id}")
        try:
            return UnitResponseModel.model_validate(payload.get("data"))
        except PydanticValidationError as e:
            logger.error(f"Unexpected unit payload for unit_id={unit_id}: {e}")
            raise FetchFailure("Unexpected unit payload") from e

    # ==================== Mutation ====================

    async def create_unit(self, fields: CreateUnitRequestModel) -> OutcomeModel:
        return await self._mutate("POST", UNIT_PATH, json=fields.model_dump(mode="json"))

    async def update_unit(self, unit_id: str, fields: UpdateUnitRequestModel) -> OutcomeModel:
        return await self._mutate(
            "PUT",
            f"{UNIT_PATH}/{unit_id}",
            json=fields.model_dump(mode="json", exclude_none=True),
        )

    async def delete_unit(self, unit_id: str) -> OutcomeModel:
        return await self._mutate("DELETE", f"{UNIT_PATH}/{unit_id}")

    # ==================== Private Method ====================

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._session.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout when calling unit API: {method} {path}")
            raise FetchFailure("Timeout when connecting to unit API") from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to connect to unit API: {method} {path}: {e}")
            raise FetchFailure("Failed to connect to unit API") from e

        logger.debug(f"Unit API response status: {response.status_code} for {method} {path}")
        return response

    async def _fetch(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """读取类请求：非 2xx 或无法解析一律视为传输失败"""
        response = await self._send(method, path, **kwargs)

        if not response.is_success:
            logger.error(f"Unit API returned status {response.status_code}, response: {response.text[:500]}")
            raise FetchFailure(
                f"Unit API returned status {response.status_code}",
                status_code=response.status_code,
            )

        payload = _parse_json(response)
        if payload is None:
            raise FetchFailure("Unit API response is not a JSON object", status_code=response.status_code)
        return payload

    async def _mutate(self, method: str, path: str, **kwargs: Any) -> OutcomeModel:
        """写入类请求：带 success/message 的回应视为业务结果，其余视为传输失败"""
        response = await self._send(method, path, **kwargs)
        if response.status_code == 204:
            return OutcomeModel(success=True)

        payload = _parse_json(response)
        if payload is not None:
            message = payload.get("message")
            success: Optional[bool] = None
            if "success" in payload:
                success = bool(payload["success"]) and response.is_success
            elif response.is_success:
                success = True
            elif isinstance(message, str):
                success = False

            if success is not None:
                outcome = OutcomeModel(
                    success=success,
                    message=message if isinstance(message, str) else None,
                    data=payload.get("data"),
                )
                if not outcome.success:
                    logger.warning(f"Unit API rejected {method} {path}: {outcome.message}")
                return outcome

        logger.error(f"Unit API returned status {response.status_code}, response: {response.text[:500]}")
        raise FetchFailure(
            f"Unit API returned status {response.status_code}",
            status_code=response.status_code,
        )


def _parse_json(response: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Failed to parse unit API response as JSON: {e}, response text: {response.text[:500]}")
        return None
    if not isinstance(payload, dict):
        return None
    return payload
