"""
Unit admin console 错误码和错误消息定义

UI 只显示人类可读的消息，错误码仅用于日志与查表
"""

ERROR_CODE_TO_MESSAGE = {
    500: "Internal server error",
    501: "Unit service failed",
    502: "Request parameters invalid",
    503: "Request path invalid",
    510: "Failed to retrieve units due to unable connect to server",
    511: "Failed to delete unit due to unable connect to server",
    512: "Failed to connect to server",
    513: "Unit not found",
    520: "unit name is required",
    521: "unit status is required",
    522: "unit type is required",
}


ERROR_NAME_TO_CODE = {
    "INTERNAL_SERVER_ERROR": 500,
    "UNIT_SERVICE_FAILED": 501,
    "REQUEST_PARAMETERS_INVALID": 502,
    "REQUEST_PATH_INVALID": 503,
    "UNIT_FETCH_FAILED": 510,
    "UNIT_DELETE_FAILED": 511,
    "UNIT_SUBMIT_FAILED": 512,
    "UNIT_NOT_FOUND": 513,
    "UNIT_NAME_REQUIRED": 520,
    "UNIT_STATUS_REQUIRED": 521,
    "UNIT_TYPE_REQUIRED": 522,
}


class _ServerErrorCode:
    def __getattr__(self, name: str) -> int:
        if name in ERROR_NAME_TO_CODE:
            return ERROR_NAME_TO_CODE[name]
        raise AttributeError(f"{self.__class__.__name__} has no attribute '{name}'")


class _ServerErrorMessage:
    def __getattr__(self, name: str) -> str:
        if name in ERROR_NAME_TO_CODE:
            return ERROR_CODE_TO_MESSAGE[ERROR_NAME_TO_CODE[name]]
        raise AttributeError(f"{self.__class__.__name__} has no attribute '{name}'")


ServerErrorCode = _ServerErrorCode()
ServerErrorMessage = _ServerErrorMessage()
