"""
API 错误处理

所有错误响应统一为 {"error": "..."}：
- 业务错误：处理器结果中的 error_code 映射为 HTTP 状态码
- 请求校验失败：422
- 存储故障（文件损坏、存储已关闭）：503，详细信息只写日志，不返回给客户端
"""

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.common.exceptions import DomainException

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    "DUPLICATE_EMAIL": status.HTTP_400_BAD_REQUEST,
    "INVALID_VALUE": status.HTTP_400_BAD_REQUEST,
    "INVALID_MESSAGE_FORMAT": status.HTTP_400_BAD_REQUEST,
    "SENDER_NOT_FOUND": status.HTTP_400_BAD_REQUEST,
    "RECEIVER_NOT_FOUND": status.HTTP_400_BAD_REQUEST,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}

STORAGE_UNAVAILABLE_MESSAGE = "Storage unavailable"


def status_for_error(error_code: Optional[str]) -> int:
    """
    获取错误代码对应的 HTTP 状态码

    Args:
        error_code: 处理器结果中的错误代码

    Returns:
        HTTP 状态码，未知代码按 500 处理
    """
    return ERROR_STATUS_CODES.get(error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求校验失败，合并为一条错误描述"""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        details.append(f"{location}: {message}" if location else message)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "; ".join(details) or "Invalid request"},
    )


async def storage_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """存储故障，对客户端隐藏文件路径等内部信息"""
    logger.error(f"Storage failure on {request.method} {request.url.path}: [{exc.code}] {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": STORAGE_UNAVAILABLE_MESSAGE},
    )
