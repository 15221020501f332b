"""
错误响应与异常处理器
所有失败响应统一为 {success: false, error_code, message, details}
"""

import logging
from typing import Any, Dict, Optional
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .exceptions import BaseApplicationError
from ..schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

# 错误码对应的HTTP状态码，未列出的业务错误按 400 处理
STATUS_BY_ERROR_CODE = {
    "VALIDATION_ERROR": 400,
    "INVALID_REQUEST": 400,
    "BUSINESS_RULE_VIOLATION": 422,
    "RESOURCE_NOT_FOUND": 404,
    "RESERVATION_NOT_FOUND": 404,
    "MENU_NOT_FOUND": 404,
    "INTERNAL_ERROR": 500,
}


def status_for(error_code: str) -> int:
    return STATUS_BY_ERROR_CODE.get(error_code, 400)


def error_json(status_code: int, error_code: str, message: str,
               details: Optional[Dict[str, Any]] = None) -> JSONResponse:
    """构造错误响应"""
    body = ErrorResponse(error_code=error_code, message=message, details=details or {})
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def application_error_handler(request: Request, exc: BaseApplicationError) -> JSONResponse:
    """业务异常：按错误码映射状态码"""
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.error_code, exc.message)
    return error_json(status_for(exc.error_code), exc.error_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return error_json(
        exc.status_code, "HTTP_ERROR", str(exc.detail), {"status_code": exc.status_code})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体/参数校验失败"""
    return error_json(
        422, "VALIDATION_ERROR", "请求参数验证失败",
        {"validation_errors": jsonable_encoder(exc.errors())})


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """未捕获的异常记录堆栈后返回 500"""
    logger.exception("Unhandled %s on %s %s", type(exc).__name__, request.method, request.url.path)
    return error_json(
        500, "INTERNAL_ERROR", "系统内部错误", {"error_type": type(exc).__name__})


def create_success_response(data: Any = None, message: str = "操作成功") -> Dict[str, Any]:
    """成功响应，data 为空时省略"""
    response = {"success": True, "message": message}
    if data is not None:
        response["data"] = data
    return response


def create_paginated_response(items: list, total: int, page: int,
                              page_size: int, message: str = "查询成功") -> Dict[str, Any]:
    """分页响应"""
    return create_success_response({
        "items": items,
        "pagination": {
            "total": total,
            "page": page,
            "page_size": page_size,
            "total_pages": (total + page_size - 1) // page_size,
        },
    }, message)
