"""
日志路由模块
查询当前会话的操作日志
"""

from fastapi import APIRouter, Depends, Query

from ...core.error_handler import create_paginated_response
from ...core.session import SessionState, get_session
from ...models.base import PaginationParams

router = APIRouter()


@router.get("")
def get_session_logs(
    page: int = Query(1, ge=1, description="页码"),
    size: int = Query(10, ge=1, le=100, description="每页大小"),
    session: SessionState = Depends(get_session),
):
    """获取当前会话的操作日志，最新的在前"""
    pagination = PaginationParams(page=page, size=size)
    with session.lock:
        logs = list(reversed(session.logs))

    page_items = logs[pagination.offset:pagination.offset + pagination.size]
    return create_paginated_response(
        [log.model_dump(mode="json") for log in page_items],
        total=len(logs),
        page=pagination.page,
        page_size=pagination.size,
    )
