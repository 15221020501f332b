"""
会话路由模块
"""

from fastapi import APIRouter, Depends, Header

from ...core.error_handler import create_success_response
from ...core.session import DEFAULT_SESSION_ID, SessionStore, get_session_store

router = APIRouter()


@router.delete("")
def reset_session(
    x_session_id: str = Header(default=DEFAULT_SESSION_ID, min_length=1, max_length=64),
    store: SessionStore = Depends(get_session_store),
):
    """丢弃当前会话的全部状态"""
    store.discard(x_session_id)
    return create_success_response({"session_id": x_session_id}, "会话已重置")
