"""
会话状态管理
每个交互会话独立持有暂存日期、午餐类型、预约台账和操作日志，仅保存在内存中
会话数量和每个会话的日志条数都有上限
"""

import logging
import threading
from collections import OrderedDict, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Deque, Dict, Optional
from fastapi import Depends, Header

from ..config.settings import settings
from ..models.ledger import ReservationLedger
from ..models.log import OperationLog
from ..models.reservation import MealType
from ..models.selection import DateSelectionSet

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "default"


@dataclass
class SessionState:
    """单个会话的状态"""
    session_id: str
    selection: DateSelectionSet = field(default_factory=DateSelectionSet)
    meal_type: MealType = MealType.NORMAL
    ledger: ReservationLedger = field(default_factory=ReservationLedger)
    logs: Deque[OperationLog] = field(
        default_factory=lambda: deque(maxlen=settings.max_session_logs))
    log_count: int = 0
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def record(self, action: str, detail: Dict[str, Any], now: datetime) -> OperationLog:
        """追加一条操作日志，超出上限时丢弃最早的日志，log_id 继续递增"""
        self.log_count += 1
        entry = OperationLog(
            log_id=self.log_count,
            action=action,
            detail=detail,
            created_at=now,
        )
        self.logs.append(entry)
        logger.info("session=%s action=%s detail=%s", self.session_id, action, detail)
        return entry


class SessionStore:
    """内存会话仓库，按最近访问顺序淘汰"""

    def __init__(self, max_sessions: Optional[int] = None):
        self.max_sessions = max_sessions or settings.max_sessions
        self._sessions: "OrderedDict[str, SessionState]" = OrderedDict()
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str) -> SessionState:
        """获取会话，不存在时创建"""
        with self._lock:
            state = self._sessions.get(session_id)
            if state is not None:
                self._sessions.move_to_end(session_id)
                return state

            state = SessionState(session_id=session_id)
            self._sessions[session_id] = state
            logger.debug("Created session %s", session_id)
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Evicted idle session %s", evicted)
            return state

    def discard(self, session_id: str) -> None:
        """丢弃会话，不存在时忽略"""
        with self._lock:
            self._sessions.pop(session_id, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


# 全局会话仓库实例
session_store = SessionStore()


def get_session_store() -> SessionStore:
    """FastAPI依赖：会话仓库"""
    return session_store


def get_session(
    x_session_id: str = Header(default=DEFAULT_SESSION_ID, min_length=1, max_length=64),
    store: SessionStore = Depends(get_session_store),
) -> SessionState:
    """从 X-Session-Id 请求头获取当前会话"""
    return store.get_or_create(x_session_id)
