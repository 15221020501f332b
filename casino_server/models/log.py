"""
操作日志模型
"""

from datetime import datetime
from typing import Any, Dict
from pydantic import Field
from .base import BaseEntity


class OperationLog(BaseEntity):
    """会话内的操作记录"""
    log_id: int = Field(..., description="日志ID")
    action: str = Field(..., description="操作类型")
    detail: Dict[str, Any] = Field(default_factory=dict, description="操作详情")
    created_at: datetime = Field(..., description="记录时间")
