"""
预约相关数据模型
"""

import datetime as dt
from enum import Enum
from pydantic import Field
from .base import BaseEntity
from ..utils.dates import start_of_day, to_utc


class MealType(str, Enum):
    """午餐类型枚举"""
    NORMAL = "normal"               # 普通
    HYPOCALORIC = "hipocalorico"    # 低热量
    VEGETARIAN = "vegetariano"      # 素食


class ReservationStatus(str, Enum):
    """预约状态枚举"""
    CONFIRMED = "confirmed"   # 已确认
    PENDING = "pending"       # 待确认（保留，目前没有任何操作会产生该状态）
    CANCELLED = "cancelled"   # 已取消


class Reservation(BaseEntity):
    """预约记录，只有 status 会通过取消发生变化"""
    id: str = Field(..., description="预约ID")
    date: dt.date = Field(..., description="预约日期")
    meal_type: MealType = Field(..., description="午餐类型")
    status: ReservationStatus = Field(ReservationStatus.CONFIRMED, description="预约状态")

    @property
    def is_active(self) -> bool:
        """未取消即为有效"""
        return self.status != ReservationStatus.CANCELLED

    def is_after(self, now: dt.datetime) -> bool:
        """预约日是否严格晚于 now（按当天零点比较）"""
        return to_utc(start_of_day(self.date, now.tzinfo)) > to_utc(now)

    def cancelled(self) -> "Reservation":
        """返回已取消的副本；已取消的记录原样返回"""
        if not self.is_active:
            return self
        return self.model_copy(update={"status": ReservationStatus.CANCELLED})
