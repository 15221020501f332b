"""
预约相关的请求/响应模式
"""

from pydantic import BaseModel, Field
import datetime as dt
from typing import List, Optional
from ..models.reservation import MealType, Reservation, ReservationStatus


class ReservationCreateRequest(BaseModel):
    """预约创建请求，日期取自会话中的暂存选择"""
    meal_type: Optional[MealType] = Field(None, description="午餐类型，为空时使用会话当前类型")


class ReservationResponse(BaseModel):
    """预约响应"""
    id: str = Field(..., description="预约ID")
    date: dt.date = Field(..., description="预约日期")
    meal_type: MealType = Field(..., description="午餐类型")
    status: ReservationStatus = Field(..., description="预约状态")

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> "ReservationResponse":
        return cls.model_validate(reservation.model_dump())


class ReservationListResponse(BaseModel):
    """预约列表响应"""
    reservations: List[ReservationResponse] = Field(..., description="预约列表")
    count: int = Field(..., description="数量")

    @classmethod
    def from_reservations(cls, reservations: List[Reservation]) -> "ReservationListResponse":
        items = [ReservationResponse.from_reservation(r) for r in reservations]
        return cls(reservations=items, count=len(items))


class ReservationCancelResponse(BaseModel):
    """预约取消响应"""
    id: str = Field(..., description="预约ID")
    cancelled: bool = Field(..., description="该ID当前是否处于已取消状态")
    status: Optional[ReservationStatus] = Field(None, description="预约状态，ID未知时为空")
