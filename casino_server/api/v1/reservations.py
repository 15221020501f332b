"""
预约管理路由模块
创建、取消和查询当前会话的午餐预约
"""

from datetime import datetime
from fastapi import APIRouter, Depends

from ...core.clock import get_now
from ...core.error_handler import create_success_response
from ...core.session import SessionState, get_session
from ...models.reservation import ReservationStatus
from ...schemas.common import ErrorResponse
from ...schemas.reservation import (
    ReservationCreateRequest,
    ReservationResponse,
    ReservationListResponse,
    ReservationCancelResponse,
)
from ...services.reservation_service import reservation_service

router = APIRouter()


@router.post("", responses={400: {"model": ErrorResponse}})
def create_reservations(
    req: ReservationCreateRequest,
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """用暂存日期批量创建预约"""
    batch = reservation_service.create_from_selection(session, now, meal_type=req.meal_type)
    data = ReservationListResponse.from_reservations(batch)
    return create_success_response(data.model_dump(mode="json"), "预约成功")


@router.get("/active")
def list_active_reservations(
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """有效预约列表"""
    data = ReservationListResponse.from_reservations(
        reservation_service.list_active(session, now))
    return create_success_response(data.model_dump(mode="json"), "查询成功")


@router.get("/upcoming")
def list_upcoming_reservations(
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """即将到来的预约列表"""
    data = ReservationListResponse.from_reservations(
        reservation_service.list_upcoming(session, now))
    return create_success_response(data.model_dump(mode="json"), "查询成功")


@router.get("/{reservation_id}", responses={404: {"model": ErrorResponse}})
def get_reservation(
    reservation_id: str,
    session: SessionState = Depends(get_session),
):
    """获取单个预约"""
    reservation = reservation_service.get_reservation(session, reservation_id)
    data = ReservationResponse.from_reservation(reservation)
    return create_success_response(data.model_dump(mode="json"), "查询成功")


@router.delete("/{reservation_id}")
def cancel_reservation(
    reservation_id: str,
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """取消预约，重复取消或ID未知时同样返回成功"""
    reservation = reservation_service.cancel(session, reservation_id, now)
    data = ReservationCancelResponse(
        id=reservation_id,
        cancelled=reservation is not None and reservation.status == ReservationStatus.CANCELLED,
        status=reservation.status if reservation else None,
    )
    return create_success_response(data.model_dump(mode="json"), "已取消预约")
