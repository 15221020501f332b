"""
日历路由模块
为日期选择器提供可预约性判定，不可预约的日期在前端置灰
"""

from datetime import date, datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ...core.clock import get_now
from ...core.error_handler import create_success_response
from ...core.session import SessionState, get_session
from ...schemas.selection import CalendarResponse, EligibilityResponse
from ...services.reservation_service import reservation_service

router = APIRouter()


@router.get("")
def get_calendar(
    start: Optional[date] = Query(None, description="起始日期，默认今天"),
    days: int = Query(31, description="天数"),
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """获取日历视图"""
    start = start or now.date()
    result = reservation_service.calendar(session, start, days, now)
    data = CalendarResponse(**result)
    return create_success_response(data.model_dump(mode="json"), "查询成功")


@router.get("/eligibility")
def check_eligibility(
    day: date = Query(..., alias="date", description="要判定的日期"),
    now: datetime = Depends(get_now),
):
    """判定单个日期是否可预约"""
    data = EligibilityResponse(
        date=day,
        eligible=reservation_service.is_eligible(day, now),
        earliest_eligible_date=reservation_service.earliest_eligible_date(now),
    )
    return create_success_response(data.model_dump(mode="json"), "查询成功")
