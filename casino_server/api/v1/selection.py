"""
暂存选择路由模块
管理本次预约前选中的日期和午餐类型
"""

from datetime import datetime
from fastapi import APIRouter, Depends

from ...core.clock import get_now
from ...core.error_handler import create_success_response
from ...core.session import SessionState, get_session
from ...schemas.selection import MealTypeRequest, SelectionResponse, ToggleDateRequest
from ...services.reservation_service import reservation_service

router = APIRouter()


def _selection_data(session: SessionState) -> dict:
    data = SelectionResponse(
        dates=list(session.selection.dates),
        count=len(session.selection),
        meal_type=session.meal_type,
    )
    return data.model_dump(mode="json")


@router.get("")
def get_selection(session: SessionState = Depends(get_session)):
    """获取当前暂存选择"""
    with session.lock:
        return create_success_response(_selection_data(session), "查询成功")


@router.post("/toggle")
def toggle_date(
    req: ToggleDateRequest,
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """切换日期选中状态"""
    with session.lock:
        reservation_service.toggle_date(session, req.date, now)
        return create_success_response(_selection_data(session), "已更新选择")


@router.delete("")
def clear_selection(
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """清空暂存日期"""
    with session.lock:
        reservation_service.clear_selection(session, now)
        return create_success_response(_selection_data(session), "已清空选择")


@router.put("/meal-type")
def select_meal_type(
    req: MealTypeRequest,
    now: datetime = Depends(get_now),
    session: SessionState = Depends(get_session),
):
    """设置午餐类型"""
    with session.lock:
        reservation_service.select_meal_type(session, req.meal_type, now)
        return create_success_response(_selection_data(session), "已更新午餐类型")
