"""
日期选择与日历相关的请求/响应模式
"""

from pydantic import BaseModel, Field
import datetime as dt
from typing import List
from ..models.reservation import MealType


class ToggleDateRequest(BaseModel):
    """切换日期请求"""
    date: dt.date = Field(..., description="要切换的日期")


class MealTypeRequest(BaseModel):
    """午餐类型选择请求"""
    meal_type: MealType = Field(..., description="午餐类型")


class SelectionResponse(BaseModel):
    """暂存选择响应"""
    dates: List[dt.date] = Field(..., description="已选日期，升序")
    count: int = Field(..., description="已选天数")
    meal_type: MealType = Field(..., description="当前午餐类型")


class EligibilityResponse(BaseModel):
    """单日可预约性"""
    earliest_eligible_date: dt.date = Field(..., description="最早可预约日期")
    date: dt.date = Field(..., description="日期")
    eligible: bool = Field(..., description="是否可预约")


class CalendarDay(BaseModel):
    """日历中的一天"""
    date: dt.date = Field(..., description="日期")
    eligible: bool = Field(..., description="是否可预约")
    selected: bool = Field(..., description="是否已选中")
    reserved: bool = Field(..., description="是否已有有效预约")


class CalendarResponse(BaseModel):
    """日历视图响应"""
    days: List[CalendarDay] = Field(..., description="每日状态")
    earliest_eligible_date: dt.date = Field(..., description="最早可预约日期")
    lead_time_hours: float = Field(..., description="最少提前小时数")
