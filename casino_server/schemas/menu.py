"""
菜单相关的响应模式
"""

from pydantic import BaseModel, Field
from typing import Dict, List
from ..models.menu import DayMenu


class WeekSummary(BaseModel):
    """周次摘要"""
    key: str = Field(..., description="周次标识")
    week: str = Field(..., description="周次标题")
    days: List[str] = Field(..., description="包含的星期")


class DayMenuResponse(BaseModel):
    """单日菜单响应"""
    week: str = Field(..., description="周次标识")
    menu: DayMenu = Field(..., description="当日菜单")
    dishes_by_meal_type: Dict[str, List[str]] = Field(..., description="各午餐类型对应的主菜")
