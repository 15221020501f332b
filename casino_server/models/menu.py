"""
菜单相关数据模型
"""

from pydantic import BaseModel, Field
from typing import List


class DayMenu(BaseModel):
    """单日菜单"""
    day: str = Field(..., description="星期")
    soup: str = Field(..., description="汤/浓汤")
    entree: str = Field(..., description="前菜")
    main1: str = Field(..., description="主菜1")
    main2: str = Field(..., description="主菜2")
    vegetarian: str = Field(..., description="素食")
    hypocaloric: str = Field(..., description="低热量")
    dessert: str = Field(..., description="甜点")


class WeekMenu(BaseModel):
    """一周菜单"""
    key: str = Field(..., description="周次标识")
    week: str = Field(..., description="周次标题")
    menu: List[DayMenu] = Field(default_factory=list, description="每日菜单")
