"""
菜单路由模块
只读的每周菜单查询
"""

from fastapi import APIRouter

from ...core.error_handler import create_success_response
from ...models.reservation import MealType
from ...schemas.common import ErrorResponse
from ...schemas.menu import DayMenuResponse, WeekSummary
from ...services.menu_service import menu_service

router = APIRouter()


@router.get("")
def list_menus():
    """全部周次"""
    weeks = [
        WeekSummary(key=w.key, week=w.week, days=[d.day for d in w.menu]).model_dump()
        for w in menu_service.list_weeks()
    ]
    return create_success_response(weeks, "查询成功")


@router.get("/{week_key}", responses={404: {"model": ErrorResponse}})
def get_week_menu(week_key: str):
    """某一周的完整菜单"""
    week = menu_service.get_week(week_key)
    return create_success_response(week.model_dump(), "查询成功")


@router.get("/{week_key}/{day}", responses={404: {"model": ErrorResponse}})
def get_day_menu(week_key: str, day: str):
    """某一天的菜单及各午餐类型的主菜"""
    day_menu = menu_service.get_day(week_key, day)
    data = DayMenuResponse(
        week=week_key,
        menu=day_menu,
        dishes_by_meal_type={
            meal_type.value: menu_service.dishes_for(day_menu, meal_type)
            for meal_type in MealType
        },
    )
    return create_success_response(data.model_dump(), "查询成功")
