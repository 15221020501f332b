"""
菜单服务
提供只读的每周菜单查询，与预约台账没有交互
"""

import json
import logging
import unicodedata
from pathlib import Path
from typing import Dict, List, Optional

from ..config.settings import settings
from ..core.exceptions import MenuNotFoundError
from ..models.menu import DayMenu, WeekMenu
from ..models.reservation import MealType

logger = logging.getLogger(__name__)

DEFAULT_MENU_FILE = Path(__file__).parent.parent / "data" / "menus.json"

# 午餐类型对应的菜品字段
MEAL_TYPE_DISHES = {
    MealType.NORMAL: ("main1", "main2"),
    MealType.HYPOCALORIC: ("hypocaloric",),
    MealType.VEGETARIAN: ("vegetarian",),
}


def _normalize_day(name: str) -> str:
    """忽略大小写和重音符号，"miercoles" 与 "Miércoles" 视为同一天"""
    decomposed = unicodedata.normalize("NFKD", name.strip().lower())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


class MenuService:
    """菜单服务"""

    def __init__(self, menu_file: Optional[Path] = None):
        self.menu_file = Path(menu_file or settings.menu_file or DEFAULT_MENU_FILE)
        self._weeks: Optional[Dict[str, WeekMenu]] = None

    def _load(self) -> Dict[str, WeekMenu]:
        if self._weeks is None:
            data = json.loads(self.menu_file.read_text(encoding="utf-8"))
            self._weeks = {
                key: WeekMenu(key=key, **value)
                for key, value in data.items()
            }
            logger.info("Loaded %d weekly menus from %s", len(self._weeks), self.menu_file)
        return self._weeks

    def list_weeks(self) -> List[WeekMenu]:
        """全部周菜单，保持文件中的顺序"""
        return list(self._load().values())

    def get_week(self, week_key: str) -> WeekMenu:
        """按周次获取菜单"""
        week = self._load().get(week_key)
        if week is None:
            raise MenuNotFoundError(
                "菜单周次不存在",
                details={"week": week_key}
            )
        return week

    def get_day(self, week_key: str, day: str) -> DayMenu:
        """按周次和星期获取单日菜单"""
        wanted = _normalize_day(day)
        for day_menu in self.get_week(week_key).menu:
            if _normalize_day(day_menu.day) == wanted:
                return day_menu
        raise MenuNotFoundError(
            "菜单日期不存在",
            details={"week": week_key, "day": day}
        )

    @staticmethod
    def dishes_for(day_menu: DayMenu, meal_type: MealType) -> List[str]:
        """某种午餐类型当天可选的主菜"""
        return [getattr(day_menu, field) for field in MEAL_TYPE_DISHES[MealType(meal_type)]]


# 全局服务实例
menu_service = MenuService()
