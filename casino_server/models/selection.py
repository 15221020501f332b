"""
日期选择模型
用户提交预约前暂存的日期集合，以及可预约日期的判定规则

业务规则：
- 日期按自然日去重，始终升序
- 所有操作返回新值，不修改原集合
- 预约日当天结束时刻不得早于 now + 提前量（默认48小时）
"""

from datetime import date, datetime, timedelta
from typing import Tuple
from pydantic import Field, field_validator
from .base import BaseEntity
from ..utils.dates import DateLike, add_elapsed, as_calendar_day, end_of_day, to_utc

# 最少提前预约时间
MIN_LEAD_TIME = timedelta(hours=48)


def is_eligible(day: DateLike, now: datetime, lead_time: timedelta = MIN_LEAD_TIME) -> bool:
    """
    判断日期是否可预约

    Args:
        day: 预约日期，datetime 只取日期部分
        now: 当前时间，由调用方传入
        lead_time: 最少提前量

    Returns:
        bool: end_of_day(day) 不早于 now + lead_time 时为 True（边界相等可预约）
    """
    day = as_calendar_day(day)
    deadline = add_elapsed(now, lead_time)
    # 截止时刻所在日之后的日期整天都晚于截止时刻
    if day > deadline.date():
        return True
    return not to_utc(end_of_day(day, now.tzinfo)) < to_utc(deadline)


def earliest_eligible_date(now: datetime, lead_time: timedelta = MIN_LEAD_TIME) -> date:
    """最早可预约的日期"""
    # 截止时刻当天即可预约
    return add_elapsed(now, lead_time).date()


class DateSelectionSet(BaseEntity):
    """暂存的预约日期集合"""
    dates: Tuple[date, ...] = Field(default_factory=tuple, description="已选日期，升序")

    @field_validator("dates", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        """按自然日去重并升序排列"""
        return tuple(sorted({as_calendar_day(d) for d in v}))

    def __contains__(self, day: DateLike) -> bool:
        return as_calendar_day(day) in self.dates

    def __len__(self) -> int:
        return len(self.dates)

    @property
    def is_empty(self) -> bool:
        return not self.dates

    def toggle(self, day: DateLike) -> "DateSelectionSet":
        """已选则移除，未选则加入；不在此处校验可预约性"""
        day = as_calendar_day(day)
        if day in self.dates:
            return DateSelectionSet(dates=[d for d in self.dates if d != day])
        return DateSelectionSet(dates=[*self.dates, day])

    def clear(self) -> "DateSelectionSet":
        """清空选择"""
        return DateSelectionSet()

    @staticmethod
    def is_eligible(day: DateLike, now: datetime, lead_time: timedelta = MIN_LEAD_TIME) -> bool:
        return is_eligible(day, now, lead_time)
