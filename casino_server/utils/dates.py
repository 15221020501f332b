"""
日期工具
预约以自然日为单位，时间部分不参与比较

带时区的时间一律换算到 UTC 比较和加减，夏令时切换当天按实际经过的时间计算；
不带时区的时间按墙上时间处理。
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union

DateLike = Union[date, datetime]


def as_calendar_day(value: DateLike) -> date:
    """把 date/datetime 统一为自然日"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


def to_utc(value: datetime) -> datetime:
    """带时区的时间换算为 UTC，不带时区的原样返回"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def add_elapsed(value: datetime, delta: timedelta) -> datetime:
    """加上实际经过的时间，结果保持原时区"""
    if value.tzinfo is None:
        return value + delta
    return (to_utc(value) + delta).astimezone(value.tzinfo)


def start_of_day(value: DateLike, tz: Optional[tzinfo] = None) -> datetime:
    """当天 00:00:00，时区与 tz 保持一致"""
    return datetime.combine(as_calendar_day(value), time.min, tzinfo=tz)


def end_of_day(value: DateLike, tz: Optional[tzinfo] = None) -> datetime:
    """
    当天最后一个时刻

    带时区时取次日零点前一微秒，夏令时回拨当天 23:xx 出现两次，取后一次。
    """
    day = as_calendar_day(value)
    if tz is None or day == date.max:
        return datetime.combine(day, time.max, tzinfo=tz)
    next_start = start_of_day(day + timedelta(days=1), tz)
    return (to_utc(next_start) - timedelta(microseconds=1)).astimezone(tz)
