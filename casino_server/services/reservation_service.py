"""
预约服务模块
提供午餐预约相关的核心业务逻辑，包括日期选择、创建、取消和查询功能

主要功能：
- 可预约日期判定和日历视图
- 暂存日期的切换与清空
- 批量创建预约和取消预约
- 有效预约、即将到来预约的查询

业务规则：
- 预约需至少提前48小时（按预约日当天结束时刻计算）
- 批量创建全部成功或全部失败
- 取消幂等，未知ID静默忽略
- 所有时间相关操作显式接收 now
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config.settings import settings
from ..core.exceptions import ReservationNotFoundError, ValidationError
from ..core.session import SessionState
from ..models.ledger import ReservationLedger
from ..models.reservation import MealType, Reservation
from ..models.selection import (
    MIN_LEAD_TIME,
    DateSelectionSet,
    earliest_eligible_date,
    is_eligible,
)
from ..utils.dates import DateLike, as_calendar_day

logger = logging.getLogger(__name__)


def toggle_date_selection(selection: DateSelectionSet, day: DateLike) -> DateSelectionSet:
    """切换日期的选中状态"""
    return selection.toggle(day)


def clear_selection(selection: DateSelectionSet) -> DateSelectionSet:
    """清空暂存日期"""
    return selection.clear()


def create_reservations(
    ledger: ReservationLedger,
    dates: Iterable[DateLike],
    meal_type: MealType,
    now: datetime,
    lead_time: timedelta = MIN_LEAD_TIME,
) -> Tuple[ReservationLedger, List[Reservation]]:
    """批量创建预约，失败时抛出 InvalidRequestError 且台账不变"""
    return ledger.create(dates, meal_type, now, lead_time=lead_time)


def cancel_reservation(ledger: ReservationLedger, reservation_id: str) -> ReservationLedger:
    """取消预约，幂等"""
    return ledger.cancel(reservation_id)


def list_active(ledger: ReservationLedger, now: datetime) -> List[Reservation]:
    """有效预约列表"""
    return list(ledger.active_reservations(now))


def list_upcoming(ledger: ReservationLedger, now: datetime) -> List[Reservation]:
    """即将到来的预约列表"""
    return list(ledger.upcoming_reservations(now))


class ReservationService:
    """预约服务类，把预约引擎的操作作用到会话状态上"""

    def __init__(self, lead_time_hours: Optional[int] = None):
        hours = settings.lead_time_hours if lead_time_hours is None else lead_time_hours
        self.lead_time = timedelta(hours=hours)

    @property
    def lead_time_hours(self) -> float:
        return self.lead_time.total_seconds() / 3600

    def is_eligible(self, day: DateLike, now: datetime) -> bool:
        return is_eligible(day, now, self.lead_time)

    def earliest_eligible_date(self, now: datetime) -> date:
        return earliest_eligible_date(now, self.lead_time)

    def calendar(self, session: SessionState, start: date, days: int,
                 now: datetime) -> Dict[str, Any]:
        """
        生成日期选择器所需的日历视图

        Args:
            session: 当前会话
            start: 起始日期
            days: 天数
            now: 当前时间

        Returns:
            dict: 每天的可预约、已选中、已预约标记，以及最早可预约日期

        Raises:
            ValidationError: 天数超出范围或日期超出可表示范围时
        """
        if days < 1 or days > settings.calendar_max_days:
            raise ValidationError(
                f"天数必须在1到{settings.calendar_max_days}之间",
                details={"days": days}
            )
        try:
            start + timedelta(days=days - 1)
        except OverflowError:
            raise ValidationError(
                "日期范围超出可表示范围",
                details={"start": start.isoformat(), "days": days}
            ) from None

        with session.lock:
            selection = session.selection
            reserved = set(session.ledger.reserved_dates(now))

        items = []
        for offset in range(days):
            day = start + timedelta(days=offset)
            items.append({
                "date": day,
                "eligible": self.is_eligible(day, now),
                "selected": day in selection,
                "reserved": day in reserved,
            })

        return {
            "days": items,
            "earliest_eligible_date": self.earliest_eligible_date(now),
            "lead_time_hours": self.lead_time_hours,
        }

    def toggle_date(self, session: SessionState, day: DateLike,
                    now: datetime) -> DateSelectionSet:
        """切换暂存日期；可预约性由日历禁用，创建时再统一校验"""
        day = as_calendar_day(day)
        with session.lock:
            session.selection = toggle_date_selection(session.selection, day)
            session.record("selection_toggle", {
                "date": day.isoformat(),
                "selected": day in session.selection,
            }, now)
            return session.selection

    def clear_selection(self, session: SessionState, now: datetime) -> DateSelectionSet:
        """清空暂存日期"""
        with session.lock:
            session.selection = clear_selection(session.selection)
            session.record("selection_clear", {}, now)
            return session.selection

    def select_meal_type(self, session: SessionState, meal_type: MealType,
                         now: datetime) -> MealType:
        """设置本次预约的午餐类型"""
        with session.lock:
            session.meal_type = MealType(meal_type)
            session.record("meal_type_select", {"meal_type": session.meal_type.value}, now)
            return session.meal_type

    def create_from_selection(self, session: SessionState, now: datetime,
                              meal_type: Optional[MealType] = None) -> List[Reservation]:
        """
        用暂存日期批量创建预约

        Args:
            session: 当前会话
            now: 当前时间
            meal_type: 午餐类型，为空时使用会话中选择的类型

        Returns:
            list: 本次创建的预约，顺序与暂存日期一致

        Raises:
            InvalidRequestError: 未选择日期或存在不满足提前量的日期时，会话状态不变
        """
        with session.lock:
            chosen = session.meal_type if meal_type is None else MealType(meal_type)
            ledger, batch = create_reservations(
                session.ledger, session.selection.dates, chosen, now, lead_time=self.lead_time)

            session.ledger = ledger
            session.meal_type = chosen
            session.selection = clear_selection(session.selection)
            session.record("reservation_create", {
                "reservation_ids": [r.id for r in batch],
                "dates": [r.date.isoformat() for r in batch],
                "meal_type": chosen.value,
            }, now)
            return batch

    def cancel(self, session: SessionState, reservation_id: str, now: datetime) -> Optional[Reservation]:
        """取消预约，返回取消后的记录；ID不存在时返回None"""
        with session.lock:
            before = session.ledger.get(reservation_id)
            session.ledger = cancel_reservation(session.ledger, reservation_id)
            after = session.ledger.get(reservation_id)

            if before is not None and before.is_active:
                session.record("reservation_cancel", {"reservation_id": reservation_id}, now)
            else:
                logger.debug("Cancel ignored for %s in session %s", reservation_id, session.session_id)
            return after

    def get_reservation(self, session: SessionState, reservation_id: str) -> Reservation:
        """获取单个预约"""
        with session.lock:
            reservation = session.ledger.get(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(
                "预约不存在",
                details={"reservation_id": reservation_id}
            )
        return reservation

    def list_active(self, session: SessionState, now: datetime) -> List[Reservation]:
        with session.lock:
            return list_active(session.ledger, now)

    def list_upcoming(self, session: SessionState, now: datetime) -> List[Reservation]:
        with session.lock:
            return list_upcoming(session.ledger, now)


# 全局服务实例
reservation_service = ReservationService()
