"""
预约台账模型
会话内全部预约记录的权威集合

主要功能：
- 批量创建预约（全部成功或全部失败）
- 取消预约（软删除，幂等）
- 有效预约、即将到来预约的派生视图

业务规则：
- 预约ID在台账生命周期内唯一
- 创建时重新校验提前量，不依赖前端禁用日期
- 视图每次调用时按传入的 now 重新计算，不做缓存
"""

import uuid
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Iterator, List, Optional, Tuple
from pydantic import Field
from .base import BaseEntity
from .reservation import MealType, Reservation, ReservationStatus
from .selection import MIN_LEAD_TIME, is_eligible
from ..core.exceptions import InvalidRequestError
from ..utils.dates import DateLike, as_calendar_day


def new_reservation_id() -> str:
    """生成不透明的预约ID"""
    return uuid.uuid4().hex


class ReservationLedger(BaseEntity):
    """预约台账，按插入顺序保存"""
    reservations: Tuple[Reservation, ...] = Field(default_factory=tuple, description="预约记录")

    def __len__(self) -> int:
        return len(self.reservations)

    def get(self, reservation_id: str) -> Optional[Reservation]:
        """按ID查找预约，不存在返回None"""
        for reservation in self.reservations:
            if reservation.id == reservation_id:
                return reservation
        return None

    def create(
        self,
        dates: Iterable[DateLike],
        meal_type: MealType,
        now: datetime,
        lead_time: timedelta = MIN_LEAD_TIME,
        id_factory: Callable[[], str] = new_reservation_id,
    ) -> Tuple["ReservationLedger", List[Reservation]]:
        """
        批量创建预约

        Args:
            dates: 预约日期，按输入顺序生成记录
            meal_type: 午餐类型
            now: 当前时间
            lead_time: 最少提前量
            id_factory: 预约ID生成函数

        Returns:
            tuple: (新台账, 本次创建的预约列表)

        Raises:
            InvalidRequestError: 未选择日期、日期重复、餐型未知或日期不满足提前量时，台账不变
        """
        days = [as_calendar_day(d) for d in dates]
        if not days:
            raise InvalidRequestError("请至少选择一个日期")

        if len(set(days)) != len(days):
            raise InvalidRequestError(
                "预约日期重复",
                details={"dates": [d.isoformat() for d in days]}
            )

        try:
            meal_type = MealType(meal_type)
        except ValueError:
            raise InvalidRequestError(
                f"未知的午餐类型: {meal_type}",
                details={"meal_type": str(meal_type)}
            )

        ineligible = [d for d in days if not is_eligible(d, now, lead_time)]
        if ineligible:
            hours = lead_time.total_seconds() / 3600
            raise InvalidRequestError(
                f"预约需至少提前{hours:g}小时",
                details={
                    "ineligible_dates": [d.isoformat() for d in ineligible],
                    "lead_time_hours": hours,
                }
            )

        used_ids = {r.id for r in self.reservations}
        batch = []
        for day in days:
            reservation_id = id_factory()
            while reservation_id in used_ids:
                reservation_id = id_factory()
            used_ids.add(reservation_id)
            batch.append(Reservation(
                id=reservation_id,
                date=day,
                meal_type=meal_type,
                status=ReservationStatus.CONFIRMED,
            ))

        ledger = ReservationLedger(reservations=(*self.reservations, *batch))
        return ledger, batch

    def cancel(self, reservation_id: str) -> "ReservationLedger":
        """取消预约；ID不存在或已取消时原样返回"""
        target = self.get(reservation_id)
        if target is None or not target.is_active:
            return self

        return ReservationLedger(reservations=tuple(
            r.cancelled() if r.id == reservation_id else r
            for r in self.reservations
        ))

    def active_reservations(self, now: datetime) -> Iterator[Reservation]:
        """未取消的预约，按插入顺序"""
        return (r for r in self.reservations if r.is_active)

    def upcoming_reservations(self, now: datetime) -> Iterator[Reservation]:
        """有效预约中日期严格晚于 now 的部分"""
        return (r for r in self.active_reservations(now) if r.is_after(now))

    def reserved_dates(self, now: datetime) -> List[date]:
        """即将到来的已预约日期，升序"""
        return sorted({r.date for r in self.upcoming_reservations(now)})
