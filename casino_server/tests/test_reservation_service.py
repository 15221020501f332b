"""
预约服务测试
"""

import pytest
from datetime import date, datetime

from ..core.exceptions import InvalidRequestError, ReservationNotFoundError, ValidationError
from ..models.reservation import MealType, ReservationStatus
from ..models.selection import DateSelectionSet
from ..services import (
    cancel_reservation,
    clear_selection,
    create_reservations,
    is_eligible,
    list_active,
    list_upcoming,
    toggle_date_selection,
)
from ..services.reservation_service import ReservationService


class TestEngineFunctions:
    """引擎对外操作测试"""

    def test_full_flow(self, ledger, now):
        """选择、创建、取消、查询的完整流程"""
        selection = DateSelectionSet()
        for day in [date(2024, 1, 5), date(2024, 1, 3)]:
            assert is_eligible(day, now)
            selection = toggle_date_selection(selection, day)

        ledger, batch = create_reservations(ledger, selection.dates, MealType.NORMAL, now)
        selection = clear_selection(selection)

        assert selection.is_empty
        assert len(ledger) == 2

        ledger = cancel_reservation(ledger, batch[0].id)
        active = list_active(ledger, now)
        upcoming = list_upcoming(ledger, now)

        assert [r.date for r in active] == [date(2024, 1, 5)]
        assert upcoming == active

    def test_create_empty_raises(self, ledger, now):
        """空选择创建失败"""
        with pytest.raises(InvalidRequestError):
            create_reservations(ledger, [], MealType.NORMAL, now)


class TestReservationService:
    """会话级预约服务测试"""

    def test_toggle_and_clear(self, service, session, now):
        """切换和清空都会记录日志"""
        service.toggle_date(session, date(2024, 1, 5), now)
        service.toggle_date(session, date(2024, 1, 3), now)
        assert session.selection.dates == (date(2024, 1, 3), date(2024, 1, 5))

        service.clear_selection(session, now)
        assert session.selection.is_empty
        assert [log.action for log in session.logs] == \
            ["selection_toggle", "selection_toggle", "selection_clear"]

    def test_toggle_log_detail(self, service, session, now):
        """日志记录切换后的选中状态"""
        service.toggle_date(session, date(2024, 1, 5), now)
        service.toggle_date(session, date(2024, 1, 5), now)

        assert session.logs[0].detail == {"date": "2024-01-05", "selected": True}
        assert session.logs[1].detail == {"date": "2024-01-05", "selected": False}

    def test_create_from_selection_clears_selection(self, service, session, now):
        """创建成功后清空暂存日期"""
        service.toggle_date(session, date(2024, 1, 3), now)
        service.toggle_date(session, date(2024, 1, 5), now)
        service.select_meal_type(session, MealType.HYPOCALORIC, now)

        batch = service.create_from_selection(session, now)

        assert [r.meal_type for r in batch] == [MealType.HYPOCALORIC] * 2
        assert session.selection.is_empty
        assert len(session.ledger) == 2
        assert session.logs[-1].action == "reservation_create"
        assert session.logs[-1].detail["dates"] == ["2024-01-03", "2024-01-05"]

    def test_create_with_explicit_meal_type(self, service, session, now):
        """请求中的午餐类型优先于会话中的类型"""
        service.toggle_date(session, date(2024, 1, 3), now)
        batch = service.create_from_selection(session, now, meal_type=MealType.VEGETARIAN)

        assert batch[0].meal_type == MealType.VEGETARIAN
        assert session.meal_type == MealType.VEGETARIAN

    def test_create_failure_keeps_session(self, service, session, now):
        """创建失败时暂存选择和台账都不变"""
        service.toggle_date(session, date(2024, 1, 2), now)
        service.toggle_date(session, date(2024, 1, 3), now)
        logs_before = len(session.logs)

        with pytest.raises(InvalidRequestError):
            service.create_from_selection(session, now)

        assert session.selection.dates == (date(2024, 1, 2), date(2024, 1, 3))
        assert len(session.ledger) == 0
        assert len(session.logs) == logs_before

    def test_create_empty_selection_fails(self, service, session, now):
        """未选择日期时失败"""
        with pytest.raises(InvalidRequestError):
            service.create_from_selection(session, now)

    def test_cancel(self, service, session, now):
        """取消只在状态变化时记录日志"""
        service.toggle_date(session, date(2024, 1, 3), now)
        reservation = service.create_from_selection(session, now)[0]

        cancelled = service.cancel(session, reservation.id, now)
        again = service.cancel(session, reservation.id, now)
        missing = service.cancel(session, "missing", now)

        assert cancelled.status == ReservationStatus.CANCELLED
        assert again.status == ReservationStatus.CANCELLED
        assert missing is None
        assert [log.action for log in session.logs].count("reservation_cancel") == 1

    def test_get_reservation(self, service, session, now):
        """查询单个预约，未知ID报错"""
        service.toggle_date(session, date(2024, 1, 3), now)
        reservation = service.create_from_selection(session, now)[0]

        assert service.get_reservation(session, reservation.id) == reservation
        with pytest.raises(ReservationNotFoundError):
            service.get_reservation(session, "missing")

    def test_lists(self, service, session, now):
        """有效和即将到来列表"""
        service.toggle_date(session, date(2024, 1, 3), now)
        service.toggle_date(session, date(2024, 1, 5), now)
        first, _ = service.create_from_selection(session, now)
        service.cancel(session, first.id, now)

        assert [r.date for r in service.list_active(session, now)] == [date(2024, 1, 5)]
        assert [r.date for r in service.list_upcoming(session, datetime(2024, 1, 6))] == []

    def test_lead_time_from_constructor(self, session, now):
        """提前量可通过构造参数调整"""
        service = ReservationService(lead_time_hours=24)
        assert service.is_eligible(date(2024, 1, 2), now)
        assert service.earliest_eligible_date(now) == date(2024, 1, 2)
        assert service.lead_time_hours == 24

        service.toggle_date(session, date(2024, 1, 2), now)
        assert len(service.create_from_selection(session, now)) == 1


class TestCalendar:
    """日历视图测试"""

    def test_calendar_flags(self, service, session, now):
        """可预约、已选中和已预约标记"""
        service.toggle_date(session, date(2024, 1, 3), now)
        service.create_from_selection(session, now)
        service.toggle_date(session, date(2024, 1, 4), now)

        result = service.calendar(session, date(2024, 1, 1), 5, now)
        days = {d["date"]: d for d in result["days"]}

        assert [d["date"] for d in result["days"]] == [date(2024, 1, i) for i in range(1, 6)]
        assert not days[date(2024, 1, 2)]["eligible"]
        assert days[date(2024, 1, 3)]["eligible"]
        assert days[date(2024, 1, 3)]["reserved"]
        assert days[date(2024, 1, 4)]["selected"]
        assert not days[date(2024, 1, 5)]["selected"]
        assert result["earliest_eligible_date"] == date(2024, 1, 3)
        assert result["lead_time_hours"] == 48

    @pytest.mark.parametrize("days", [0, 1000])
    def test_calendar_days_out_of_range(self, service, session, now, days):
        """天数超出范围时报错"""
        with pytest.raises(ValidationError):
            service.calendar(session, date(2024, 1, 1), days, now)

    def test_calendar_past_last_representable_date(self, service, session, now):
        """起始日期接近 9999-12-31 时越界报校验错误"""
        with pytest.raises(ValidationError) as exc_info:
            service.calendar(session, date(9999, 12, 30), 5, now)

        assert exc_info.value.details == {"start": "9999-12-30", "days": 5}

    def test_calendar_ending_on_last_representable_date(self, service, session, now):
        result = service.calendar(session, date(9999, 12, 30), 2, now)

        assert [d["date"] for d in result["days"]] == [date(9999, 12, 30), date.max]
        assert all(d["eligible"] for d in result["days"])
