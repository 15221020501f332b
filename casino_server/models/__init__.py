"""
Domain models.
Immutable value types for reservations, date selections and menus.
"""

from .reservation import MealType, Reservation, ReservationStatus
from .selection import DateSelectionSet, MIN_LEAD_TIME, earliest_eligible_date, is_eligible
from .ledger import ReservationLedger
from .menu import DayMenu, WeekMenu
from .log import OperationLog

__all__ = [
    "MealType",
    "Reservation",
    "ReservationStatus",
    "DateSelectionSet",
    "MIN_LEAD_TIME",
    "earliest_eligible_date",
    "is_eligible",
    "ReservationLedger",
    "DayMenu",
    "WeekMenu",
    "OperationLog",
]
