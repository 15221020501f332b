"""
Business logic services.
Contains service layer implementations for reservation and menu operations.
"""

from .reservation_service import (
    ReservationService,
    reservation_service,
    toggle_date_selection,
    clear_selection,
    create_reservations,
    cancel_reservation,
    list_active,
    list_upcoming,
)
from .menu_service import MenuService, menu_service
from ..models.selection import is_eligible

__all__ = [
    "ReservationService",
    "reservation_service",
    "MenuService",
    "menu_service",
    "is_eligible",
    "toggle_date_selection",
    "clear_selection",
    "create_reservations",
    "cancel_reservation",
    "list_active",
    "list_upcoming",
]
