"""Use cases for visit reservations."""

from .create_reservation import create_reservation
from .get_reservations import (
    get_reservation,
    list_listing_reservations,
    list_owner_reservations,
    list_user_reservations,
)
from .slots import DAILY_SLOTS, is_slot_available, list_available_slots
from .update_reservation_status import update_reservation_status

__all__ = [
    "DAILY_SLOTS",
    "create_reservation",
    "get_reservation",
    "is_slot_available",
    "list_available_slots",
    "list_listing_reservations",
    "list_owner_reservations",
    "list_user_reservations",
    "update_reservation_status",
]
