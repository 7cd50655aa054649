"""Visit slot template and availability queries."""

from __future__ import annotations

from datetime import date, time

from sqlalchemy.orm import Session

from app.infrastructure.repositories import ReservationRepository


def _half_hours(start_hour: int, end: time) -> list[time]:
    slots: list[time] = []
    hour, minute = start_hour, 0
    while time(hour, minute) <= end:
        slots.append(time(hour, minute))
        hour, minute = (hour, 30) if minute == 0 else (hour + 1, 0)
    return slots


# Morning 09:00-11:30 and afternoon 14:00-17:00, every thirty minutes.
DAILY_SLOTS: tuple[time, ...] = tuple(_half_hours(9, time(11, 30)) + _half_hours(14, time(17, 0)))


def normalize_slot(value: time) -> time:
    return value.replace(second=0, microsecond=0, tzinfo=None)


def is_slot_available(
    session: Session, listing_id: int, visit_date: date, visit_time: time
) -> bool:
    """A slot is free unless a confirmed reservation already holds it."""

    return not ReservationRepository(session).is_slot_confirmed(
        listing_id, visit_date, normalize_slot(visit_time)
    )


def list_available_slots(session: Session, listing_id: int, visit_date: date) -> list[time]:
    taken = {
        normalize_slot(slot)
        for slot in ReservationRepository(session).confirmed_times(listing_id, visit_date)
    }
    return [slot for slot in DAILY_SLOTS if slot not in taken]


__all__ = ["DAILY_SLOTS", "is_slot_available", "list_available_slots", "normalize_slot"]
