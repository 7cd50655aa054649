"""Use cases for reading reservations."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError
from app.domain.entities import Reservation
from app.infrastructure.repositories import ReservationRepository


def get_reservation(session: Session, reservation_id: int) -> Reservation:
    reservation = ReservationRepository(session).get(reservation_id)
    if reservation is None:
        raise NotFoundError("Réservation non trouvée")
    return reservation


def list_user_reservations(session: Session, *, user_id: int) -> Sequence[Reservation]:
    return ReservationRepository(session).list_for_user(user_id)


def list_listing_reservations(session: Session, *, listing_id: int) -> Sequence[Reservation]:
    return ReservationRepository(session).list_for_listing(listing_id)


def list_owner_reservations(session: Session, *, owner_id: int) -> Sequence[Reservation]:
    return ReservationRepository(session).list_for_owner(owner_id)


__all__ = [
    "get_reservation",
    "list_listing_reservations",
    "list_owner_reservations",
    "list_user_reservations",
]
