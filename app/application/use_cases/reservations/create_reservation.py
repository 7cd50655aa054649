"""Use case for booking a visit."""

from datetime import date, time

from sqlalchemy.orm import Session

from app.application.errors import ConflictError, NotFoundError, ValidationError
from app.application.use_cases.notifications import (
    PushDispatcher,
    notify_reservation_requested,
    push_notifications,
)
from app.domain.entities import Reservation
from app.domain.entities.listing import (
    LISTING_STATUS_AVAILABLE,
    LISTING_STATUS_RESERVED,
)
from app.domain.entities.reservation import RESERVATION_STATUS_PENDING
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    ListingRepository,
    NotificationRepository,
    ReservationRepository,
)

from .slots import DAILY_SLOTS, is_slot_available, normalize_slot


def create_reservation(
    session: Session,
    *,
    user_id: int,
    listing_id: int,
    visit_date: date,
    visit_time: time,
    party_size: int = 1,
    notes: str | None = None,
    visitor_phone: str | None = None,
    dispatcher: PushDispatcher | None = None,
) -> Reservation:
    """Book a visit, mark the listing as reserved and notify owner and visitor.

    The slot check, the reservation insert, the listing status change and
    the inbox entries run in one transaction: a failure at any step leaves no
    trace. Push messages are sent after the commit, on a best-effort basis.
    """

    if party_size < 1:
        raise ValidationError("Le nombre de personnes doit être au moins 1")
    slot = normalize_slot(visit_time)
    if slot not in DAILY_SLOTS:
        allowed = ", ".join(f"{item:%H:%M}" for item in DAILY_SLOTS)
        raise ValidationError(f"Créneau invalide. Créneaux proposés: {allowed}")

    reservations = ReservationRepository(session, autocommit=False)
    listings = ListingRepository(session, autocommit=False)

    with transaction(session):
        if not is_slot_available(session, listing_id, visit_date, slot):
            raise ConflictError("Ce créneau n'est pas disponible")
        listing = listings.get(listing_id)
        if listing is None:
            raise NotFoundError("Propriété non trouvée")
        if listing.status != LISTING_STATUS_AVAILABLE:
            raise ConflictError("Cette propriété n'est pas disponible à la réservation")

        reservation = reservations.create(
            Reservation(
                id=None,
                user_id=user_id,
                listing_id=listing_id,
                visit_date=visit_date,
                visit_time=slot,
                party_size=party_size,
                notes=notes,
                visitor_phone=visitor_phone,
                status=RESERVATION_STATUS_PENDING,
            )
        )
        listings.update_status(listing_id, LISTING_STATUS_RESERVED)
        notifications = notify_reservation_requested(
            session,
            reservation,
            owner_id=listing.owner_id,
            listing_title=listing.title,
            repository=NotificationRepository(session, autocommit=False),
        )

    push_notifications(session, dispatcher, notifications)
    return reservation


__all__ = ["create_reservation"]
