"""Use case for moving a reservation through its lifecycle."""

from sqlalchemy.orm import Session

from app.application.errors import ConflictError, NotFoundError, ValidationError
from app.application.use_cases.notifications import (
    PushDispatcher,
    notify_reservation_status_changed,
    push_notifications,
)
from app.domain.entities import Reservation
from app.domain.entities.listing import LISTING_STATUS_AVAILABLE, LISTING_STATUS_RESERVED
from app.domain.entities.reservation import (
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_REFUSED,
)
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    ListingRepository,
    NotificationRepository,
    ReservationRepository,
)

TARGET_STATUSES = (
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_CANCELLED,
    RESERVATION_STATUS_COMPLETED,
    RESERVATION_STATUS_REFUSED,
)

# Listing statuses the reservation lifecycle may switch between; a listing
# marked sold or rented by its owner keeps that status.
_BOOKABLE_LISTING_STATUSES = (LISTING_STATUS_AVAILABLE, LISTING_STATUS_RESERVED)


def update_reservation_status(
    session: Session,
    reservation_id: int,
    *,
    status: str,
    agent_message: str | None = None,
    dispatcher: PushDispatcher | None = None,
) -> Reservation:
    """Change the status, keep the listing status in step and notify both parties.

    Confirming fails with :class:`ConflictError` when another visit already
    holds the same slot. The listing stays ``reserve`` while any other pending
    or confirmed visit remains on it. Push delivery happens after the commit
    and never undoes it.
    """

    if status not in TARGET_STATUSES:
        allowed = ", ".join(TARGET_STATUSES)
        raise ValidationError(f"Statut invalide. Valeurs autorisées: {allowed}")

    reservations = ReservationRepository(session, autocommit=False)
    listings = ListingRepository(session, autocommit=False)
    with transaction(session):
        reservation = reservations.get(reservation_id)
        if reservation is None:
            raise NotFoundError("Réservation non trouvée")
        if status == RESERVATION_STATUS_CONFIRMED and reservations.is_slot_confirmed(
            reservation.listing_id,
            reservation.visit_date,
            reservation.visit_time,
            exclude_id=reservation.id,
        ):
            raise ConflictError("Ce créneau est déjà confirmé pour une autre visite")

        updated = reservations.update_status(
            reservation_id, status, agent_message=agent_message
        )
        listing = listings.get(reservation.listing_id)
        if listing is not None and listing.status in _BOOKABLE_LISTING_STATUSES:
            still_held = status == RESERVATION_STATUS_CONFIRMED or (
                reservations.has_open_reservations(listing.id, exclude_id=reservation.id)
            )
            target = LISTING_STATUS_RESERVED if still_held else LISTING_STATUS_AVAILABLE
            if target != listing.status:
                listings.update_status(listing.id, target)

        notifications = []
        if listing is not None:
            notifications = notify_reservation_status_changed(
                session,
                updated,
                owner_id=listing.owner_id,
                previous_status=reservation.status,
                listing_title=listing.title,
                repository=NotificationRepository(session, autocommit=False),
            )

    push_notifications(session, dispatcher, notifications)
    return updated


__all__ = ["TARGET_STATUSES", "update_reservation_status"]
