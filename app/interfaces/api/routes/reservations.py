"""Routes for booking and managing property visits."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.notifications import PushDispatcher
from app.application.use_cases.listings import get_listing
from app.application.use_cases.reservations import (
    create_reservation,
    get_reservation,
    list_available_slots,
    list_listing_reservations,
    list_owner_reservations,
    list_user_reservations,
    update_reservation_status,
)
from app.domain.entities import User
from app.domain.entities.reservation import RESERVATION_STATUS_CANCELLED
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_push_dispatcher,
    require_agent,
)
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    AvailableSlotsRead,
    ReservationCreate,
    ReservationRead,
    ReservationStatusUpdate,
    ok,
)

router = APIRouter(prefix="/reservations", tags=["reservations"])


def _forbidden() -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Non autorisé")


@router.post(
    "/",
    response_model=ApiResponse[ReservationRead],
    status_code=status.HTTP_201_CREATED,
)
def book_visit(
    payload: ReservationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    dispatcher: PushDispatcher = Depends(get_push_dispatcher),
):
    """Book a visit slot; the listing owner is notified."""

    try:
        reservation = create_reservation(
            db,
            user_id=current_user.id,
            listing_id=payload.listing_id,
            visit_date=payload.visit_date,
            visit_time=payload.visit_time,
            party_size=payload.party_size,
            notes=payload.notes,
            visitor_phone=payload.visitor_phone or current_user.telephone,
            dispatcher=dispatcher,
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ReservationRead.model_validate(reservation), "Réservation enregistrée")


@router.get("/slots/{listing_id}", response_model=ApiResponse[AvailableSlotsRead])
def available_slots(
    listing_id: int,
    visit_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    try:
        get_listing(db, listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    slots = list_available_slots(db, listing_id, visit_date)
    return ok(AvailableSlotsRead(listing_id=listing_id, visit_date=visit_date, slots=slots))


@router.get("/mine", response_model=ApiResponse[list[ReservationRead]])
def my_reservations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    reservations = list_user_reservations(db, user_id=current_user.id)
    return ok([ReservationRead.model_validate(item) for item in reservations])


@router.get("/received", response_model=ApiResponse[list[ReservationRead]])
def received_reservations(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    """Visits requested on the agent's listings."""

    reservations = list_owner_reservations(db, owner_id=current_user.id)
    return ok([ReservationRead.model_validate(item) for item in reservations])


@router.get("/listing/{listing_id}", response_model=ApiResponse[list[ReservationRead]])
def listing_reservations(
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_agent),
):
    try:
        listing = get_listing(db, listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    if listing.owner_id != current_user.id and not current_user.is_admin():
        raise _forbidden()
    reservations = list_listing_reservations(db, listing_id=listing_id)
    return ok([ReservationRead.model_validate(item) for item in reservations])


@router.get("/{reservation_id}", response_model=ApiResponse[ReservationRead])
def read_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        reservation = get_reservation(db, reservation_id)
        listing = get_listing(db, reservation.listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    allowed = {reservation.user_id, listing.owner_id}
    if current_user.id not in allowed and not current_user.is_admin():
        raise _forbidden()
    return ok(ReservationRead.model_validate(reservation))


@router.patch("/{reservation_id}/status", response_model=ApiResponse[ReservationRead])
def change_reservation_status(
    reservation_id: int,
    payload: ReservationStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    dispatcher: PushDispatcher = Depends(get_push_dispatcher),
):
    """Confirm, refuse or complete a visit; visitors may only cancel theirs."""

    try:
        reservation = get_reservation(db, reservation_id)
        listing = get_listing(db, reservation.listing_id)
    except DomainError as exc:
        raise http_error(exc) from exc

    is_manager = listing.owner_id == current_user.id or current_user.is_admin()
    is_visitor_cancelling = (
        reservation.user_id == current_user.id
        and payload.status == RESERVATION_STATUS_CANCELLED
    )
    if not (is_manager or is_visitor_cancelling):
        raise _forbidden()

    try:
        updated = update_reservation_status(
            db,
            reservation_id,
            status=payload.status,
            agent_message=payload.agent_message if is_manager else None,
            dispatcher=dispatcher,
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(ReservationRead.model_validate(updated), "Statut de la réservation mis à jour")


__all__ = ["router"]
