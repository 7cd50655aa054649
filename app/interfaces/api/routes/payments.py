"""Routes for recording visit and service payments."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.payments import (
    create_payment,
    get_payment,
    get_payment_by_reference,
    list_user_payments,
    refund_payment,
    update_payment_status,
)
from app.domain.entities import Payment, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_admin
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    PaymentCreate,
    PaymentRead,
    PaymentStatusUpdate,
    ok,
)

router = APIRouter(prefix="/payments", tags=["payments"])


def _ensure_visible(payment: Payment, user: User) -> None:
    if payment.user_id != user.id and not user.is_admin():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Paiement non trouvé")


@router.post(
    "/",
    response_model=ApiResponse[PaymentRead],
    status_code=status.HTTP_201_CREATED,
)
def register_payment(
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        payment = create_payment(db, user_id=current_user.id, **payload.model_dump())
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(PaymentRead.model_validate(payment), "Paiement enregistré")


@router.get("/", response_model=ApiResponse[list[PaymentRead]])
def my_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    payments = list_user_payments(db, user_id=current_user.id)
    return ok([PaymentRead.model_validate(payment) for payment in payments])


@router.get("/reference/{reference}", response_model=ApiResponse[PaymentRead])
def read_payment_by_reference(
    reference: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        payment = get_payment_by_reference(db, reference)
    except DomainError as exc:
        raise http_error(exc) from exc
    _ensure_visible(payment, current_user)
    return ok(PaymentRead.model_validate(payment))


@router.get("/{payment_id}", response_model=ApiResponse[PaymentRead])
def read_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        payment = get_payment(db, payment_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    _ensure_visible(payment, current_user)
    return ok(PaymentRead.model_validate(payment))


@router.patch("/{payment_id}/status", response_model=ApiResponse[PaymentRead])
def change_payment_status(
    payment_id: int,
    payload: PaymentStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Record the outcome reported by the payment provider."""

    try:
        payment = update_payment_status(db, payment_id, status=payload.status)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(PaymentRead.model_validate(payment), "Statut du paiement mis à jour")


@router.post("/{payment_id}/refund", response_model=ApiResponse[PaymentRead])
def refund(
    payment_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        payment = refund_payment(db, payment_id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(PaymentRead.model_validate(payment), "Paiement remboursé")


__all__ = ["router"]
