"""Use cases for recording payments."""

from __future__ import annotations

import secrets
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.errors import ConflictError, NotFoundError, ValidationError
from app.domain.entities import Payment
from app.domain.entities.payment import (
    PAYMENT_METHODS,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_PENDING,
    PAYMENT_STATUS_REFUNDED,
    PAYMENT_STATUSES,
    PAYMENT_TYPES,
)
from app.infrastructure.repositories import PaymentRepository, UserRepository
from app.utils import now_in_app_timezone


def generate_payment_reference() -> str:
    timestamp = int(now_in_app_timezone().timestamp() * 1000)
    return f"PAY{timestamp}{secrets.token_hex(3).upper()}"


def create_payment(
    session: Session,
    *,
    user_id: int,
    amount: float,
    method: str = "wave",
    payment_type: str = "frais_visite",
    reservation_id: int | None = None,
    description: str | None = None,
    reference: str | None = None,
) -> Payment:
    if not UserRepository(session).exists(user_id):
        raise NotFoundError("Utilisateur non trouvé")
    if amount is None or amount <= 0:
        raise ValidationError("Le montant doit être supérieur à zéro")
    if method not in PAYMENT_METHODS:
        raise ValidationError(f"Méthode de paiement inconnue: {method}")
    if payment_type not in PAYMENT_TYPES:
        raise ValidationError(f"Type de paiement inconnu: {payment_type}")

    repository = PaymentRepository(session)
    reference = (reference or "").strip() or generate_payment_reference()
    if repository.get_by_reference(reference) is not None:
        raise ConflictError("Cette référence de paiement existe déjà")

    return repository.create(
        Payment(
            id=None,
            user_id=user_id,
            amount=amount,
            reference=reference,
            method=method,
            status=PAYMENT_STATUS_PENDING,
            payment_type=payment_type,
            reservation_id=reservation_id,
            description=description,
        )
    )


def get_payment(session: Session, payment_id: int) -> Payment:
    payment = PaymentRepository(session).get(payment_id)
    if payment is None:
        raise NotFoundError("Paiement non trouvé")
    return payment


def get_payment_by_reference(session: Session, reference: str) -> Payment:
    payment = PaymentRepository(session).get_by_reference(reference)
    if payment is None:
        raise NotFoundError("Paiement non trouvé")
    return payment


def list_user_payments(session: Session, *, user_id: int) -> Sequence[Payment]:
    return PaymentRepository(session).list_for_user(user_id)


def update_payment_status(session: Session, payment_id: int, *, status: str) -> Payment:
    """Change the status; moving to ``paye`` stamps the payment date."""

    if status not in PAYMENT_STATUSES:
        allowed = ", ".join(PAYMENT_STATUSES)
        raise ValidationError(f"Statut invalide. Valeurs autorisées: {allowed}")
    payment = get_payment(session, payment_id)
    payment.status = status
    if status == PAYMENT_STATUS_PAID and payment.paid_at is None:
        payment.paid_at = now_in_app_timezone()
    return PaymentRepository(session).update(payment)


def refund_payment(session: Session, payment_id: int) -> Payment:
    payment = get_payment(session, payment_id)
    if payment.status != PAYMENT_STATUS_PAID:
        raise ConflictError("Seuls les paiements payés peuvent être remboursés")
    payment.status = PAYMENT_STATUS_REFUNDED
    return PaymentRepository(session).update(payment)


__all__ = [
    "create_payment",
    "generate_payment_reference",
    "get_payment",
    "get_payment_by_reference",
    "list_user_payments",
    "refund_payment",
    "update_payment_status",
]
