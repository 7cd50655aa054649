"""Domain entity representing a payment record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PAYMENT_METHODS = ("wave", "orange_money", "mtn_money", "carte_bancaire", "especes")

PAYMENT_STATUS_PENDING = "en_attente"
PAYMENT_STATUS_PAID = "paye"
PAYMENT_STATUS_FAILED = "echec"
PAYMENT_STATUS_REFUNDED = "rembourse"
PAYMENT_STATUSES = (
    PAYMENT_STATUS_PENDING,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_FAILED,
    PAYMENT_STATUS_REFUNDED,
)

PAYMENT_TYPES = (
    "frais_visite",
    "acompte_location",
    "acompte_vente",
    "frais_agence",
    "autre",
)


@dataclass
class Payment:
    """Book-keeping entry for money paid by a user."""

    id: int | None
    user_id: int
    amount: float
    reference: str
    method: str = "wave"
    status: str = PAYMENT_STATUS_PENDING
    payment_type: str = "frais_visite"
    reservation_id: int | None = None
    description: str | None = None
    paid_at: datetime | None = None


__all__ = [
    "Payment",
    "PAYMENT_METHODS",
    "PAYMENT_STATUS_PENDING",
    "PAYMENT_STATUS_PAID",
    "PAYMENT_STATUS_FAILED",
    "PAYMENT_STATUS_REFUNDED",
    "PAYMENT_STATUSES",
    "PAYMENT_TYPES",
]
