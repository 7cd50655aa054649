"""Validation helpers for listing use cases."""

from __future__ import annotations

from collections.abc import Mapping

from app.application.errors import ValidationError
from app.domain.entities import ListingAttribute
from app.domain.entities.listing import (
    BILLING_PERIODS,
    DEFAULT_BILLING_PERIOD,
    LISTING_STATUSES,
    MEDIA_TYPES,
    PROPERTY_TYPES,
    RENT_DEPOSIT_MULTIPLIER,
    TRANSACTION_RENT,
    TRANSACTION_TYPES,
)


def require_text(value: str | None, label: str, *, max_length: int | None = None) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"Le champ {label} est obligatoire")
    if max_length is not None and len(cleaned) > max_length:
        raise ValidationError(f"Le champ {label} ne doit pas dépasser {max_length} caractères")
    return cleaned


def validate_property_type(value: str) -> str:
    if value not in PROPERTY_TYPES:
        raise ValidationError(f"Type de bien inconnu: {value}")
    return value


def validate_transaction_type(value: str) -> str:
    if value not in TRANSACTION_TYPES:
        raise ValidationError(f"Type de transaction inconnu: {value}")
    return value


def validate_status(value: str) -> str:
    if value not in LISTING_STATUSES:
        allowed = ", ".join(LISTING_STATUSES)
        raise ValidationError(f"Statut invalide. Valeurs autorisées: {allowed}")
    return value


def validate_media_type(value: str) -> str:
    if value not in MEDIA_TYPES:
        raise ValidationError(f"Type de média inconnu: {value}")
    return value


def validate_price(value: float) -> float:
    if value is None or value < 0:
        raise ValidationError("Le prix doit être un nombre positif")
    return value


def billing_terms(
    transaction_type: str, price: float, billing_period: str | None
) -> tuple[str | None, float]:
    """Return the billing period and deposit implied by the transaction type.

    Rentals are billed per period (``mois`` unless stated) with a deposit of
    three times the price; sales carry neither.
    """

    if transaction_type != TRANSACTION_RENT:
        return None, 0
    period = billing_period or DEFAULT_BILLING_PERIOD
    if period not in BILLING_PERIODS:
        raise ValidationError(f"Période de facturation inconnue: {period}")
    return period, price * RENT_DEPOSIT_MULTIPLIER


def build_attributes(values: Mapping[str, object] | None) -> list[ListingAttribute]:
    attributes: list[ListingAttribute] = []
    for name, value in (values or {}).items():
        key = str(name).strip()
        if not key or value is None or str(value).strip() == "":
            continue
        attributes.append(ListingAttribute(name=key, value=str(value).strip()))
    return attributes


__all__ = [
    "billing_terms",
    "build_attributes",
    "require_text",
    "validate_media_type",
    "validate_price",
    "validate_property_type",
    "validate_status",
    "validate_transaction_type",
]
