"""Validation helpers for alert use cases."""

from __future__ import annotations

from app.application.errors import ValidationError
from app.domain.entities import AlertCriteria
from app.domain.entities.alert import ALERT_FREQUENCIES
from app.domain.entities.listing import PROPERTY_TYPES, TRANSACTION_TYPES


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def normalize_alert_name(name: str | None) -> str:
    cleaned = _clean(name)
    if cleaned is None:
        raise ValidationError("Le nom de l'alerte est obligatoire")
    if len(cleaned) > 100:
        raise ValidationError("Le nom de l'alerte ne doit pas dépasser 100 caractères")
    return cleaned


def normalize_frequency(frequency: str | None) -> str:
    if frequency not in ALERT_FREQUENCIES:
        allowed = ", ".join(ALERT_FREQUENCIES)
        raise ValidationError(f"Fréquence invalide. Valeurs autorisées: {allowed}")
    return frequency


def validate_criteria(criteria: AlertCriteria) -> AlertCriteria:
    """Return a cleaned copy of ``criteria`` or raise :class:`ValidationError`."""

    cleaned = AlertCriteria(
        property_type=_clean(criteria.property_type),
        transaction_type=_clean(criteria.transaction_type),
        city=_clean(criteria.city),
        district=_clean(criteria.district),
        price_min=criteria.price_min,
        price_max=criteria.price_max,
        surface_min=criteria.surface_min,
        surface_max=criteria.surface_max,
        min_bedrooms=criteria.min_bedrooms,
        min_bathrooms=criteria.min_bathrooms,
        amenities=[item.strip() for item in criteria.amenities or [] if item and item.strip()],
    )

    if not cleaned.has_discriminating_criterion():
        raise ValidationError(
            "L'alerte doit préciser au moins un critère: type de bien, ville, "
            "quartier, prix minimum ou surface minimum"
        )
    if cleaned.property_type and cleaned.property_type not in PROPERTY_TYPES:
        raise ValidationError(f"Type de bien inconnu: {cleaned.property_type}")
    if cleaned.transaction_type and cleaned.transaction_type not in TRANSACTION_TYPES:
        raise ValidationError(f"Type de transaction inconnu: {cleaned.transaction_type}")

    for label, value in (
        ("prix minimum", cleaned.price_min),
        ("prix maximum", cleaned.price_max),
        ("surface minimum", cleaned.surface_min),
        ("surface maximum", cleaned.surface_max),
        ("nombre de chambres", cleaned.min_bedrooms),
        ("nombre de salles de bain", cleaned.min_bathrooms),
    ):
        if value is not None and value < 0:
            raise ValidationError(f"Le {label} ne peut pas être négatif")

    if (
        cleaned.price_min is not None
        and cleaned.price_max is not None
        and cleaned.price_min > cleaned.price_max
    ):
        raise ValidationError("Le prix minimum doit être inférieur ou égal au prix maximum")
    if (
        cleaned.surface_min is not None
        and cleaned.surface_max is not None
        and cleaned.surface_min > cleaned.surface_max
    ):
        raise ValidationError(
            "La surface minimum doit être inférieure ou égale à la surface maximum"
        )
    return cleaned


__all__ = ["normalize_alert_name", "normalize_frequency", "validate_criteria"]
