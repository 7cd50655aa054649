"""Use case for updating alerts."""

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.application.errors import ValidationError
from app.domain.entities import Alert
from app.infrastructure.repositories import AlertRepository

from .get_alert import get_alert
from .validators import normalize_alert_name, normalize_frequency, validate_criteria

_CRITERIA_FIELDS = {
    "property_type",
    "transaction_type",
    "city",
    "district",
    "price_min",
    "price_max",
    "surface_min",
    "surface_max",
    "min_bedrooms",
    "min_bathrooms",
    "amenities",
}


def update_alert(
    session: Session,
    alert_id: int,
    *,
    owner_id: int | None = None,
    name: str | None = None,
    frequency: str | None = None,
    notifications_enabled: bool | None = None,
    is_active: bool | None = None,
    criteria_changes: dict[str, Any] | None = None,
) -> Alert:
    """Apply the provided changes; merged criteria are validated as a whole."""

    alert = get_alert(session, alert_id, owner_id=owner_id)

    if criteria_changes:
        unknown = set(criteria_changes) - _CRITERIA_FIELDS
        if unknown:
            raise ValidationError(f"Critères inconnus: {', '.join(sorted(unknown))}")
        alert.criteria = validate_criteria(replace(alert.criteria, **criteria_changes))
    if name is not None:
        alert.name = normalize_alert_name(name)
    if frequency is not None:
        alert.frequency = normalize_frequency(frequency)
    if notifications_enabled is not None:
        alert.notifications_enabled = notifications_enabled
    if is_active is not None:
        alert.is_active = is_active

    return AlertRepository(session).update(alert)


__all__ = ["update_alert"]
