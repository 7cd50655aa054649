"""Use case for creating search alerts."""

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError
from app.domain.entities import Alert, AlertCriteria
from app.domain.entities.alert import FREQUENCY_DAILY
from app.infrastructure.repositories import AlertRepository, UserRepository
from app.utils import now_in_app_timezone

from .validators import normalize_alert_name, normalize_frequency, validate_criteria


def create_alert(
    session: Session,
    *,
    user_id: int,
    name: str,
    criteria: AlertCriteria,
    frequency: str = FREQUENCY_DAILY,
    notifications_enabled: bool = True,
    is_active: bool = True,
) -> Alert:
    """Create an alert after validating its criteria."""

    if not UserRepository(session).exists(user_id):
        raise NotFoundError("Utilisateur non trouvé")

    now = now_in_app_timezone()
    entity = Alert(
        id=None,
        user_id=user_id,
        name=normalize_alert_name(name),
        criteria=validate_criteria(criteria),
        is_active=is_active,
        frequency=normalize_frequency(frequency),
        notifications_enabled=notifications_enabled,
        created_at=now,
        updated_at=now,
    )
    return AlertRepository(session).create(entity)


__all__ = ["create_alert"]
