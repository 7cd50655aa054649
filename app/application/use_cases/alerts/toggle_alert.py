"""Use case for activating or deactivating an alert."""

from sqlalchemy.orm import Session

from app.domain.entities import Alert
from app.infrastructure.repositories import AlertRepository

from .get_alert import get_alert


def toggle_alert(
    session: Session,
    alert_id: int,
    *,
    owner_id: int | None = None,
    active: bool | None = None,
) -> Alert:
    """Set the active flag to ``active``, or flip it when ``active`` is ``None``."""

    alert = get_alert(session, alert_id, owner_id=owner_id)
    alert.is_active = (not alert.is_active) if active is None else active
    return AlertRepository(session).update(alert)


__all__ = ["toggle_alert"]
