"""Use case for retrieving a single alert."""

from sqlalchemy.orm import Session

from app.application.errors import NotFoundError
from app.domain.entities import Alert
from app.infrastructure.repositories import AlertRepository


def get_alert(session: Session, alert_id: int, *, owner_id: int | None = None) -> Alert:
    """Return the alert, hiding alerts that belong to another user."""

    alert = AlertRepository(session).get(alert_id)
    if alert is None or (owner_id is not None and alert.user_id != owner_id):
        raise NotFoundError("Alerte non trouvée")
    return alert


__all__ = ["get_alert"]
