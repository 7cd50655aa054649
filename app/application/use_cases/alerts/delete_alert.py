"""Use case for deleting alerts together with their history."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import AlertRepository

from .get_alert import get_alert


def delete_alert(session: Session, alert_id: int, *, owner_id: int | None = None) -> None:
    get_alert(session, alert_id, owner_id=owner_id)
    AlertRepository(session).delete(alert_id)


__all__ = ["delete_alert"]
