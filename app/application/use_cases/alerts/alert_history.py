"""Use cases exposing the notification history of an alert."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AlertHistoryEntry, AlertStatistics
from app.infrastructure.repositories import AlertRepository

from .get_alert import get_alert


def get_alert_history(
    session: Session,
    alert_id: int,
    *,
    owner_id: int | None = None,
    limit: int = 10,
) -> Sequence[AlertHistoryEntry]:
    get_alert(session, alert_id, owner_id=owner_id)
    return AlertRepository(session).list_history(alert_id, limit=limit)


def get_alert_statistics(
    session: Session, alert_id: int, *, owner_id: int | None = None
) -> AlertStatistics:
    get_alert(session, alert_id, owner_id=owner_id)
    return AlertRepository(session).statistics(alert_id)


__all__ = ["get_alert_history", "get_alert_statistics"]
