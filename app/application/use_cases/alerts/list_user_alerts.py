"""Use case for listing the alerts of a user."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Alert
from app.infrastructure.repositories import AlertRepository


def list_user_alerts(
    session: Session, *, user_id: int, active_only: bool = False
) -> Sequence[Alert]:
    return AlertRepository(session).list_for_user(user_id, active_only=active_only)


__all__ = ["list_user_alerts"]
