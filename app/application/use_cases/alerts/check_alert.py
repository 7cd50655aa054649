"""Use case for checking an alert on demand."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.application.errors import ValidationError
from app.config import get_settings
from app.domain.entities import Listing
from app.infrastructure.repositories import ListingRepository
from app.utils import now_in_app_timezone

from .get_alert import get_alert
from .matching import matching_cutoff, select_new_matches


def check_alert_now(
    session: Session,
    alert_id: int,
    *,
    owner_id: int | None = None,
    now: datetime | None = None,
) -> Sequence[Listing]:
    """Return the listings the alert would report right now.

    The frequency throttle is ignored and nothing is recorded.
    """

    alert = get_alert(session, alert_id, owner_id=owner_id)
    if not alert.is_active:
        raise ValidationError("Cette alerte est désactivée")

    settings = get_settings()
    current = now or now_in_app_timezone()
    cutoff = matching_cutoff(alert, now=current, lookback_days=settings.alert_lookback_days)
    candidates = ListingRepository(session).list_created_after(cutoff)
    return select_new_matches(
        alert,
        candidates,
        now=current,
        limit=settings.alert_match_limit,
        lookback_days=settings.alert_lookback_days,
    )


__all__ = ["check_alert_now"]
