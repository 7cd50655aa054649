"""Use case for counting listing views."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.config import get_settings
from app.infrastructure.repositories import ListingRepository
from app.utils import now_in_app_timezone

from .get_listing import get_listing


@dataclass(frozen=True)
class ViewOutcome:
    counted: bool
    view_count: int


def record_view(
    session: Session,
    listing_id: int,
    *,
    user_id: int | None = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
    now: datetime | None = None,
) -> ViewOutcome:
    """Count a view unless the same visitor was already counted recently.

    Signed-in visitors are de-duplicated by user id, anonymous ones by IP
    address, each with its own configurable window.
    """

    listing = get_listing(session, listing_id)
    settings = get_settings()
    current = now or now_in_app_timezone()
    repository = ListingRepository(session)

    if user_id is not None:
        window = timedelta(hours=settings.view_dedup_user_hours)
    else:
        window = timedelta(hours=settings.view_dedup_ip_hours)

    if window and repository.has_recent_view(
        listing_id, since=current - window, user_id=user_id, ip_address=ip_address
    ):
        return ViewOutcome(counted=False, view_count=listing.view_count)

    count = repository.record_view(
        listing_id,
        viewed_at=current,
        user_id=user_id,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    return ViewOutcome(counted=True, view_count=count)


__all__ = ["ViewOutcome", "record_view"]
