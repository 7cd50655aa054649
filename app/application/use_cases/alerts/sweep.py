"""Periodic sweep that notifies alert owners about new matching listings."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session

from app.application.use_cases.notifications.push import PushDispatcher, dispatch_push
from app.config import get_settings
from app.domain.entities import (
    Alert,
    AlertHistoryEntry,
    Listing,
    Notification,
    PushMessage,
)
from app.domain.entities.notification import NOTIFICATION_TYPE_ALERT_MATCH
from app.infrastructure.notifications import ExpoPushClient
from app.infrastructure.repositories import AlertRepository, ListingRepository
from app.utils import now_in_app_timezone

from .matching import (
    DEFAULT_LOOKBACK_DAYS,
    DEFAULT_MATCH_LIMIT,
    is_alert_due,
    matching_cutoff,
    select_new_matches,
)

logger = logging.getLogger(__name__)


class AlertSweepStore(Protocol):
    """Data access needed by :func:`sweep_alerts`."""

    def list_sweepable_alerts(self) -> Sequence[tuple[Alert, str]]:
        """Active alerts of active owners with the owner's push token."""

    def list_candidate_listings(self, created_after: datetime) -> Sequence[Listing]:
        """Available listings created strictly after ``created_after``."""

    def record_notification(
        self,
        alert: Alert,
        listings: Sequence[Listing],
        *,
        notified_at: datetime,
        inbox: Notification,
    ) -> AlertHistoryEntry:
        """Persist history, counters and inbox entry as one unit."""


@dataclass
class AlertSweepResult:
    alert_id: int
    alert_name: str
    new_listings: int = 0
    success: bool = True
    error: str | None = None
    dispatched: bool = False


@dataclass
class AlertSweepReport:
    alerts_checked: int = 0
    alerts_skipped: int = 0
    notifications_sent: int = 0
    listings_found: int = 0
    results: list[AlertSweepResult] = field(default_factory=list)


def build_push_message(alert: Alert, token: str, listings: Sequence[Listing]) -> PushMessage:
    count = len(listings)
    return PushMessage(
        token=token,
        title=f"🎯 {count} nouvelle(s) propriété(s) correspond(ent) à votre alerte",
        body=f"{alert.name} - {count} bien(s) trouvé(s)",
        data={
            "type": "alerte",
            "alerte_id": alert.id,
            "nombre_proprietes": count,
            "listing_ids": [listing.id for listing in listings],
        },
    )


def build_inbox_notification(alert: Alert, listings: Sequence[Listing]) -> Notification:
    count = len(listings)
    return Notification(
        id=None,
        user_id=alert.user_id,
        event_type=NOTIFICATION_TYPE_ALERT_MATCH,
        title=f"{count} nouvelle(s) propriété(s) pour « {alert.name} »",
        message=f"{alert.name} - {count} bien(s) trouvé(s)",
        payload={
            "alert_id": alert.id,
            "listing_ids": [listing.id for listing in listings],
        },
    )


def sweep_alerts(
    store: AlertSweepStore,
    dispatcher: PushDispatcher,
    *,
    now: datetime,
    match_limit: int = DEFAULT_MATCH_LIMIT,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> AlertSweepReport:
    """Evaluate every sweepable alert once and notify owners of new matches.

    Alerts whose frequency interval has not elapsed are skipped without any
    read or write. A failure on one alert is recorded in its result and the
    sweep moves on. Once history is recorded it stays recorded even if the
    push delivery fails afterwards.
    """

    report = AlertSweepReport()
    targets = store.list_sweepable_alerts()
    report.alerts_checked = len(targets)
    logger.info("Alert sweep started for %d alert(s)", len(targets))

    for alert, push_token in targets:
        if not is_alert_due(alert, now=now):
            report.alerts_skipped += 1
            logger.debug("Alert %s skipped, %s interval not elapsed", alert.id, alert.frequency)
            continue

        result = AlertSweepResult(alert_id=alert.id, alert_name=alert.name)
        try:
            cutoff = matching_cutoff(alert, now=now, lookback_days=lookback_days)
            candidates = store.list_candidate_listings(cutoff)
            matches = select_new_matches(
                alert,
                candidates,
                now=now,
                limit=match_limit,
                lookback_days=lookback_days,
            )
            result.new_listings = len(matches)
            if matches:
                store.record_notification(
                    alert,
                    matches,
                    notified_at=now,
                    inbox=build_inbox_notification(alert, matches),
                )
                report.notifications_sent += 1
                report.listings_found += len(matches)
                if alert.notifications_enabled:
                    result.dispatched = dispatch_push(
                        dispatcher,
                        build_push_message(alert, push_token, matches),
                        context=f"alert {alert.id}",
                    )
                logger.info("Alert %s notified with %d listing(s)", alert.id, len(matches))
        except Exception as exc:
            logger.exception("Alert %s could not be processed", alert.id)
            result.success = False
            result.error = str(exc)
        report.results.append(result)

    logger.info(
        "Alert sweep finished: %d notification(s), %d listing(s), %d skipped",
        report.notifications_sent,
        report.listings_found,
        report.alerts_skipped,
    )
    return report


class RepositoryAlertSweepStore:
    """:class:`AlertSweepStore` backed by the SQLAlchemy repositories."""

    def __init__(self, session: Session) -> None:
        self.alerts = AlertRepository(session)
        self.listings = ListingRepository(session)

    def list_sweepable_alerts(self) -> Sequence[tuple[Alert, str]]:
        return self.alerts.list_sweepable_alerts()

    def list_candidate_listings(self, created_after: datetime) -> Sequence[Listing]:
        return self.listings.list_created_after(created_after)

    def record_notification(
        self,
        alert: Alert,
        listings: Sequence[Listing],
        *,
        notified_at: datetime,
        inbox: Notification,
    ) -> AlertHistoryEntry:
        return self.alerts.record_notification(
            alert.id,
            listing_ids=[listing.id for listing in listings],
            notified_at=notified_at,
            inbox=inbox,
        )


def run_alert_sweep(
    session: Session,
    *,
    dispatcher: PushDispatcher | None = None,
    now: datetime | None = None,
) -> AlertSweepReport:
    """Run :func:`sweep_alerts` against the database and the Expo push service."""

    settings = get_settings()
    return sweep_alerts(
        RepositoryAlertSweepStore(session),
        dispatcher or ExpoPushClient(),
        now=now or now_in_app_timezone(),
        match_limit=settings.alert_match_limit,
        lookback_days=settings.alert_lookback_days,
    )


__all__ = [
    "AlertSweepReport",
    "AlertSweepResult",
    "AlertSweepStore",
    "PushDispatcher",
    "RepositoryAlertSweepStore",
    "build_inbox_notification",
    "build_push_message",
    "run_alert_sweep",
    "sweep_alerts",
]
