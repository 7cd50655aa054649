"""Routes for saved search alerts and the periodic alert sweep."""

import logging
import secrets

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.errors import DomainError
from app.application.use_cases.alerts import (
    check_alert_now,
    create_alert,
    delete_alert,
    get_alert,
    get_alert_history,
    get_alert_statistics,
    list_user_alerts,
    run_alert_sweep,
    toggle_alert,
    update_alert,
)
from app.application.use_cases.notifications import PushDispatcher
from app.config import get_settings
from app.domain.entities import AlertCriteria, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_optional_user,
    get_push_dispatcher,
)
from app.interfaces.api.routes_helpers import http_error
from app.interfaces.api.schemas import (
    AlertCheckRead,
    AlertCreate,
    AlertHistoryRead,
    AlertRead,
    AlertStatisticsRead,
    AlertSweepReportRead,
    AlertToggle,
    AlertUpdate,
    ApiResponse,
    ListingRead,
    ok,
)

router = APIRouter(prefix="/alerts", tags=["alerts"])
logger = logging.getLogger(__name__)


def _authorize_sweep(cron_secret: str | None, user: User | None) -> None:
    """Accept the scheduler's shared secret, or an administrator when none is set."""

    expected = get_settings().cron_secret
    if expected:
        if cron_secret and secrets.compare_digest(cron_secret, expected):
            return
    elif user is not None and user.is_admin():
        return
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Non autorisé")


@router.post("/cron/sweep", response_model=ApiResponse[AlertSweepReportRead])
def sweep_all_alerts(
    db: Session = Depends(get_db),
    dispatcher: PushDispatcher = Depends(get_push_dispatcher),
    x_cron_secret: str | None = Header(default=None),
    current_user: User | None = Depends(get_optional_user),
):
    """Check every active alert and notify users about new matches."""

    _authorize_sweep(x_cron_secret, current_user)
    report = run_alert_sweep(db, dispatcher=dispatcher)
    logger.info(
        "Alert sweep: %s checked, %s skipped, %s notified",
        report.alerts_checked,
        report.alerts_skipped,
        report.notifications_sent,
    )
    return ok(
        AlertSweepReportRead.model_validate(report),
        f"{report.notifications_sent} notification(s) envoyée(s)",
    )


@router.post(
    "/",
    response_model=ApiResponse[AlertRead],
    status_code=status.HTTP_201_CREATED,
)
def register_alert(
    payload: AlertCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Save a search as an alert."""

    try:
        alert = create_alert(
            db,
            user_id=current_user.id,
            name=payload.name,
            criteria=AlertCriteria(**payload.criteria.model_dump()),
            frequency=payload.frequency,
            notifications_enabled=payload.notifications_enabled,
            is_active=payload.is_active,
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(AlertRead.model_validate(alert), "Alerte créée avec succès")


@router.get("/", response_model=ApiResponse[list[AlertRead]])
def list_alerts(
    active_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    alerts = list_user_alerts(db, user_id=current_user.id, active_only=active_only)
    return ok([AlertRead.model_validate(alert) for alert in alerts])


@router.get("/{alert_id}", response_model=ApiResponse[AlertRead])
def read_alert(
    alert_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        alert = get_alert(db, alert_id, owner_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(AlertRead.model_validate(alert))


@router.put("/{alert_id}", response_model=ApiResponse[AlertRead])
def edit_alert(
    alert_id: int,
    payload: AlertUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Change an alert; criteria fields that are omitted keep their value."""

    try:
        alert = update_alert(
            db,
            alert_id,
            owner_id=current_user.id,
            name=payload.name,
            frequency=payload.frequency,
            notifications_enabled=payload.notifications_enabled,
            is_active=payload.is_active,
            criteria_changes=payload.criteria,
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(AlertRead.model_validate(alert), "Alerte mise à jour")


@router.delete("/{alert_id}", response_model=ApiResponse[None])
def remove_alert(
    alert_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_alert(db, alert_id, owner_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(message="Alerte supprimée")


@router.patch("/{alert_id}/toggle", response_model=ApiResponse[AlertRead])
def switch_alert(
    alert_id: int,
    payload: AlertToggle | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        alert = toggle_alert(
            db,
            alert_id,
            owner_id=current_user.id,
            active=payload.active if payload else None,
        )
    except DomainError as exc:
        raise http_error(exc) from exc
    message = "Alerte activée" if alert.is_active else "Alerte désactivée"
    return ok(AlertRead.model_validate(alert), message)


@router.post("/{alert_id}/check", response_model=ApiResponse[AlertCheckRead])
def check_alert(
    alert_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Preview the listings the alert would report now, without notifying."""

    try:
        alert = get_alert(db, alert_id, owner_id=current_user.id)
        listings = check_alert_now(db, alert_id, owner_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(
        AlertCheckRead(
            alert=AlertRead.model_validate(alert),
            listings=[ListingRead.model_validate(listing) for listing in listings],
            count=len(listings),
        )
    )


@router.get("/{alert_id}/history", response_model=ApiResponse[list[AlertHistoryRead]])
def alert_history(
    alert_id: int,
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        entries = get_alert_history(db, alert_id, owner_id=current_user.id, limit=limit)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok([AlertHistoryRead.model_validate(entry) for entry in entries])


@router.get("/{alert_id}/statistics", response_model=ApiResponse[AlertStatisticsRead])
def alert_statistics(
    alert_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        stats = get_alert_statistics(db, alert_id, owner_id=current_user.id)
    except DomainError as exc:
        raise http_error(exc) from exc
    return ok(AlertStatisticsRead.model_validate(stats))


__all__ = ["router"]
