"""Use cases for managing and sweeping search alerts."""

from .alert_history import get_alert_history, get_alert_statistics
from .check_alert import check_alert_now
from .create_alert import create_alert
from .delete_alert import delete_alert
from .get_alert import get_alert
from .list_user_alerts import list_user_alerts
from .matching import (
    alert_matches_listing,
    is_alert_due,
    matching_cutoff,
    select_new_matches,
)
from .sweep import AlertSweepReport, AlertSweepResult, run_alert_sweep, sweep_alerts
from .toggle_alert import toggle_alert
from .update_alert import update_alert

__all__ = [
    "AlertSweepReport",
    "AlertSweepResult",
    "alert_matches_listing",
    "check_alert_now",
    "create_alert",
    "delete_alert",
    "get_alert",
    "get_alert_history",
    "get_alert_statistics",
    "is_alert_due",
    "list_user_alerts",
    "matching_cutoff",
    "run_alert_sweep",
    "select_new_matches",
    "sweep_alerts",
    "toggle_alert",
    "update_alert",
]
