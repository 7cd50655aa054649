"""Entry points used outside the HTTP layer (scripts, schedulers)."""

from .alerts import run_alert_sweep
from .users import create_user

__all__ = [
    "create_user",
    "run_alert_sweep",
]
