"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    hours_between,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)
from .text import slugify

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "hours_between",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "slugify",
]
