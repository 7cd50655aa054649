"""Tests for the timezone helpers."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from app.utils import ensure_app_timezone, hours_between


def test_hours_between_mixes_aware_and_naive_values():
    start = datetime(2026, 3, 10, 9, 0)
    end = ensure_app_timezone(start + timedelta(hours=25, minutes=30))

    assert hours_between(start, end) == pytest.approx(25.5)


def test_hours_between_rejects_missing_values():
    with pytest.raises(ValueError):
        hours_between(None, datetime(2026, 3, 10, 9, 0))
