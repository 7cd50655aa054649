"""Tests for alert input validation."""

import pytest

from app.application.errors import ValidationError
from app.application.use_cases.alerts.validators import (
    normalize_alert_name,
    normalize_frequency,
    validate_criteria,
)
from app.domain.entities import AlertCriteria


def test_criteria_are_trimmed():
    cleaned = validate_criteria(AlertCriteria(city="  Dakar ", district="   "))

    assert cleaned.city == "Dakar"
    assert cleaned.district is None


def test_transaction_type_alone_is_not_enough():
    with pytest.raises(ValidationError):
        validate_criteria(AlertCriteria(transaction_type="location"))


@pytest.mark.parametrize(
    "criteria",
    [
        AlertCriteria(city="Dakar", price_min=300_000, price_max=200_000),
        AlertCriteria(surface_min=120, surface_max=80),
        AlertCriteria(city="Dakar", price_min=-1),
        AlertCriteria(property_type="chateau"),
        AlertCriteria(city="Dakar", transaction_type="echange"),
    ],
)
def test_inconsistent_criteria_are_rejected(criteria):
    with pytest.raises(ValidationError):
        validate_criteria(criteria)


def test_equal_price_bounds_are_accepted():
    cleaned = validate_criteria(AlertCriteria(city="Dakar", price_min=1000, price_max=1000))

    assert cleaned.price_min == cleaned.price_max == 1000


def test_alert_name_is_required_and_bounded():
    assert normalize_alert_name("  Ma recherche ") == "Ma recherche"
    with pytest.raises(ValidationError):
        normalize_alert_name("   ")
    with pytest.raises(ValidationError):
        normalize_alert_name("x" * 101)


def test_frequency_must_be_known():
    assert normalize_frequency("hebdomadaire") == "hebdomadaire"
    with pytest.raises(ValidationError):
        normalize_frequency("horaire")
