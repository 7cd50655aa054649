"""Alert schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .listing import ListingRead


class AlertCriteriaSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    property_type: str | None = None
    transaction_type: str | None = "location"
    city: str | None = Field(default=None, max_length=100)
    district: str | None = Field(default=None, max_length=100)
    price_min: float | None = Field(default=None, ge=0)
    price_max: float | None = Field(default=None, ge=0)
    surface_min: float | None = Field(default=None, ge=0)
    surface_max: float | None = Field(default=None, ge=0)
    min_bedrooms: int | None = Field(default=None, ge=0)
    min_bathrooms: int | None = Field(default=None, ge=0)
    amenities: list[str] = Field(default_factory=list)


class AlertCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    criteria: AlertCriteriaSchema
    frequency: str = "quotidien"
    notifications_enabled: bool = True
    is_active: bool = True


class AlertUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    frequency: str | None = None
    notifications_enabled: bool | None = None
    is_active: bool | None = None
    criteria: dict[str, object] | None = Field(
        default=None, description="Criteria fields to change; omitted fields are kept"
    )


class AlertToggle(BaseModel):
    active: bool | None = Field(
        default=None, description="Target state; omitted flips the current state"
    )


class AlertRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    criteria: AlertCriteriaSchema
    is_active: bool
    frequency: str
    notifications_enabled: bool
    created_at: datetime | None
    updated_at: datetime | None
    last_notified_at: datetime | None
    notification_count: int
    last_match_count: int


class AlertCheckRead(BaseModel):
    alert: AlertRead
    listings: list[ListingRead]
    count: int


class AlertHistoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    alert_id: int
    match_count: int
    listing_ids: list[int]
    notified_at: datetime | None
    status: str


class AlertStatisticsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_notifications: int
    average_matches: float
    max_matches: int
    min_matches: int
    last_notified_at: datetime | None


class AlertSweepResultRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    alert_id: int
    alert_name: str
    new_listings: int
    success: bool
    error: str | None = None
    dispatched: bool


class AlertSweepReportRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    alerts_checked: int
    alerts_skipped: int
    notifications_sent: int
    listings_found: int
    results: list[AlertSweepResultRead]


__all__ = [
    "AlertCheckRead",
    "AlertCreate",
    "AlertCriteriaSchema",
    "AlertHistoryRead",
    "AlertRead",
    "AlertStatisticsRead",
    "AlertSweepReportRead",
    "AlertSweepResultRead",
    "AlertToggle",
    "AlertUpdate",
]
