"""Reservation schemas."""

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field


class ReservationCreate(BaseModel):
    listing_id: int = Field(..., ge=1)
    visit_date: date
    visit_time: time
    party_size: int = Field(default=1, ge=1)
    notes: str | None = None
    visitor_phone: str | None = Field(default=None, max_length=30)


class ReservationStatusUpdate(BaseModel):
    status: str
    agent_message: str | None = None


class ReservationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    listing_id: int
    visit_date: date
    visit_time: time
    party_size: int
    notes: str | None
    visitor_phone: str | None
    agent_message: str | None
    status: str
    created_at: datetime | None
    updated_at: datetime | None


class AvailableSlotsRead(BaseModel):
    listing_id: int
    visit_date: date
    slots: list[time]


__all__ = [
    "AvailableSlotsRead",
    "ReservationCreate",
    "ReservationRead",
    "ReservationStatusUpdate",
]
