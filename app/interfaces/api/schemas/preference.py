"""Preference schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PreferencesUpdate(BaseModel):
    project: str | None = Field(default=None, description="acheter, louer or visiter")
    budget_max: float | None = Field(default=None, ge=0)
    cities: list[str] = Field(default_factory=list)
    property_types: list[str] = Field(default_factory=list)
    districts: list[str] = Field(default_factory=list)


class PreferencesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    project: str | None
    budget_max: float | None
    cities: list[str]
    property_types: list[str]
    districts: list[str]
    created_at: datetime | None
    updated_at: datetime | None


class OnboardingStatus(BaseModel):
    completed: bool


__all__ = ["OnboardingStatus", "PreferencesRead", "PreferencesUpdate"]
