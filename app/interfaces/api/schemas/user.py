"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    fullname: str = Field(..., min_length=1, max_length=120)
    telephone: str = Field(..., min_length=8, max_length=30)
    password: str = Field(..., min_length=6)
    role: str = Field(default="client")


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fullname: str
    telephone: str
    role: str
    is_active: bool
    has_push_token: bool = False
    created_at: datetime | None


class PushTokenUpdate(BaseModel):
    push_token: str | None = Field(
        default=None, description="Expo push token, or null to unregister the device"
    )


__all__ = ["PushTokenUpdate", "UserCreate", "UserRead"]
