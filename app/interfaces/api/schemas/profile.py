"""Profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ProfileUpdate(BaseModel):
    email: EmailStr | None = None
    address: str | None = None
    city: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=50)
    bio: str | None = None
    avatar: str | None = Field(default=None, max_length=255)


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    email: str | None
    address: str | None
    city: str | None
    country: str
    bio: str | None
    avatar: str | None
    updated_at: datetime | None


__all__ = ["ProfileRead", "ProfileUpdate"]
