"""Message schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    recipient_id: int = Field(..., ge=1)
    content: str = Field(..., min_length=1)
    listing_id: int | None = None
    subject: str | None = Field(default=None, max_length=200)
    message_type: str = "demande_info"


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: int
    recipient_id: int
    listing_id: int | None
    subject: str | None
    content: str
    message_type: str
    is_read: bool
    sent_at: datetime | None


__all__ = ["MessageCreate", "MessageRead"]
