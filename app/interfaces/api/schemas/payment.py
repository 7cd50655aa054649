"""Payment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PaymentCreate(BaseModel):
    amount: float = Field(..., gt=0)
    method: str = "wave"
    payment_type: str = "frais_visite"
    reservation_id: int | None = None
    description: str | None = None
    reference: str | None = Field(default=None, max_length=100)


class PaymentStatusUpdate(BaseModel):
    status: str


class PaymentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    reservation_id: int | None
    amount: float
    method: str
    status: str
    reference: str
    payment_type: str
    description: str | None
    paid_at: datetime | None


__all__ = ["PaymentCreate", "PaymentRead", "PaymentStatusUpdate"]
