"""SQLAlchemy model for payment records."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)

from app.infrastructure.database import Base


class PaymentModel(Base):
    """Book-keeping entry for a payment made by a user."""

    __tablename__ = "payment"
    __table_args__ = (CheckConstraint("amount >= 0", name="ck_payment_amount_positive"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reservation_id = Column(
        Integer,
        ForeignKey("reservation.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    amount = Column(Numeric(15, 2), nullable=False)
    method = Column(String(30), nullable=False, default="wave")
    status = Column(String(20), nullable=False, default="en_attente")
    reference = Column(String(100), nullable=False, unique=True, index=True)
    payment_type = Column(String(30), nullable=False, default="frais_visite")
    description = Column(Text, nullable=True)
    paid_at = Column(DateTime(), nullable=True)


__all__ = ["PaymentModel"]
