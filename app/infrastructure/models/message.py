"""SQLAlchemy model for direct messages."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class MessageModel(Base):
    """Message sent by a user to an agency or owner."""

    __tablename__ = "message"

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recipient_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    listing_id = Column(
        Integer, ForeignKey("listing.id", ondelete="SET NULL"), nullable=True
    )
    subject = Column(String(200), nullable=True)
    content = Column(Text, nullable=False)
    message_type = Column(String(30), nullable=False, default="demande_info")
    is_read = Column(Boolean, nullable=False, default=False)
    sent_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["MessageModel"]
