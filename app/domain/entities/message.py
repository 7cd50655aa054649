"""Domain entity representing a message sent to an agency or owner."""

from dataclasses import dataclass
from datetime import datetime

MESSAGE_TYPES = (
    "demande_info",
    "demande_visite",
    "negociation_prix",
    "offre_achat",
    "autre",
)


@dataclass
class Message:
    """Direct message between two users, optionally about a listing."""

    id: int | None
    sender_id: int
    recipient_id: int
    content: str
    listing_id: int | None = None
    subject: str | None = None
    message_type: str = "demande_info"
    is_read: bool = False
    sent_at: datetime | None = None


__all__ = ["Message", "MESSAGE_TYPES"]
