"""Repository implementations for infrastructure layer."""

from .alert_repository import AlertRepository
from .favorite_repository import FavoriteRepository
from .listing_repository import ListingRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .payment_repository import PaymentRepository
from .preference_repository import PreferenceRepository
from .profile_repository import ProfileRepository
from .reservation_repository import ReservationRepository
from .user_repository import UserRepository

__all__ = [
    "AlertRepository",
    "FavoriteRepository",
    "ListingRepository",
    "MessageRepository",
    "NotificationRepository",
    "PaymentRepository",
    "PreferenceRepository",
    "ProfileRepository",
    "ReservationRepository",
    "UserRepository",
]
