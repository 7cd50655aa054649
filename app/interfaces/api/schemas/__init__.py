from .alert import (
    AlertCheckRead,
    AlertCreate,
    AlertCriteriaSchema,
    AlertHistoryRead,
    AlertRead,
    AlertStatisticsRead,
    AlertSweepReportRead,
    AlertSweepResultRead,
    AlertToggle,
    AlertUpdate,
)
from .auth import Token
from .envelope import ApiResponse, ok
from .favorite import (
    FavoriteCheckRequest,
    FavoriteCreate,
    FavoriteRead,
    FavoriteToggleRead,
    FavoriteWithListingRead,
)
from .listing import (
    HomeFeedRead,
    ListingAttributeRead,
    ListingCreate,
    ListingMediaCreate,
    ListingMediaRead,
    ListingRead,
    ListingStatusUpdate,
    ListingUpdate,
    RankedListingRead,
    SearchResultRead,
    ViewRecorded,
    VocabularyRead,
)
from .message import MessageCreate, MessageRead
from .notification import NotificationRead, UnreadCount
from .payment import PaymentCreate, PaymentRead, PaymentStatusUpdate
from .preference import OnboardingStatus, PreferencesRead, PreferencesUpdate
from .profile import ProfileRead, ProfileUpdate
from .reservation import (
    AvailableSlotsRead,
    ReservationCreate,
    ReservationRead,
    ReservationStatusUpdate,
)
from .user import PushTokenUpdate, UserCreate, UserRead

__all__ = [
    "AlertCheckRead",
    "AlertCreate",
    "AlertCriteriaSchema",
    "AlertHistoryRead",
    "AlertRead",
    "AlertStatisticsRead",
    "AlertSweepReportRead",
    "AlertSweepResultRead",
    "AlertToggle",
    "AlertUpdate",
    "ApiResponse",
    "AvailableSlotsRead",
    "FavoriteCheckRequest",
    "FavoriteCreate",
    "FavoriteRead",
    "FavoriteToggleRead",
    "FavoriteWithListingRead",
    "HomeFeedRead",
    "ListingAttributeRead",
    "ListingCreate",
    "ListingMediaCreate",
    "ListingMediaRead",
    "ListingRead",
    "ListingStatusUpdate",
    "ListingUpdate",
    "MessageCreate",
    "MessageRead",
    "NotificationRead",
    "OnboardingStatus",
    "PaymentCreate",
    "PaymentRead",
    "PaymentStatusUpdate",
    "PreferencesRead",
    "PreferencesUpdate",
    "ProfileRead",
    "ProfileUpdate",
    "PushTokenUpdate",
    "RankedListingRead",
    "ReservationCreate",
    "ReservationRead",
    "ReservationStatusUpdate",
    "SearchResultRead",
    "Token",
    "UnreadCount",
    "UserCreate",
    "UserRead",
    "ViewRecorded",
    "VocabularyRead",
    "ok",
]
