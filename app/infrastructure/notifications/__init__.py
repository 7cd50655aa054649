"""Push notification delivery for the infrastructure layer."""

from .push import EXPO_TOKEN_PATTERN, ExpoPushClient, is_valid_push_token

__all__ = ["ExpoPushClient", "EXPO_TOKEN_PATTERN", "is_valid_push_token"]
