"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_CLIENT = "client"
ROLE_AGENT = "agent"
ROLE_ADMIN = "admin"
USER_ROLES = (ROLE_CLIENT, ROLE_AGENT, ROLE_ADMIN)


@dataclass
class User:
    """Core attributes describing a marketplace user."""

    id: int | None
    fullname: str
    telephone: str
    password: str
    role: str
    is_active: bool
    push_token: str | None
    created_at: datetime | None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.lower() == role.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def can_receive_push(self) -> bool:
        return self.is_active and bool(self.push_token)


__all__ = ["User", "USER_ROLES", "ROLE_CLIENT", "ROLE_AGENT", "ROLE_ADMIN"]
