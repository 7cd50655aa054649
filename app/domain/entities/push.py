"""Value objects exchanged with the push notification provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PushMessage:
    """A single notification addressed to one device token."""

    token: str
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of delivering one :class:`PushMessage`."""

    ok: bool
    error: str | None = None
    ticket_id: str | None = None

    @classmethod
    def success(cls, ticket_id: str | None = None) -> "DispatchResult":
        return cls(ok=True, ticket_id=ticket_id)

    @classmethod
    def failure(cls, error: str) -> "DispatchResult":
        return cls(ok=False, error=error)


__all__ = ["PushMessage", "DispatchResult"]
