"""Shared plumbing for SQLAlchemy repositories."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.orm import Session


class SessionRepository:
    """Base class binding a repository to a session.

    Write methods commit immediately unless the repository is created with
    ``autocommit=False``; in that case they only flush so the caller can group
    several writes inside :func:`app.infrastructure.database.transaction`.
    """

    def __init__(self, session: Session, *, autocommit: bool = True) -> None:
        self.session = session
        self.autocommit = autocommit

    def _save(self, model) -> None:
        self.session.add(model)
        self._finish()
        self.session.refresh(model)

    def _finish(self) -> None:
        if self.autocommit:
            self.session.commit()
        else:
            self.session.flush()


def to_float(value: Decimal | float | int | None) -> float | None:
    return float(value) if value is not None else None


__all__ = ["SessionRepository", "to_float"]
