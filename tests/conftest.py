"""Shared fixtures: an in-memory database and factories for common records."""

from __future__ import annotations

import os
from datetime import datetime

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ.pop("CRON_SECRET", None)

import pytest

from app.config import get_settings

get_settings.cache_clear()

from app.domain.entities import Listing, ListingAttribute, User  # noqa: E402
from app.domain.entities.user import ROLE_AGENT, ROLE_CLIENT  # noqa: E402
from app.infrastructure.database import Base, SessionLocal, engine  # noqa: E402
from app.infrastructure import models  # noqa: E402,F401
from app.infrastructure.repositories import ListingRepository, UserRepository  # noqa: E402
from app.infrastructure.security import get_password_hash  # noqa: E402
from app.utils import ensure_app_timezone  # noqa: E402

VALID_PUSH_TOKEN = "ExponentPushToken[xxxxxxxxxxxxxxxxxxxxxx]"


@pytest.fixture()
def now() -> datetime:
    return ensure_app_timezone(datetime(2026, 3, 10, 9, 0))


@pytest.fixture()
def session():
    """Yield a session on freshly created tables."""

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def make_user(session):
    counter = {"value": 0}

    def _make_user(
        *,
        role: str = ROLE_CLIENT,
        push_token: str | None = VALID_PUSH_TOKEN,
        is_active: bool = True,
        password: str = "secret123",
    ) -> User:
        counter["value"] += 1
        return UserRepository(session).create(
            User(
                id=None,
                fullname=f"Utilisateur {counter['value']}",
                telephone=f"+2250700000{counter['value']:03d}",
                password=get_password_hash(password),
                role=role,
                is_active=is_active,
                push_token=push_token,
                created_at=None,
            )
        )

    return _make_user


@pytest.fixture()
def agent(make_user) -> User:
    return make_user(role=ROLE_AGENT, push_token=None)


@pytest.fixture()
def make_listing(session, agent):
    counter = {"value": 0}

    def _make_listing(
        *,
        created_at: datetime,
        city: str = "Dakar",
        district: str = "Plateau",
        property_type: str = "appartement",
        transaction_type: str = "location",
        price: float = 250_000,
        status: str = "disponible",
        surface: float | None = None,
        bedrooms: int | None = None,
        view_count: int = 0,
        owner_id: int | None = None,
    ) -> Listing:
        counter["value"] += 1
        attributes = []
        if surface is not None:
            attributes.append(ListingAttribute(name="superficie", value=str(surface)))
        if bedrooms is not None:
            attributes.append(ListingAttribute(name="chambres", value=str(bedrooms)))
        return ListingRepository(session).create(
            Listing(
                id=None,
                owner_id=owner_id or agent.id,
                title=f"Bien {counter['value']}",
                slug=f"bien-{counter['value']}",
                property_type=property_type,
                transaction_type=transaction_type,
                price=price,
                city=city,
                district=district,
                status=status,
                view_count=view_count,
                created_at=created_at,
                attributes=attributes,
            )
        )

    return _make_listing
