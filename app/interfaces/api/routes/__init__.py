from fastapi import FastAPI

from .alerts import router as alerts_router
from .auth import router as auth_router
from .favorites import router as favorites_router
from .health import router as health_router
from .listings import router as listings_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .payments import router as payments_router
from .preferences import router as preferences_router
from .profile import router as profile_router
from .reservations import router as reservations_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(profile_router)
    app.include_router(preferences_router)
    app.include_router(listings_router)
    app.include_router(favorites_router)
    app.include_router(alerts_router)
    app.include_router(reservations_router)
    app.include_router(payments_router)
    app.include_router(messages_router)
    app.include_router(notifications_router)
